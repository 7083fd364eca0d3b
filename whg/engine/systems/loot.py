from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.items import Item
    from ...models.units import Unit
    from ..rng import RNG

from ...models.enums import UpgradeKind
from ...rulesets.catalog import EQUIPMENT_TEMPLATES, POTION_TEMPLATES
from ...rulesets.constants import (
    ITEM_CHOICES,
    POTION_DROP_MAX,
    POTION_DROP_MIN,
    UPGRADE_AMOUNTS,
)


def roll_potions(rng: RNG) -> list[Item]:
    """Boss drop: 1-3 potions, each health or mana with equal odds."""
    count = rng.randint(POTION_DROP_MIN, POTION_DROP_MAX)
    return [rng.choice(POTION_TEMPLATES)() for _ in range(count)]


def roll_equipment(rng: RNG, k: int = ITEM_CHOICES) -> list[Item]:
    """Distinct equipment offers; the ones not taken are simply discarded."""
    return [template() for template in rng.sample(EQUIPMENT_TEMPLATES, k)]


def apply_upgrade(unit: Unit, upgrade: UpgradeKind) -> None:
    amount = UPGRADE_AMOUNTS[upgrade]
    if upgrade == UpgradeKind.HEAL:
        unit.heal(amount)
    elif upgrade == UpgradeKind.RESTORE_MANA:
        unit.restore_mana(amount)
    elif upgrade == UpgradeKind.ATTACK:
        unit.increase_attack(amount)
    elif upgrade == UpgradeKind.DEFENSE:
        unit.increase_defense(amount)
