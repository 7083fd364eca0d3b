from __future__ import annotations

from collections.abc import Callable

from ..models.enums import ItemKind, ResourceKind
from ..models.items import Item
from .constants import HEALTH_POTION_AMOUNT, MANA_POTION_AMOUNT

# ----- Equipment templates -----


def fire_sword() -> Item:
    return Item(
        id="item.weapon.fire_sword",
        name="Fire Sword",
        description="Burns enemies with fire damage",
        kind=ItemKind.WEAPON,
        attack_bonus=15,
    )


def ice_shield() -> Item:
    return Item(
        id="item.armor.ice_shield",
        name="Ice Shield",
        description="Freezes attackers occasionally",
        kind=ItemKind.ARMOR,
        health_bonus=20,
        defense_bonus=10,
    )


def vampire_ring() -> Item:
    return Item(
        id="item.accessory.vampire_ring",
        name="Vampire Ring",
        description="Heals user when dealing damage",
        kind=ItemKind.ACCESSORY,
        attack_bonus=5,
    )


def poison_dagger() -> Item:
    return Item(
        id="item.weapon.poison_dagger",
        name="Poison Dagger",
        description="Poisons enemies on hit",
        kind=ItemKind.WEAPON,
        attack_bonus=8,
    )


def dragon_scale() -> Item:
    return Item(
        id="item.armor.dragon_scale",
        name="Dragon Scale",
        description="Grants fire resistance and strength",
        kind=ItemKind.ARMOR,
        attack_bonus=10,
        health_bonus=30,
        defense_bonus=5,
    )


def lightning_orb() -> Item:
    return Item(
        id="item.accessory.lightning_orb",
        name="Lightning Orb",
        description="Chance to stun enemies",
        kind=ItemKind.ACCESSORY,
        attack_bonus=12,
    )


EQUIPMENT_TEMPLATES: tuple[Callable[[], Item], ...] = (
    fire_sword,
    ice_shield,
    vampire_ring,
    poison_dagger,
    dragon_scale,
    lightning_orb,
)

# ----- Potion templates -----


def health_potion() -> Item:
    return Item(
        id="item.potion.health",
        name="Health Potion",
        description="Restores HP",
        kind=ItemKind.POTION,
        health_bonus=HEALTH_POTION_AMOUNT,
        restores=ResourceKind.HEALTH,
    )


def mana_potion() -> Item:
    return Item(
        id="item.potion.mana",
        name="Mana Potion",
        description="Restores MP",
        kind=ItemKind.POTION,
        mana_bonus=MANA_POTION_AMOUNT,
        restores=ResourceKind.MANA,
    )


POTION_TEMPLATES: tuple[Callable[[], Item], ...] = (health_potion, mana_potion)
