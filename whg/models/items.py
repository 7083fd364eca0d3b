from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from .enums import ItemKind, ResourceKind

if TYPE_CHECKING:
    from .units import Unit


class Potion(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    amount: int
    resource: ResourceKind

    def display_info(self) -> str:
        unit = "HP" if self.resource == ResourceKind.HEALTH else "MP"
        return f"{self.name} - Restores {self.amount} {unit}"


class Item(BaseModel):
    """A loot drop. Equipment applies its bonuses once, when picked up;
    potion items are turned into Potion stacks instead."""

    id: str = "item.example"
    name: str = "Item"
    description: str = ""
    kind: ItemKind = ItemKind.WEAPON
    attack_bonus: int = 0
    health_bonus: int = 0
    defense_bonus: int = 0
    mana_bonus: int = 0
    # Only meaningful for ItemKind.POTION
    restores: ResourceKind | None = None

    @property
    def is_potion(self) -> bool:
        return self.kind == ItemKind.POTION

    def apply_effect(self, unit: Unit) -> None:
        if self.attack_bonus > 0:
            unit.increase_attack(self.attack_bonus)
        if self.health_bonus > 0:
            unit.increase_max_health(self.health_bonus)
        if self.defense_bonus > 0:
            unit.increase_defense(self.defense_bonus)
        if self.mana_bonus > 0:
            unit.increase_max_mana(self.mana_bonus)

    def to_potion(self) -> Potion:
        if not self.is_potion or self.restores is None:
            raise ValueError(f"{self.name} is not a potion")
        amount = (
            self.health_bonus
            if self.restores == ResourceKind.HEALTH
            else self.mana_bonus
        )
        return Potion(name=self.name, amount=amount, resource=self.restores)

    def display_info(self) -> str:
        parts = [f"{self.name} - {self.description}"]
        if self.attack_bonus > 0:
            parts.append(f"[ATK +{self.attack_bonus}]")
        if self.health_bonus > 0:
            parts.append(f"[HP +{self.health_bonus}]")
        if self.defense_bonus > 0:
            parts.append(f"[DEF +{self.defense_bonus}]")
        if self.mana_bonus > 0:
            parts.append(f"[MP +{self.mana_bonus}]")
        return " ".join(parts)
