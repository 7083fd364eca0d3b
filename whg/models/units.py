from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from ..engine.systems import combat
from .enums import ResourceKind, Side, StatusKind, UnitClass
from .items import Item, Potion
from .skills import Skill
from .status import STATUS_EFFECTS, status_name


class Unit(BaseModel):
    name: str = "Unit"
    unit_class: UnitClass = UnitClass.WARRIOR
    side: Side = Side.PLAYER
    max_health: int = 100
    health: int = 100
    max_mana: int = 50
    mana: int = 50
    base_attack: int = 10
    defense: int = 0
    # kind -> remaining turns; an absent key means inactive
    status_effects: dict[StatusKind, int] = Field(default_factory=dict)
    equipment: list[Item] = Field(default_factory=list)
    potions: list[Potion] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    battle_log: list[str] = Field(default_factory=list)

    # ---------- Queries ----------

    @computed_field
    @property
    def current_attack(self) -> int:
        deltas = [
            STATUS_EFFECTS[kind].attack_delta
            for kind in self.status_effects
            if self.has_status(kind) and STATUS_EFFECTS[kind].attack_delta
        ]
        if not deltas:
            return self.base_attack
        return max(1, self.base_attack + sum(deltas))

    @computed_field
    @property
    def alive(self) -> bool:
        return self.is_alive()

    def is_alive(self) -> bool:
        return self.health > 0

    def has_status(self, kind: StatusKind) -> bool:
        return self.status_effects.get(kind, 0) > 0

    def skill(self, slot: int) -> Skill:
        if not 1 <= slot <= len(self.skills):
            raise IndexError(f"{self.name} has no skill in slot {slot}")
        return self.skills[slot - 1]

    def status_line(self) -> str:
        line = (
            f"{self.name} - HP: {self.health}/{self.max_health}, "
            f"MP: {self.mana}/{self.max_mana}, "
            f"ATK: {self.current_attack}, DEF: {self.defense}"
        )
        if self.status_effects:
            active = " ".join(
                f"{status_name(k)}({d})" for k, d in self._ordered_statuses()
            )
            line += f" [Status: {active}]"
        return line

    # ---------- Battle log ----------

    def log(self, message: str) -> None:
        self.battle_log.append(message)

    def clear_battle_log(self) -> None:
        self.battle_log.clear()

    # ---------- Resources ----------

    def take_damage(self, amount: int, source: str = "", show_block: bool = True) -> int:
        applied = max(1, amount - self.defense)
        self._lose_health(applied, source)
        if show_block and self.defense > 0 and applied < amount:
            self.log(f"{self.name} blocked {amount - applied} damage!")
        return applied

    def _lose_health(self, amount: int, source: str = "") -> int:
        before = self.health
        self.health = max(0, self.health - amount)
        msg = f"{self.name} took {amount} damage"
        if source:
            msg += f" from {source}"
        msg += f"! [{before} -> {self.health}/{self.max_health} HP]"
        self.log(msg)
        return before - self.health

    def heal(self, amount: int) -> int:
        before = self.health
        self.health = min(self.max_health, self.health + amount)
        healed = self.health - before
        self.log(f"{self.name} healed {healed} HP! ({self.health}/{self.max_health})")
        return healed

    def restore_mana(self, amount: int) -> int:
        before = self.mana
        self.mana = min(self.max_mana, self.mana + amount)
        restored = self.mana - before
        self.log(f"{self.name} restored {restored} MP! ({self.mana}/{self.max_mana})")
        return restored

    def spend_mana(self, amount: int) -> bool:
        if self.mana < amount:
            return False
        self.mana -= amount
        return True

    # ---------- Permanent upgrades ----------

    def increase_max_health(self, amount: int) -> None:
        amount = max(0, amount)
        self.max_health += amount
        self.health += amount
        self.log(f"{self.name}'s max HP increased by {amount}!")

    def increase_max_mana(self, amount: int) -> None:
        amount = max(0, amount)
        self.max_mana += amount
        self.mana += amount
        self.log(f"{self.name}'s max MP increased by {amount}!")

    def increase_attack(self, amount: int) -> None:
        amount = max(0, amount)
        self.base_attack += amount
        self.log(f"{self.name}'s attack increased by {amount}!")

    def increase_defense(self, amount: int) -> None:
        amount = max(0, amount)
        self.defense += amount
        self.log(f"{self.name}'s defense increased by {amount}!")

    # ---------- Status effects ----------

    def add_status(self, kind: StatusKind, duration: int, source: str) -> None:
        self.status_effects[kind] = duration
        self.log(f"{source} applied {status_name(kind)} to {self.name}!")

    def clear_status(self, kind: StatusKind) -> None:
        self.status_effects.pop(kind, None)

    def _ordered_statuses(self) -> list[tuple[StatusKind, int]]:
        return [(k, self.status_effects[k]) for k in StatusKind if k in self.status_effects]

    def process_status_effects(self) -> None:
        if not self.is_alive():
            return
        for kind, remaining in self._ordered_statuses():
            effect = STATUS_EFFECTS[kind]
            if effect.tick_damage and self.is_alive():
                self._lose_health(effect.tick_damage, effect.name)
            remaining -= 1
            if remaining <= 0:
                del self.status_effects[kind]
                self.log(f"{self.name}'s {effect.name} wore off!")
            else:
                self.status_effects[kind] = remaining

    # ---------- Inventory ----------

    def add_item(self, item: Item) -> None:
        if item.is_potion:
            self.potions.append(item.to_potion())
            return
        self.equipment.append(item)
        item.apply_effect(self)
        self.log(f"{self.name} equipped {item.name}!")

    def use_potion(self, index: int) -> bool:
        if index < 0 or index >= len(self.potions):
            return False
        potion = self.potions.pop(index)
        if potion.resource == ResourceKind.HEALTH:
            self.heal(potion.amount)
        else:
            self.restore_mana(potion.amount)
        self.log(f"{self.name} used {potion.name}!")
        return True

    # ---------- Combat ----------

    def attack(self, target: Unit) -> int:
        return combat.basic_attack(self, target)

    def use_skill(self, slot: int, target: Unit) -> bool:
        return combat.use_skill(self, self.skill(slot), target)

    def use_skill1(self, target: Unit) -> bool:
        return self.use_skill(1, target)

    def use_skill2(self, target: Unit) -> bool:
        return self.use_skill(2, target)

    def use_skill3(self, target: Unit) -> bool:
        return self.use_skill(3, target)
