from __future__ import annotations

from pydantic import BaseModel, Field

from ..models.enums import StatusKind, UnitClass
from ..models.skills import Skill, StatusApplication


class ClassDef(BaseModel):
    """Starting stats plus the three-skill table of a playable class."""

    unit_class: UnitClass
    label: str
    description: str
    max_health: int
    max_mana: int
    attack: int
    defense: int = 0
    skills: list[Skill] = Field(min_length=3, max_length=3)


class BossDef(BaseModel):
    name: str
    skill_names: tuple[str, str, str]


_REG: dict[UnitClass, ClassDef] = {}


def register_class(c: ClassDef) -> ClassDef:
    _REG[c.unit_class] = c
    return c


def get_class(unit_class: UnitClass) -> ClassDef:
    if unit_class not in _REG:
        raise KeyError(f"Unknown class: {unit_class.value}")
    return _REG[unit_class]


def list_classes() -> dict[UnitClass, ClassDef]:
    return dict(_REG)


# ----- Player classes -----

WARRIOR = register_class(
    ClassDef(
        unit_class=UnitClass.WARRIOR,
        label="Warrior",
        description="High HP, Medium MP, Physical skills",
        max_health=120,
        max_mana=50,
        attack=20,
        defense=2,
        skills=[
            Skill(id="warrior.power_strike", name="Power Strike", mana_cost=15, damage_bonus=25),
            Skill(
                id="warrior.demoralizing_shout",
                name="Demoralizing Shout",
                mana_cost=10,
                target_status=StatusApplication(kind=StatusKind.WEAKNESS, duration=3),
                announce="{caster} uses {skill} on {target}!",
            ),
            Skill(
                id="warrior.battle_rage",
                name="Battle Rage",
                mana_cost=20,
                self_status=StatusApplication(kind=StatusKind.STRENGTH_UP, duration=3),
                announce="{caster} enters {skill}!",
            ),
        ],
    )
)

ARCHER = register_class(
    ClassDef(
        unit_class=UnitClass.ARCHER,
        label="Archer",
        description="Medium HP, Poison/Bleed skills",
        max_health=80,
        max_mana=35,
        attack=30,
        defense=1,
        skills=[
            Skill(
                id="archer.poison_arrow",
                name="Poison Arrow",
                mana_cost=10,
                damage_bonus=0,
                target_status=StatusApplication(kind=StatusKind.POISON, duration=3),
                announce="{caster} shoots {skill} at {target} for {damage} damage!",
            ),
            Skill(
                id="archer.piercing_shot",
                name="Piercing Shot",
                mana_cost=15,
                damage_bonus=10,
                target_status=StatusApplication(kind=StatusKind.BLEED, duration=2),
            ),
            Skill(
                id="archer.double_shot",
                name="Double Shot",
                mana_cost=20,
                damage_bonus=0,
                hits=2,
                announce="{caster} uses {skill} on {target}!",
            ),
        ],
    )
)

MAGE = register_class(
    ClassDef(
        unit_class=UnitClass.MAGE,
        label="Mage",
        description="Low HP, High MP, Magic skills",
        max_health=70,
        max_mana=80,
        attack=25,
        defense=0,
        skills=[
            Skill(
                id="mage.fireball",
                name="Fireball",
                mana_cost=20,
                damage_bonus=20,
                announce="{caster} casts {skill} on {target} for {damage} damage!",
            ),
            Skill(
                id="mage.ice_nova",
                name="Ice Nova",
                mana_cost=15,
                target_status=StatusApplication(kind=StatusKind.STUN, duration=1),
                announce="{caster} casts {skill} on {target}!",
                follow_up="{target} is stunned for 1 turn!",
            ),
            Skill(
                id="mage.life_drain",
                name="Life Drain",
                mana_cost=25,
                damage_bonus=5,
                drain_divisor=2,
                announce="{caster} drains life from {target} for {damage} damage!",
            ),
        ],
    )
)

# ----- Bosses -----

BOSS_ROSTER: tuple[BossDef, ...] = (
    BossDef(name="Goblin King", skill_names=("Goblin Smash", "Poison Cloud", "Stunning Roar")),
    BossDef(name="Shadow Knight", skill_names=("Shadow Blade", "Dark Mist", "Shadow Bind")),
    BossDef(name="Crimson Wraith", skill_names=("Crimson Slash", "Blood Curse", "Crimson Howl")),
    BossDef(name="Lich Queen", skill_names=("Necroflame", "Soul Drain", "Necrotic Heal")),
    BossDef(name="Doom Reaper", skill_names=("Void Strike", "Void Corruption", "Void Stasis")),
)


def boss_skills(skill_names: tuple[str, str, str]) -> list[Skill]:
    """Every boss shares the same three formulas; only the names differ."""
    first, second, third = skill_names
    return [
        Skill(id="boss.skill1", name=first, mana_cost=15, damage_bonus=20),
        Skill(
            id="boss.skill2",
            name=second,
            mana_cost=20,
            damage_bonus=15,
            target_status=StatusApplication(kind=StatusKind.POISON, duration=3),
            follow_up="{target} is poisoned for 3 turns!",
        ),
        Skill(
            id="boss.skill3",
            name=third,
            mana_cost=25,
            damage_bonus=10,
            target_status=StatusApplication(kind=StatusKind.STUN, duration=1),
            self_heal=20,
            follow_up="{target} is stunned for 1 turn!",
        ),
    ]
