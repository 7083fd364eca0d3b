from __future__ import annotations

from ..models.enums import Side, UnitClass
from ..models.units import Unit
from .classes import BOSS_ROSTER, boss_skills, get_class
from .constants import (
    BOSS_ATTACK_BASE,
    BOSS_ATTACK_PER_STAGE,
    BOSS_HEALTH_BASE,
    BOSS_HEALTH_PER_STAGE,
    BOSS_MANA,
    STAGE_COUNT,
)


def create_unit(unit_class: UnitClass, name: str) -> Unit:
    """Build a fresh, full-resource player unit of the given class."""
    if unit_class == UnitClass.BOSS:
        raise ValueError("bosses are created per stage with create_boss()")
    c = get_class(unit_class)
    return Unit(
        name=name,
        unit_class=unit_class,
        side=Side.PLAYER,
        max_health=c.max_health,
        health=c.max_health,
        max_mana=c.max_mana,
        mana=c.max_mana,
        base_attack=c.attack,
        defense=c.defense,
        skills=[s.model_copy(deep=True) for s in c.skills],
    )


def create_boss(stage: int) -> Unit:
    if not 1 <= stage <= STAGE_COUNT:
        raise ValueError(f"stage must be within 1..{STAGE_COUNT}, got {stage}")
    boss = BOSS_ROSTER[stage - 1]
    max_health = BOSS_HEALTH_BASE + BOSS_HEALTH_PER_STAGE * stage
    return Unit(
        name=boss.name,
        unit_class=UnitClass.BOSS,
        side=Side.BOSS,
        max_health=max_health,
        health=max_health,
        max_mana=BOSS_MANA,
        mana=BOSS_MANA,
        base_attack=BOSS_ATTACK_BASE + BOSS_ATTACK_PER_STAGE * stage,
        defense=stage - 1,
        skills=boss_skills(boss.skill_names),
    )
