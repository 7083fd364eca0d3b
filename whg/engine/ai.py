from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.api import Action, AttackAction, UseSkillAction

if TYPE_CHECKING:
    from ..models.units import Unit
    from .rng import RNG


def boss_options() -> tuple[Action, ...]:
    return (
        UseSkillAction(slot=1),
        UseSkillAction(slot=2),
        UseSkillAction(slot=3),
        AttackAction(),
    )


def choose_action(rng: RNG, boss: Unit) -> Action:
    """Pick one of the boss's three skills or a basic attack, equal odds.

    Mana is not consulted: an unaffordable skill falls back to a basic
    attack when applied, same as for the player.
    """
    options = boss_options()
    return options[rng.randint(0, len(options) - 1)]


def describe(boss: Unit, action: Action) -> str:
    if isinstance(action, UseSkillAction):
        return f"{boss.name} uses {boss.skill(action.slot).name}!"
    return f"{boss.name} chooses to attack!"
