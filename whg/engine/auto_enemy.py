from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.enums import RunPhase, Side, StatusKind
from .ai import choose_action, describe

if TYPE_CHECKING:  # typing-only imports
    from ..models.api import ActionOutcome
    from ..models.run import Run


def boss_autoplay(
    engine, run: Run, max_chain: int = 100
) -> tuple[int, list[ActionOutcome]]:
    """Resolve turns until the player has a decision to make.

    Contract:
    - Inputs: engine (has take_turn(run, side, action)); run; max_chain
    - Behavior: plays the boss's turns with the random policy and resolves the
      player's turns that are lost to Stun; stops when the player can act,
      the battle is over or max_chain turns were resolved.
    - Output: (number of turns resolved, their outcomes in order).
    """
    applied = 0
    outcomes: list[ActionOutcome] = []
    while applied < max_chain and run.phase == RunPhase.BATTLE:
        if run.side_to_move == Side.BOSS:
            boss = run.unit_for(Side.BOSS)
            action, note = None, None
            if not boss.has_status(StatusKind.STUN):
                action = choose_action(run.rng, boss)
                note = describe(boss, action)
            outcomes.append(engine.take_turn(run, Side.BOSS, action, note=note))
        elif run.player.has_status(StatusKind.STUN):
            outcomes.append(engine.take_turn(run, Side.PLAYER, None))
        else:
            break
        applied += 1
    return applied, outcomes
