from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.run import Run
    from ...models.units import Unit
    from ..rng import RNG

from ...models.api import ActionOutcome
from ...models.enums import CoinSide, RunPhase, Side, StatusKind


def other_side(side: Side) -> Side:
    return Side.BOSS if side == Side.PLAYER else Side.PLAYER


def coin_flip(rng: RNG, guess: CoinSide) -> tuple[CoinSide, bool]:
    """Fair flip; the player moves first when the guess matches."""
    result = rng.choice((CoinSide.HEADS, CoinSide.TAILS))
    return result, result == guess


def start_battle(run: Run, boss: Unit, first_side: Side) -> None:
    run.boss = boss
    run.phase = RunPhase.BATTLE
    run.turn = 1
    run.first_side = first_side
    run.side_to_move = first_side


def turn_banner(run: Run, side: Side) -> str:
    if side == Side.PLAYER:
        return "=== YOUR TURN ==="
    return f"=== {run.unit_for(side).name}'s TURN ==="


def skip_stunned(run: Run, actor: Unit) -> ActionOutcome:
    """A stunned unit loses exactly one turn, then the stun is gone."""
    if actor.side == Side.PLAYER:
        msg = "You are stunned and skip your turn!"
    else:
        msg = f"{actor.name} is stunned and skips turn!"
    run.player.log(msg)
    actor.clear_status(StatusKind.STUN)
    return ActionOutcome(
        actor=actor.name,
        skipped=True,
        actor_health_before=actor.health,
        actor_health_after=actor.health,
        actor_mana_before=actor.mana,
        actor_mana_after=actor.mana,
        messages=[msg],
    )


def tick_statuses(actor: Unit, outcome: ActionOutcome) -> None:
    start = len(actor.battle_log)
    actor.process_status_effects()
    outcome.messages.extend(actor.battle_log[start:])
    outcome.actor_health_after = actor.health


def hand_over(run: Run, side: Side) -> None:
    nxt = other_side(side)
    if nxt == run.first_side:
        run.turn += 1
    run.side_to_move = nxt
