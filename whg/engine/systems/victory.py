from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.run import Run

from ...models.enums import BattleStatus


def check(run: Run) -> BattleStatus:
    # Player death wins ties: a hero who dies on the same action as the boss loses.
    if not run.player.is_alive():
        return BattleStatus.PLAYER_DEFEATED
    if run.boss is not None and not run.boss.is_alive():
        return BattleStatus.BOSS_DEFEATED
    return BattleStatus.IN_PROGRESS
