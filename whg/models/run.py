from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field, PrivateAttr

from ..engine.rng import RNG
from .enums import CoinSide, RunPhase, Side
from .items import Item
from .units import Unit


class Run(BaseModel):
    """One playthrough: a hero against the stage bosses, in memory only."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    player: Unit
    boss: Unit | None = None
    stage: int = 1
    phase: RunPhase = RunPhase.COIN_FLIP
    side_to_move: Side = Side.PLAYER
    turn: int = 1
    first_side: Side | None = None
    coin_result: CoinSide | None = None
    item_choices: list[Item] = Field(default_factory=list)
    defeated_bosses: list[str] = Field(default_factory=list)
    seed: int | None = None

    _rng: RNG = PrivateAttr(default_factory=RNG)

    @property
    def rng(self) -> RNG:
        return self._rng

    def bind_rng(self, rng: RNG) -> None:
        self._rng = rng
        self.seed = rng.seed

    @property
    def finished(self) -> bool:
        return self.phase in (RunPhase.VICTORY, RunPhase.DEFEAT)

    def unit_for(self, side: Side) -> Unit:
        if side == Side.PLAYER:
            return self.player
        if self.boss is None:
            raise LookupError("no boss in play")
        return self.boss

    def opponent_of(self, side: Side) -> Unit:
        return self.unit_for(Side.BOSS if side == Side.PLAYER else Side.PLAYER)
