from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

from .enums import (
    ActionKind,
    ActionLogResult,
    CoinSide,
    RunPhase,
    Side,
    UnitClass,
    UpgradeKind,
)
from .items import Item
from .units import Unit

# ----- Actions (discriminated union) -----


class AttackAction(BaseModel):
    kind: Literal[ActionKind.ATTACK] = ActionKind.ATTACK


class UseSkillAction(BaseModel):
    kind: Literal[ActionKind.USE_SKILL] = ActionKind.USE_SKILL
    slot: int = Field(ge=1, le=3)


class UsePotionAction(BaseModel):
    kind: Literal[ActionKind.USE_POTION] = ActionKind.USE_POTION
    index: int


class PassAction(BaseModel):
    kind: Literal[ActionKind.PASS] = ActionKind.PASS


Action = Annotated[
    AttackAction | UseSkillAction | UsePotionAction | PassAction,
    Field(discriminator="kind"),
]


class ActionOutcome(BaseModel):
    """Before/after snapshot of one resolved action, for rendering."""

    kind: ActionKind | None = None
    actor: str
    target: str | None = None
    success: bool = True
    label: str | None = None  # skill or potion name
    # Set when a skill could not be paid for and a basic attack was used instead
    fallback: bool = False
    skipped: bool = False
    free_action: bool = False
    target_health_before: int | None = None
    target_health_after: int | None = None
    actor_health_before: int = 0
    actor_health_after: int = 0
    actor_mana_before: int = 0
    actor_mana_after: int = 0
    messages: list[str] = Field(default_factory=list)


# ----- API IO -----


class CreateRunRequest(BaseModel):
    name: str = Field(min_length=1, max_length=40)
    unit_class: UnitClass
    seed: int | None = None

    @field_validator("unit_class")
    @classmethod
    def _playable(cls, v: UnitClass) -> UnitClass:
        if v == UnitClass.BOSS:
            raise ValueError("BOSS is not a playable class")
        return v


class RunView(BaseModel):
    id: str
    stage: int
    phase: RunPhase
    side_to_move: Side
    turn: int
    first_side: Side | None = None
    coin_result: CoinSide | None = None
    player: Unit
    boss: Unit | None = None
    item_choices: list[Item] = Field(default_factory=list)
    defeated_bosses: list[str] = Field(default_factory=list)
    seed: int | None = None


class CoinFlipRequest(BaseModel):
    guess: CoinSide


class CoinFlipResponse(BaseModel):
    result: CoinSide
    player_first: bool
    outcomes: list[ActionOutcome] = Field(default_factory=list)
    run: RunView


class EvaluateResponse(BaseModel):
    legal: bool
    explanation: str


class ApplyActionRequest(BaseModel):
    action: Action


class ApplyActionResponse(BaseModel):
    applied: bool
    explanation: str
    outcomes: list[ActionOutcome] = Field(default_factory=list)
    run: RunView


class RewardRequest(BaseModel):
    upgrade: UpgradeKind
    item_index: int = Field(ge=0, le=2)


# ----- Bulk legal listing -----


class LegalAction(BaseModel):
    action: Action
    explanation: str


class LegalActionsResponse(BaseModel):
    actions: list[LegalAction]


# ----- Logs -----


class ActionLogEntry(BaseModel):
    ts: datetime = Field(default_factory=datetime.now)
    run_id: str
    stage: int
    turn: int
    actor: str | None = None
    action: Action | None = None
    result: ActionLogResult = ActionLogResult.APPLIED
    message: str | None = None
    outcome: dict[str, Any] | None = None


class ActionLogResponse(BaseModel):
    entries: list[ActionLogEntry]


class BattleLogResponse(BaseModel):
    player: list[str]
    boss: list[str]
