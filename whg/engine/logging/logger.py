from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.api import Action, ActionOutcome
    from ...models.run import Run

from ...events import ActionEvent, StageEvent, event_bus
from ...models.enums import ActionLogResult


def log_event(
    run: Run,
    actor: str | None,
    action: Action | None,
    result: ActionLogResult,
    message: str | None = None,
    outcome: ActionOutcome | None = None,
) -> None:
    event_bus.emit(
        ActionEvent(
            run_id=run.id,
            stage=run.stage,
            turn=run.turn,
            actor=actor,
            action=action,
            result=result,
            message=message,
            outcome=outcome.model_dump(mode="json") if outcome else None,
        )
    )


def log_illegal(run: Run, action: Action, explanation: str) -> None:
    log_event(run, run.player.name, action, ActionLogResult.ILLEGAL, explanation)


def log_error(run: Run, action: Action | None, error: Exception) -> None:
    log_event(run, None, action, ActionLogResult.ERROR, str(error))


def log_stage(run: Run, message: str) -> None:
    event_bus.emit(StageEvent(run_id=run.id, stage=run.stage, message=message))
