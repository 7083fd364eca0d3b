from __future__ import annotations

import logging
import os

from . import storage
from .events import ActionEvent, StageEvent, event_bus
from .models.api import ActionLogEntry

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("whg.battle")


def _on_action_event(ev: ActionEvent) -> None:
    entry = ActionLogEntry(
        run_id=ev.run_id,
        stage=ev.stage,
        turn=ev.turn,
        actor=ev.actor,
        action=ev.action,
        result=ev.result,
        message=ev.message,
        outcome=ev.outcome,
    )
    storage.logs.append(ev.run_id, entry.model_dump_json())
    logger.debug(
        "[run %s] stage=%s turn=%s actor=%s result=%s %s",
        ev.run_id,
        ev.stage,
        ev.turn,
        ev.actor,
        ev.result.value,
        ev.message or "",
    )


def _on_stage_event(ev: StageEvent) -> None:
    logger.info("[run %s] stage %s: %s", ev.run_id, ev.stage, ev.message)


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


_registered = False


def register_listeners() -> None:
    global _registered
    if _registered:
        return
    event_bus.subscribe(ActionEvent, _on_action_event)
    event_bus.subscribe(StageEvent, _on_stage_event)
    _registered = True
