from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import TypeAdapter, ValidationError

from . import storage
from .engine.core import GameEngine
from .engine.errors import RunStateError
from .logging_listeners import configure_logging, register_listeners
from .models.api import (
    ActionLogEntry,
    ActionLogResponse,
    ApplyActionRequest,
    ApplyActionResponse,
    AttackAction,
    BattleLogResponse,
    CoinFlipRequest,
    CoinFlipResponse,
    CreateRunRequest,
    LegalActionsResponse,
    PassAction,
    RewardRequest,
    RunView,
    UsePotionAction,
    UseSkillAction,
)
from .models.enums import CoinSide, UnitClass
from .models.items import Item
from .models.run import Run
from .models.units import Unit
from .rulesets.classes import BOSS_ROSTER, list_classes

DEFAULT_SEED = os.getenv("WHG_SEED")

logger = logging.getLogger(__name__)

app = FastAPI(title="Wave Hunger Game - Turn Based RPG")
engine = GameEngine()
configure_logging()
register_listeners()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _view(run: Run) -> RunView:
    return RunView(
        id=run.id,
        stage=run.stage,
        phase=run.phase,
        side_to_move=run.side_to_move,
        turn=run.turn,
        first_side=run.first_side,
        coin_result=run.coin_result,
        player=run.player,
        boss=run.boss,
        item_choices=run.item_choices,
        defeated_bosses=run.defeated_bosses,
        seed=run.seed,
    )


def _load(rid: str) -> Run:
    run = storage.get(rid)
    if not run:
        raise HTTPException(404, "run not found")
    return run


@contextmanager
def _locked(rid: str) -> Iterator[Run]:
    """Load a run and keep its lock until the block ends."""
    with storage.locked(rid) as run:
        if not run:
            raise HTTPException(404, "run not found")
        yield run


@app.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True, "storage": "memory", "runs": len(storage.list_all())}


@app.get("/info")
def defaults_info():
    """Expose model schemas and examples so a client can build requests."""
    return {
        "models": {
            "unit": {
                "schema": Unit.model_json_schema(),
                "example": Unit().model_dump(mode="json"),
            },
            "item": {
                "schema": Item.model_json_schema(),
                "example": Item().model_dump(mode="json"),
            },
        },
        "actions": {
            "attack": AttackAction().model_dump(mode="json"),
            "use_skill": UseSkillAction(slot=1).model_dump(mode="json"),
            "use_potion": UsePotionAction(index=0).model_dump(mode="json"),
            "pass": PassAction().model_dump(mode="json"),
        },
        "requests": {
            "create_run": {
                "schema": CreateRunRequest.model_json_schema(),
                "example": {"name": "Hero", "unit_class": UnitClass.WARRIOR.value},
            },
            "coin_flip": {"example": {"guess": CoinSide.HEADS.value}},
        },
    }


@app.get("/classes")
def classes():
    return {
        "classes": [
            c.model_dump(mode="json") for c in list_classes().values()
        ],
        "bosses": [b.model_dump(mode="json") for b in BOSS_ROSTER],
    }


@app.get("/runs", response_model=list[RunView])
def list_runs():
    return [_view(r) for r in storage.list_all()]


@app.post("/runs", response_model=RunView)
def create_run(req: CreateRunRequest):
    seed = req.seed
    if seed is None and DEFAULT_SEED:
        seed = int(DEFAULT_SEED)
    run = engine.new_run(req.name, req.unit_class, seed=seed)
    storage.save(run)
    logger.info("created run %s (%s, seed=%s)", run.id, req.unit_class.value, run.seed)
    return _view(run)


@app.get("/runs/{rid}", response_model=RunView)
def get_run(rid: str):
    with _locked(rid) as run:
        return _view(run)


@app.delete("/runs/{rid}", status_code=204)
def delete_run(rid: str):
    if not storage.delete(rid):
        raise HTTPException(404, "run not found")
    return None


@app.post("/runs/{rid}/coin_flip", response_model=CoinFlipResponse)
def coin_flip(rid: str, req: CoinFlipRequest):
    with _locked(rid) as run:
        try:
            result, player_first, outcomes = engine.flip_coin(run, req.guess)
        except RunStateError as e:
            raise HTTPException(409, str(e))
        storage.save(run)
        return CoinFlipResponse(
            result=result, player_first=player_first, outcomes=outcomes, run=_view(run)
        )


@app.get("/runs/{rid}/legal_actions", response_model=LegalActionsResponse)
def list_legal_actions(rid: str):
    with _locked(rid) as run:
        return engine.list_legal_actions(run)


@app.post("/runs/{rid}/action", response_model=ApplyActionResponse)
def apply_action(rid: str, req: ApplyActionRequest):
    with _locked(rid) as run:
        try:
            ev, outcomes = engine.process_action(run, req.action)
        except RunStateError as e:
            raise HTTPException(409, str(e))
        if not ev.legal:
            raise HTTPException(400, ev.explanation)
        storage.save(run)
        return ApplyActionResponse(
            applied=True, explanation=ev.explanation, outcomes=outcomes, run=_view(run)
        )


@app.post("/runs/{rid}/reward", response_model=RunView)
def choose_reward(rid: str, req: RewardRequest):
    with _locked(rid) as run:
        try:
            engine.choose_reward(run, req.upgrade, req.item_index)
        except RunStateError as e:
            raise HTTPException(409, str(e))
        except IndexError as e:
            raise HTTPException(400, str(e))
        storage.save(run)
        return _view(run)


@app.get("/runs/{rid}/battle_log", response_model=BattleLogResponse)
def battle_log(rid: str):
    """Return and clear both units' battle logs."""
    with _locked(rid) as run:
        player_log, boss_log = engine.drain_battle_logs(run)
    return BattleLogResponse(player=player_log, boss=boss_log)


@app.get("/runs/{rid}/log", response_model=ActionLogResponse)
def get_action_log(rid: str, limit: int = Query(50, ge=1, le=1000)):
    _load(rid)
    raw = storage.logs.list(rid, limit)
    entries: list[ActionLogEntry] = []
    ta = TypeAdapter(ActionLogEntry)
    for s in raw:
        try:
            entries.append(ta.validate_json(s))
        except ValidationError:
            logger.warning("skipping malformed log entry for run %s", rid)
    return ActionLogResponse(entries=entries)
