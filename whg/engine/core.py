from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.items import Item
    from ..models.units import Unit
    from .actions.base import Registry

from ..models.api import (
    Action,
    ActionOutcome,
    AttackAction,
    EvaluateResponse,
    LegalAction,
    LegalActionsResponse,
    PassAction,
    UsePotionAction,
    UseSkillAction,
)
from ..models.enums import (
    ActionLogResult,
    BattleStatus,
    CoinSide,
    RunPhase,
    Side,
    StatusKind,
    UnitClass,
    UpgradeKind,
)
from ..models.run import Run
from ..rulesets.constants import STAGE_COUNT
from ..rulesets.factory import create_boss, create_unit
from .actions.attack import AttackHandler
from .actions.pass_turn import PassHandler
from .actions.potion import PotionHandler
from .actions.skill import SkillHandler
from .auto_enemy import boss_autoplay
from .errors import RunStateError
from .logging.logger import log_error, log_event, log_illegal, log_stage
from .rng import RNG
from .systems import loot, turn, victory

default_handlers: Registry = {
    AttackHandler.action_type: AttackHandler(),
    SkillHandler.action_type: SkillHandler(),
    PotionHandler.action_type: PotionHandler(),
    PassHandler.action_type: PassHandler(),
}


class GameEngine:
    def __init__(self, handlers: Registry | None = None):
        self.handlers: Registry = handlers or default_handlers

    # ---------- Run lifecycle ----------

    def new_run(
        self,
        name: str,
        unit_class: UnitClass,
        *,
        seed: int | None = None,
        rng: RNG | None = None,
    ) -> Run:
        run = Run(player=create_unit(unit_class, name))
        run.bind_rng(rng or RNG(seed))
        log_stage(run, f"{name} the {unit_class.value.title()} enters the dungeon")
        return run

    def flip_coin(
        self, run: Run, guess: CoinSide
    ) -> tuple[CoinSide, bool, list[ActionOutcome]]:
        """Spawn the stage boss, settle turn order and play until the player
        has to decide."""
        self._require_phase(run, RunPhase.COIN_FLIP)
        result, player_first = turn.coin_flip(run.rng, guess)
        boss = create_boss(run.stage)
        turn.start_battle(run, boss, Side.PLAYER if player_first else Side.BOSS)
        run.coin_result = result
        log_stage(
            run,
            f"{boss.name} appeared; coin={result.value}, "
            f"{'player' if player_first else 'boss'} goes first",
        )
        _, outcomes = boss_autoplay(self, run)
        return result, player_first, outcomes

    def choose_reward(self, run: Run, upgrade: UpgradeKind, item_index: int) -> Item:
        self._require_phase(run, RunPhase.REWARD)
        if not 0 <= item_index < len(run.item_choices):
            raise IndexError(f"no item offer at index {item_index}")
        loot.apply_upgrade(run.player, upgrade)
        chosen = run.item_choices[item_index]
        run.player.add_item(chosen)
        run.item_choices = []
        run.stage += 1
        run.boss = None
        run.first_side = None
        run.coin_result = None
        run.turn = 1
        run.side_to_move = Side.PLAYER
        run.phase = RunPhase.COIN_FLIP
        log_stage(run, f"took {upgrade.value} and {chosen.name}")
        return chosen

    # ---------- Actions ----------

    def evaluate(self, run: Run, action: Action) -> EvaluateResponse:
        h = self.handlers.get(type(action))
        if not h:
            return EvaluateResponse(legal=False, explanation="unknown action")
        if run.phase != RunPhase.BATTLE:
            return EvaluateResponse(legal=False, explanation="no battle in progress")
        if run.side_to_move != Side.PLAYER:
            return EvaluateResponse(legal=False, explanation="not the player's turn")
        ok, why = h.evaluate(run, run.player, action)
        return EvaluateResponse(legal=ok, explanation=why)

    def process_action(
        self, run: Run, action: Action
    ) -> tuple[EvaluateResponse, list[ActionOutcome]]:
        ev = self.evaluate(run, action)
        if not ev.legal:
            log_illegal(run, action, ev.explanation)
            return ev, []
        try:
            outcomes = [self.take_turn(run, Side.PLAYER, action)]
        except Exception as e:
            log_error(run, action, e)
            raise
        _, more = boss_autoplay(self, run)
        outcomes.extend(more)
        return ev, outcomes

    def take_turn(
        self, run: Run, side: Side, action: Action | None, *, note: str | None = None
    ) -> ActionOutcome:
        """Resolve one turn for either side.

        Stunned actors skip; otherwise the action is applied. The actor's
        statuses tick afterwards and both units are checked for defeat. Only a
        free action (potion) keeps the turn with the actor. An action its
        handler rejects raises RunStateError before anything changes.
        """
        self._require_phase(run, RunPhase.BATTLE)
        if run.side_to_move != side:
            raise RunStateError(f"it is not the {side.value} side's turn")
        actor = run.unit_for(side)
        target = run.opponent_of(side)
        stunned = actor.has_status(StatusKind.STUN)
        if not stunned:
            if action is None:
                raise RunStateError(f"{actor.name} has to choose an action")
            # Rejected actions leave the run untouched: no tick, no hand over
            ok, why = self.handlers[type(action)].evaluate(run, actor, action)
            if not ok:
                raise RunStateError(why)

        run.player.log(turn.turn_banner(run, side))
        if stunned:
            outcome = turn.skip_stunned(run, actor)
            result = ActionLogResult.SKIPPED
        else:
            if note:
                run.player.log(note)
            outcome = self.handlers[type(action)].apply(run, actor, target, action)
            result = ActionLogResult.APPLIED

        turn.tick_statuses(actor, outcome)
        log_event(run, actor.name, action, result, outcome=outcome)

        status = victory.check(run)
        if status != BattleStatus.IN_PROGRESS:
            self._finish_battle(run, status)
        elif not outcome.free_action:
            turn.hand_over(run, side)
        return outcome

    def list_legal_actions(self, run: Run) -> LegalActionsResponse:
        out: list[LegalAction] = []
        if run.phase != RunPhase.BATTLE or run.side_to_move != Side.PLAYER:
            return LegalActionsResponse(actions=out)
        candidates: list[Action] = [AttackAction()]
        candidates.extend(UseSkillAction(slot=i + 1) for i in range(len(run.player.skills)))
        candidates.extend(UsePotionAction(index=i) for i in range(len(run.player.potions)))
        candidates.append(PassAction())
        for act in candidates:
            ev = self.evaluate(run, act)
            if ev.legal:
                out.append(LegalAction(action=act, explanation=ev.explanation))
        return LegalActionsResponse(actions=out)

    # ---------- Queries ----------

    def check_battle(self, run: Run) -> BattleStatus:
        return victory.check(run)

    def drain_battle_logs(self, run: Run) -> tuple[list[str], list[str]]:
        """Snapshot and clear both units' battle logs."""
        player_log = list(run.player.battle_log)
        run.player.clear_battle_log()
        boss_log: list[str] = []
        if run.boss is not None:
            boss_log = list(run.boss.battle_log)
            run.boss.clear_battle_log()
        return player_log, boss_log

    # ---------- Internals ----------

    def _require_phase(self, run: Run, phase: RunPhase) -> None:
        if run.phase != phase:
            raise RunStateError(
                f"run is in phase {run.phase.value}, expected {phase.value}"
            )

    def _finish_battle(self, run: Run, status: BattleStatus) -> None:
        boss: Unit = run.unit_for(Side.BOSS)
        if status == BattleStatus.PLAYER_DEFEATED:
            run.phase = RunPhase.DEFEAT
            run.player.log(f"You were defeated in stage {run.stage}!")
            log_stage(run, f"defeated by {boss.name}")
            return

        run.defeated_bosses.append(boss.name)
        run.player.log(f"You defeated {boss.name}!")
        for potion in loot.roll_potions(run.rng):
            run.player.add_item(potion)
            run.player.log(f"{boss.name} dropped a {potion.name}!")

        if run.stage < STAGE_COUNT:
            run.item_choices = loot.roll_equipment(run.rng)
            run.phase = RunPhase.REWARD
            log_stage(run, f"{boss.name} defeated")
        else:
            run.phase = RunPhase.VICTORY
            run.player.log("You defeated all bosses and conquered the dungeon!")
            log_stage(run, "all bosses defeated")
