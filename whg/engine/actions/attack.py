from __future__ import annotations

from ...models.api import AttackAction
from ...models.enums import ActionKind
from .base import ActionHandler
from .snapshot import OutcomeRecorder


class AttackHandler(ActionHandler):
    action_type = AttackAction
    free_action = False

    def evaluate(self, run, actor, action: AttackAction):
        target = run.opponent_of(actor.side)
        return True, (
            f"ok (damage={max(1, actor.current_attack - target.defense)}, "
            f"target_hp={target.health})"
        )

    def apply(self, run, actor, target, action: AttackAction):
        rec = OutcomeRecorder(ActionKind.ATTACK, actor, target)
        actor.attack(target)
        return rec.finish(label="Attack")
