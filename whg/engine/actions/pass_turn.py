from __future__ import annotations

from ...models.api import PassAction
from ...models.enums import ActionKind
from .base import ActionHandler
from .snapshot import OutcomeRecorder


class PassHandler(ActionHandler):
    action_type = PassAction
    free_action = False

    def evaluate(self, run, actor, action: PassAction):
        return True, "ok"

    def apply(self, run, actor, target, action: PassAction):
        rec = OutcomeRecorder(ActionKind.PASS, actor, None)
        actor.log(f"{actor.name} passes the turn.")
        return rec.finish()
