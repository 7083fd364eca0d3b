from __future__ import annotations

from ...models.api import UsePotionAction
from ...models.enums import ActionKind
from .base import ActionHandler
from .snapshot import OutcomeRecorder


class PotionHandler(ActionHandler):
    action_type = UsePotionAction
    free_action = True

    def evaluate(self, run, actor, action: UsePotionAction):
        if not 0 <= action.index < len(actor.potions):
            return False, "no potion at that index"
        return True, f"ok ({actor.potions[action.index].display_info()})"

    def apply(self, run, actor, target, action: UsePotionAction):
        label = (
            actor.potions[action.index].name
            if 0 <= action.index < len(actor.potions)
            else None
        )
        rec = OutcomeRecorder(ActionKind.USE_POTION, actor, None)
        used = actor.use_potion(action.index)
        return rec.finish(label=label, success=used, free_action=used)
