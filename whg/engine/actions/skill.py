from __future__ import annotations

from ...models.api import UseSkillAction
from ...models.enums import ActionKind
from ..systems.combat import skill_damage
from .base import ActionHandler
from .snapshot import OutcomeRecorder


class SkillHandler(ActionHandler):
    action_type = UseSkillAction
    free_action = False

    def evaluate(self, run, actor, action: UseSkillAction):
        if not 1 <= action.slot <= len(actor.skills):
            return False, "skill not found"
        skill = actor.skill(action.slot)
        if actor.mana < skill.mana_cost:
            return True, (
                f"ok (not enough MP for {skill.name}: "
                f"{actor.mana}/{skill.mana_cost}, falls back to basic attack)"
            )
        if skill.deals_damage:
            return True, f"ok (cost={skill.mana_cost}, damage={skill_damage(actor, skill)})"
        return True, f"ok (cost={skill.mana_cost})"

    def apply(self, run, actor, target, action: UseSkillAction):
        skill = actor.skill(action.slot)
        rec = OutcomeRecorder(ActionKind.USE_SKILL, actor, target)
        if actor.use_skill(action.slot, target):
            return rec.finish(label=skill.name)
        # Caller policy: an unaffordable skill becomes a free basic attack
        actor.log("Using basic attack instead.")
        actor.attack(target)
        return rec.finish(label=skill.name, success=False, fallback=True)
