from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.api import ActionOutcome

if TYPE_CHECKING:
    from ...models.enums import ActionKind
    from ...models.units import Unit


class OutcomeRecorder:
    """Captures before/after values and the log lines one action produced."""

    def __init__(self, kind: ActionKind | None, actor: Unit, target: Unit | None):
        self.kind = kind
        self.actor = actor
        self.target = target
        self._actor_hp = actor.health
        self._actor_mp = actor.mana
        self._target_hp = target.health if target is not None else None
        self._actor_log = len(actor.battle_log)
        self._target_log = len(target.battle_log) if target is not None else 0

    def finish(self, **fields) -> ActionOutcome:
        messages = list(self.actor.battle_log[self._actor_log :])
        if self.target is not None and self.target is not self.actor:
            messages.extend(self.target.battle_log[self._target_log :])
        return ActionOutcome(
            kind=self.kind,
            actor=self.actor.name,
            target=self.target.name if self.target is not None else None,
            target_health_before=self._target_hp,
            target_health_after=self.target.health if self.target is not None else None,
            actor_health_before=self._actor_hp,
            actor_health_after=self.actor.health,
            actor_mana_before=self._actor_mp,
            actor_mana_after=self.actor.mana,
            messages=messages,
            **fields,
        )
