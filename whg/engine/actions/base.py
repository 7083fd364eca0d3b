from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ...models.api import Action, ActionOutcome
    from ...models.run import Run
    from ...models.units import Unit


class ActionHandler(Protocol):
    action_type: type
    # Free actions do not hand the turn to the opponent
    free_action: bool

    def evaluate(self, run: Run, actor: Unit, action: Action) -> tuple[bool, str]: ...

    def apply(
        self, run: Run, actor: Unit, target: Unit, action: Action
    ) -> ActionOutcome: ...


Registry = dict[type, ActionHandler]
