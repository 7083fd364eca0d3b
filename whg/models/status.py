from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from .enums import StatusKind


class StatusEffectDef(BaseModel):
    """Display name and per-tick behaviour of a status kind.

    - tick_damage: health lost each tick, applied directly (defense ignored)
    - attack_delta: shift applied to the carrier's attack while active
    """

    model_config = ConfigDict(frozen=True)

    kind: StatusKind
    name: str
    tick_damage: int = 0
    attack_delta: int = 0


# Read-only after import; nothing writes to it at runtime.
STATUS_EFFECTS: Mapping[StatusKind, StatusEffectDef] = MappingProxyType(
    {
        StatusKind.POISON: StatusEffectDef(
            kind=StatusKind.POISON, name="Poison", tick_damage=5
        ),
        StatusKind.BLEED: StatusEffectDef(
            kind=StatusKind.BLEED, name="Bleed", tick_damage=3
        ),
        StatusKind.STUN: StatusEffectDef(kind=StatusKind.STUN, name="Stun"),
        StatusKind.STRENGTH_UP: StatusEffectDef(
            kind=StatusKind.STRENGTH_UP, name="Strength Up", attack_delta=10
        ),
        StatusKind.WEAKNESS: StatusEffectDef(
            kind=StatusKind.WEAKNESS, name="Weakness", attack_delta=-5
        ),
    }
)


def status_name(kind: StatusKind) -> str:
    return STATUS_EFFECTS[kind].name
