from pydantic import BaseModel, Field

from .enums import StatusKind


class StatusApplication(BaseModel):
    kind: StatusKind
    duration: int = Field(ge=1)


class Skill(BaseModel):
    """A mana-gated action resolved from a fixed formula.

    Damage is ``caster.current_attack + damage_bonus`` per hit; a skill with
    ``damage_bonus=None`` deals no damage. ``drain_divisor`` heals the caster
    for the damage dealt divided by it (0 disables).
    """

    id: str
    name: str
    mana_cost: int = Field(ge=0)
    damage_bonus: int | None = None
    hits: int = Field(default=1, ge=1)
    target_status: StatusApplication | None = None
    self_status: StatusApplication | None = None
    self_heal: int = 0
    drain_divisor: int = 0
    # Optional log lines; placeholders: {caster} {skill} {target} {damage}
    announce: str | None = None
    # Logged once the skill has landed, e.g. to spell out an applied status
    follow_up: str | None = None

    @property
    def deals_damage(self) -> bool:
        return self.damage_bonus is not None
