from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.enums import Side

if TYPE_CHECKING:
    from ...models.skills import Skill
    from ...models.units import Unit


def _hp_line(unit: Unit, before: int) -> str:
    return f"{unit.name}'s HP: {before} -> {unit.health}/{unit.max_health}"


def skill_damage(caster: Unit, skill: Skill) -> int:
    """Raw damage of a single hit, before the target's defense."""
    if skill.damage_bonus is None:
        return 0
    return caster.current_attack + skill.damage_bonus


def basic_attack(attacker: Unit, target: Unit) -> int:
    dmg = attacker.current_attack
    target_before = target.health
    attacker.log(f"{attacker.name} attacks {target.name} for {dmg} damage!")
    applied = target.take_damage(dmg)
    attacker.log(_hp_line(target, target_before))
    return applied


def use_skill(caster: Unit, skill: Skill, target: Unit) -> bool:
    """Resolve one skill. Returns False, with no state change besides the
    log line, when the caster cannot pay the mana cost."""
    if not caster.spend_mana(skill.mana_cost):
        if caster.side == Side.BOSS:
            caster.log(f"{caster.name} doesn't have enough MP for {skill.name}!")
        else:
            caster.log(f"Not enough MP for {skill.name}!")
        return False

    dmg = skill_damage(caster, skill)
    target_before = target.health
    caster_before = caster.health
    attack_before = target.current_attack

    fmt = dict(caster=caster.name, skill=skill.name, target=target.name, damage=dmg)
    template = skill.announce or (
        "{caster} uses {skill} on {target} for {damage} damage!"
        if skill.deals_damage
        else "{caster} uses {skill}!"
    )
    caster.log(template.format(**fmt))

    if skill.deals_damage:
        for _ in range(skill.hits):
            target.take_damage(dmg)

    if skill.target_status is not None:
        target.add_status(
            skill.target_status.kind, skill.target_status.duration, caster.name
        )
    if skill.self_status is not None:
        prev_attack = caster.current_attack
        caster.add_status(
            skill.self_status.kind, skill.self_status.duration, caster.name
        )
        if caster.current_attack != prev_attack:
            caster.log(f"{caster.name}'s ATK: {prev_attack} -> {caster.current_attack}")

    # Drain heals from the raw skill damage, not from what got through defense
    if skill.drain_divisor:
        caster.heal(dmg // skill.drain_divisor)
    if skill.self_heal:
        caster.heal(skill.self_heal)

    if skill.deals_damage:
        caster.log(_hp_line(target, target_before))
    elif target.current_attack != attack_before:
        caster.log(f"{target.name}'s ATK: {attack_before} -> {target.current_attack}")
    if skill.follow_up:
        caster.log(skill.follow_up.format(**fmt))
    if caster.health != caster_before:
        caster.log(_hp_line(caster, caster_before))
    return True
