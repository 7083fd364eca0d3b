import pytest

import whg.engine.core as core
from whg.engine.errors import RunStateError
from whg.models.api import AttackAction, PassAction, UsePotionAction, UseSkillAction
from whg.models.enums import (
    ActionKind,
    BattleStatus,
    CoinSide,
    RunPhase,
    Side,
    StatusKind,
    UnitClass,
    UpgradeKind,
)
from whg.rulesets.catalog import health_potion
from tests.utils.scripted import ScriptedRNG


def _start(engine, unit_class=UnitClass.WARRIOR, name="Grom", **script):
    return engine.new_run(name, unit_class, rng=ScriptedRNG(**script))


def test_new_run_waits_for_coin_flip(engine, rng):
    run = engine.new_run("Grom", UnitClass.WARRIOR, rng=rng)
    assert run.phase == RunPhase.COIN_FLIP
    assert run.stage == 1
    assert run.boss is None
    assert run.seed == 0


def test_correct_guess_gives_player_first_turn(engine):
    run = _start(engine, choices=[CoinSide.TAILS])
    result, player_first, outcomes = engine.flip_coin(run, CoinSide.TAILS)
    assert (result, player_first, outcomes) == (CoinSide.TAILS, True, [])
    assert run.phase == RunPhase.BATTLE
    assert run.side_to_move == Side.PLAYER
    assert run.boss.name == "Goblin King"


def test_wrong_guess_lets_boss_open(engine):
    run = _start(engine, choices=[CoinSide.TAILS])
    _, player_first, outcomes = engine.flip_coin(run, CoinSide.HEADS)
    assert not player_first
    assert len(outcomes) == 1
    assert outcomes[0].label == "Goblin Smash"
    assert run.player.health == 120 - 33
    assert run.side_to_move == Side.PLAYER
    assert run.turn == 1
    assert "=== Goblin King's TURN ===" in run.player.battle_log


def test_attack_then_boss_reply(engine):
    run = _start(engine, ints=[3])
    engine.flip_coin(run, CoinSide.HEADS)
    ev, outcomes = engine.process_action(run, AttackAction())
    assert ev.legal
    assert [o.kind for o in outcomes] == [ActionKind.ATTACK, ActionKind.ATTACK]
    assert outcomes[0].target_health_before == 90
    assert outcomes[0].target_health_after == 70
    assert outcomes[1].actor == "Goblin King"
    assert run.player.health == 107
    assert run.side_to_move == Side.PLAYER
    assert run.turn == 2


def test_failed_skill_falls_back_to_basic_attack(engine):
    run = _start(engine, ints=[3])
    engine.flip_coin(run, CoinSide.HEADS)
    run.player.mana = 10
    ev = engine.evaluate(run, UseSkillAction(slot=1))
    assert ev.legal and "falls back" in ev.explanation
    _, outcomes = engine.process_action(run, UseSkillAction(slot=1))
    first = outcomes[0]
    assert first.fallback and not first.success
    assert first.actor_mana_after == 10
    assert run.boss.health == 70
    assert "Not enough MP for Power Strike!" in first.messages
    assert "Using basic attack instead." in first.messages


def test_boss_without_mana_falls_back_too(engine):
    run = _start(engine, ints=[0])
    engine.flip_coin(run, CoinSide.HEADS)
    run.boss.mana = 0
    _, outcomes = engine.process_action(run, PassAction())
    boss_turn = outcomes[1]
    assert boss_turn.fallback
    assert run.player.health == 120 - 13


def test_potion_is_a_free_action(engine):
    run = _start(engine)
    engine.flip_coin(run, CoinSide.HEADS)
    run.player.add_item(health_potion())
    run.player.health = 50
    _, outcomes = engine.process_action(run, UsePotionAction(index=0))
    assert len(outcomes) == 1
    assert outcomes[0].free_action
    assert run.player.health == 80
    assert run.player.potions == []
    assert run.side_to_move == Side.PLAYER
    assert run.turn == 1


def test_stunned_boss_skips_once(engine):
    run = _start(engine, UnitClass.MAGE, "Ezra")
    engine.flip_coin(run, CoinSide.HEADS)
    _, outcomes = engine.process_action(run, UseSkillAction(slot=2))
    assert len(outcomes) == 2
    assert outcomes[1].skipped
    assert not run.boss.has_status(StatusKind.STUN)
    assert "Goblin King is stunned and skips turn!" in run.player.battle_log
    assert run.player.health == run.player.max_health
    assert run.side_to_move == Side.PLAYER
    assert run.turn == 2


def test_stunned_player_loses_a_turn(engine):
    run = _start(engine, ints=[2], choices=[CoinSide.TAILS])
    _, _, outcomes = engine.flip_coin(run, CoinSide.HEADS)
    # Stunning Roar, skipped player turn, Goblin Smash
    assert len(outcomes) == 3
    assert outcomes[1].skipped and outcomes[1].actor == "Grom"
    assert "You are stunned and skip your turn!" in run.player.battle_log
    assert not run.player.has_status(StatusKind.STUN)
    assert run.player.health == 120 - 23 - 33
    assert run.boss.mana == 20
    assert run.turn == 2
    assert run.side_to_move == Side.PLAYER


def test_status_tick_can_end_the_battle(engine):
    run = _start(engine)
    engine.flip_coin(run, CoinSide.HEADS)
    run.player.health = 3
    run.player.add_status(StatusKind.POISON, 2, "Goblin King")
    _, outcomes = engine.process_action(run, AttackAction())
    assert len(outcomes) == 1
    assert run.phase == RunPhase.DEFEAT
    assert engine.check_battle(run) == BattleStatus.PLAYER_DEFEATED


def test_player_death_wins_ties(engine):
    run = _start(engine)
    engine.flip_coin(run, CoinSide.HEADS)
    run.player.health = 3
    run.player.add_status(StatusKind.POISON, 2, "Goblin King")
    run.boss.health = 1
    engine.process_action(run, AttackAction())
    assert not run.boss.is_alive()
    assert run.phase == RunPhase.DEFEAT
    assert run.defeated_bosses == []


def test_boss_defeat_drops_potions_and_offers_items(engine):
    run = _start(engine, ints=[2])
    engine.flip_coin(run, CoinSide.HEADS)
    run.boss.health = 1
    engine.process_action(run, AttackAction())
    assert run.phase == RunPhase.REWARD
    assert run.defeated_bosses == ["Goblin King"]
    assert [p.name for p in run.player.potions] == ["Health Potion", "Health Potion"]
    assert "Goblin King dropped a Health Potion!" in run.player.battle_log
    assert [i.name for i in run.item_choices] == ["Fire Sword", "Ice Shield", "Vampire Ring"]

    chosen = engine.choose_reward(run, UpgradeKind.ATTACK, 0)
    assert chosen.name == "Fire Sword"
    assert run.player.base_attack == 40
    assert run.stage == 2
    assert run.phase == RunPhase.COIN_FLIP
    assert run.boss is None and run.item_choices == []

    engine.flip_coin(run, CoinSide.HEADS)
    assert run.boss.name == "Shadow Knight"


def test_reward_index_out_of_range(engine):
    run = _start(engine)
    engine.flip_coin(run, CoinSide.HEADS)
    run.boss.health = 1
    engine.process_action(run, AttackAction())
    with pytest.raises(IndexError):
        engine.choose_reward(run, UpgradeKind.HEAL, 5)
    assert run.phase == RunPhase.REWARD


def test_five_victories_win_the_run(engine):
    run = _start(engine)
    for stage in range(1, 6):
        engine.flip_coin(run, CoinSide.HEADS)
        assert run.stage == stage
        run.boss.health = 1
        engine.process_action(run, AttackAction())
        if stage < 5:
            assert run.phase == RunPhase.REWARD
            engine.choose_reward(run, UpgradeKind.DEFENSE, 1)
    assert run.phase == RunPhase.VICTORY
    assert run.finished
    assert run.player.is_alive()
    assert run.defeated_bosses == [
        "Goblin King",
        "Shadow Knight",
        "Crimson Wraith",
        "Lich Queen",
        "Doom Reaper",
    ]
    assert run.item_choices == []


def test_defeat_ends_run_without_another_boss(engine, monkeypatch):
    built = []
    real_create_boss = core.create_boss

    def counting_create_boss(stage):
        built.append(stage)
        return real_create_boss(stage)

    monkeypatch.setattr(core, "create_boss", counting_create_boss)
    run = _start(engine)
    engine.flip_coin(run, CoinSide.HEADS)
    run.player.health = 1
    engine.process_action(run, PassAction())
    assert run.phase == RunPhase.DEFEAT
    assert run.finished
    with pytest.raises(RunStateError):
        engine.flip_coin(run, CoinSide.HEADS)
    with pytest.raises(RunStateError):
        engine.choose_reward(run, UpgradeKind.HEAL, 0)
    assert built == [1]


def test_phase_guards(engine):
    run = _start(engine)
    with pytest.raises(RunStateError):
        engine.choose_reward(run, UpgradeKind.HEAL, 0)
    engine.flip_coin(run, CoinSide.HEADS)
    with pytest.raises(RunStateError):
        engine.flip_coin(run, CoinSide.HEADS)
    with pytest.raises(RunStateError):
        engine.take_turn(run, Side.BOSS, AttackAction())


def test_legal_actions(engine):
    run = _start(engine)
    assert engine.list_legal_actions(run).actions == []
    engine.flip_coin(run, CoinSide.HEADS)
    run.player.add_item(health_potion())
    kinds = [la.action.kind for la in engine.list_legal_actions(run).actions]
    assert kinds == [
        ActionKind.ATTACK,
        ActionKind.USE_SKILL,
        ActionKind.USE_SKILL,
        ActionKind.USE_SKILL,
        ActionKind.USE_POTION,
        ActionKind.PASS,
    ]
    assert not engine.evaluate(run, UsePotionAction(index=1)).legal


def test_drain_battle_logs(engine):
    run = _start(engine)
    engine.flip_coin(run, CoinSide.HEADS)
    engine.process_action(run, AttackAction())
    player_log, boss_log = engine.drain_battle_logs(run)
    assert "=== YOUR TURN ===" in player_log
    assert "Grom attacks Goblin King for 20 damage!" in player_log
    assert boss_log
    assert engine.drain_battle_logs(run) == ([], [])


def test_rejected_action_leaves_turn_untouched(engine):
    run = _start(engine)
    engine.flip_coin(run, CoinSide.HEADS)
    run.player.add_status(StatusKind.POISON, 3, "Goblin King")
    log_len = len(run.player.battle_log)
    with pytest.raises(RunStateError, match="no potion"):
        engine.take_turn(run, Side.PLAYER, UsePotionAction(index=7))
    assert run.side_to_move == Side.PLAYER
    assert run.turn == 1
    assert run.player.health == 120
    assert run.player.status_effects == {StatusKind.POISON: 3}
    assert len(run.player.battle_log) == log_len
