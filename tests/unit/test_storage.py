from whg import storage
from whg.engine.core import GameEngine
from whg.models.api import ActionLogEntry, UsePotionAction
from whg.models.enums import ActionLogResult, UnitClass


def test_lru_cap_evicts_oldest(monkeypatch):
    monkeypatch.setattr(storage, "MAX_RUNS", 2)
    eng = GameEngine()
    runs = [eng.new_run(f"P{i}", UnitClass.MAGE, seed=i) for i in range(3)]
    for r in runs[:2]:
        storage.save(r)
    # touch the first so the second becomes least recently used
    assert storage.get(runs[0].id) is runs[0]
    storage.save(runs[2])
    assert storage.get(runs[1].id) is None
    assert {r.id for r in storage.list_all()} == {runs[0].id, runs[2].id}


def test_delete_drops_run_and_log():
    eng = GameEngine()
    run = eng.new_run("P", UnitClass.ARCHER, seed=1)
    storage.save(run)
    storage.logs.append(run.id, "{}")
    assert storage.delete(run.id)
    assert storage.logs.list(run.id) == []
    assert not storage.delete(run.id)


def test_illegal_action_reaches_log_store():
    eng = GameEngine()
    run = eng.new_run("P", UnitClass.WARRIOR, seed=1)
    ev, outcomes = eng.process_action(run, UsePotionAction(index=0))
    assert not ev.legal
    assert outcomes == []
    raw = storage.logs.list(run.id)
    assert len(raw) == 1
    entry = ActionLogEntry.model_validate_json(raw[0])
    assert entry.result == ActionLogResult.ILLEGAL
    assert entry.message == "no battle in progress"


def test_log_store_limit():
    store = storage.RunLogStore(maxlen=3)
    for i in range(5):
        store.append("r", str(i))
    assert store.list("r") == ["2", "3", "4"]
    assert store.list("r", limit=1) == ["4"]
