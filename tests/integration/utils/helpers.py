# tests/integration/utils/helpers.py
import json

from fastapi.testclient import TestClient

TERMINAL_PHASES = {"VICTORY", "DEFEAT"}


# ---------- HTTP helpers (show server error bodies) ----------
def _post(client: TestClient, url: str, payload: dict) -> dict:
    r = client.post(url, json=payload)
    if r.status_code >= 400:
        raise AssertionError(
            f"{r.status_code} for {url}\n"
            f"Payload:\n{json.dumps(payload, indent=2)}\n"
            f"Response:\n{r.text}"
        )
    return r.json()


def _get(client: TestClient, url: str) -> dict:
    r = client.get(url)
    r.raise_for_status()
    return r.json()


# ---------- run helpers ----------
def _create_run(client: TestClient, name="Hero", unit_class="WARRIOR", seed=None) -> dict:
    body = {"name": name, "unit_class": unit_class}
    if seed is not None:
        body["seed"] = seed
    return _post(client, "/runs", body)


def _act(client: TestClient, rid: str, action: dict) -> dict:
    return _post(client, f"/runs/{rid}/action", {"action": action})


def _pick_action(run: dict) -> dict:
    """Simple driver: drink a health potion when low, otherwise strongest skill
    the hero can pay for, otherwise a basic attack."""
    player = run["player"]
    if player["health"] * 3 < player["max_health"]:
        for i, p in enumerate(player["potions"]):
            if p["resource"] == "HEALTH":
                return {"kind": "USE_POTION", "index": i}
    for slot in (1, 3, 2):
        skill = player["skills"][slot - 1]
        if skill.get("damage_bonus") is not None and player["mana"] >= skill["mana_cost"]:
            return {"kind": "USE_SKILL", "slot": slot}
    return {"kind": "ATTACK"}


def _play_to_end(client: TestClient, rid: str, max_steps: int = 2000) -> dict:
    """Drive a run through every phase until it is won or lost."""
    run = _get(client, f"/runs/{rid}")
    for _ in range(max_steps):
        phase = run["phase"]
        if phase in TERMINAL_PHASES:
            return run
        if phase == "COIN_FLIP":
            run = _post(client, f"/runs/{rid}/coin_flip", {"guess": "HEADS"})["run"]
        elif phase == "REWARD":
            run = _post(
                client, f"/runs/{rid}/reward", {"upgrade": "HEAL", "item_index": 0}
            )
        else:
            run = _act(client, rid, _pick_action(run))["run"]
    raise AssertionError(f"run {rid} did not finish in {max_steps} steps")
