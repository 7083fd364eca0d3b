import logging

import pytest

from whg import storage
from whg.engine.core import GameEngine
from whg.logging_listeners import register_listeners
from whg.models.enums import UnitClass
from whg.rulesets.factory import create_boss, create_unit
from tests.utils.scripted import ScriptedRNG

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def clean_storage():
    register_listeners()
    storage.clear()
    yield
    storage.clear()


@pytest.fixture()
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture()
def rng() -> ScriptedRNG:
    return ScriptedRNG()


@pytest.fixture()
def warrior():
    return create_unit(UnitClass.WARRIOR, "Grom")


@pytest.fixture()
def archer():
    return create_unit(UnitClass.ARCHER, "Lyra")


@pytest.fixture()
def mage():
    return create_unit(UnitClass.MAGE, "Ezra")


@pytest.fixture()
def boss():
    return create_boss(1)
