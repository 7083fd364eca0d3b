import logging
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from whg.app import app

logger = logging.getLogger(__name__)


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """In-process client for the API; runs live in the module-level store."""
    with TestClient(app) as c:
        yield c
