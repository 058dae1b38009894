# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    from evento_api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from evento_api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
