# tests/integration/test_rate_limit.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from evento_api.interfaces.api.middleware.rate_limit import JanelaPorCliente


@pytest.fixture()
def rate_limited_client() -> Generator[TestClient, None, None]:
    """Client com rate limit ativo (3 req/min para teste rapido)."""
    from evento_api.infrastructure.config import get_settings

    old_val = os.environ.get("API_RATE_LIMIT_PER_MINUTE", "0")
    old_keys = os.environ.get("API_KEYS", "")
    os.environ["API_RATE_LIMIT_PER_MINUTE"] = "3"
    os.environ["API_KEYS"] = "chave-interna"
    get_settings.cache_clear()

    from evento_api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c

    os.environ["API_RATE_LIMIT_PER_MINUTE"] = old_val
    os.environ["API_KEYS"] = old_keys
    get_settings.cache_clear()


def test_rate_limit_permite_dentro_do_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        response = rate_limited_client.get("/api/health")
        assert response.status_code == 200


def test_rate_limit_bloqueia_apos_limite(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/health")
    response = rate_limited_client.get("/api/health")
    assert response.status_code == 429
    assert "Rate limit" in response.json()["detail"]


def test_rate_limit_bypass_com_api_key_configurada(rate_limited_client: TestClient) -> None:
    for _ in range(3):
        rate_limited_client.get("/api/health")
    response = rate_limited_client.get("/api/health", headers={"X-API-Key": "chave-interna"})
    assert response.status_code == 200


def test_rate_limit_api_key_desconhecida_nao_isenta(rate_limited_client: TestClient) -> None:
    codes = [
        rate_limited_client.get("/api/health", headers={"X-API-Key": "forjada"}).status_code
        for _ in range(5)
    ]
    assert 429 in codes


def test_janela_bloqueia_ate_expirar() -> None:
    janela = JanelaPorCliente(janela=60.0)
    assert janela.registrar("10.0.0.1", 2, now=0.0)
    assert janela.registrar("10.0.0.1", 2, now=1.0)
    assert not janela.registrar("10.0.0.1", 2, now=2.0)
    assert janela.registrar("10.0.0.1", 2, now=61.0)


def test_janela_remove_ip_ocioso() -> None:
    janela = JanelaPorCliente(janela=60.0)
    janela.registrar("10.0.0.1", 5, now=0.0)
    janela.registrar("10.0.0.2", 5, now=30.0)
    assert len(janela) == 2

    janela.registrar("10.0.0.3", 5, now=70.0)

    assert "10.0.0.1" not in janela
    assert "10.0.0.2" in janela
    assert len(janela) == 2


def test_janela_nao_cresce_com_clientes_antigos() -> None:
    janela = JanelaPorCliente(janela=60.0)
    for i in range(100):
        janela.registrar(f"10.0.1.{i}", 5, now=float(i))
    janela.registrar("10.0.2.1", 5, now=1000.0)
    assert len(janela) == 1
