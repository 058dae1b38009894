# tests/integration/test_api_documentos.py
from fastapi.testclient import TestClient


def test_formatar_cpf_parcial(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/formatar", params={"texto": "1114447"})
    assert response.status_code == 200
    data = response.json()
    assert data["formatado"] == "111.444.7"
    assert data["placeholder"] == "000.000.000-00"


def test_formatar_cnpj_completo(client: TestClient) -> None:
    response = client.get("/api/documentos/cnpj/formatar", params={"texto": "11222333000181"})
    assert response.status_code == 200
    assert response.json()["formatado"] == "11.222.333/0001-81"


def test_formatar_sem_texto(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/formatar")
    assert response.status_code == 200
    assert response.json()["formatado"] == ""


def test_validar_cpf_valido(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/validar", params={"texto": "111.444.777-35"})
    assert response.status_code == 200
    data = response.json()
    assert data["valido"] is True
    assert data["completo"] is True
    assert data["mensagem"] is None


def test_validar_cnpj_invalido(client: TestClient) -> None:
    response = client.get("/api/documentos/cnpj/validar", params={"texto": "11222333000180"})
    assert response.status_code == 200
    data = response.json()
    assert data["valido"] is False
    assert data["mensagem"] == "CNPJ inválido"


def test_tipo_desconhecido_retorna_422(client: TestClient) -> None:
    response = client.get("/api/documentos/rg/validar", params={"texto": "123"})
    assert response.status_code == 422


def test_texto_muito_longo_retorna_422(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/validar", params={"texto": "1" * 65})
    assert response.status_code == 422


def test_headers_de_seguranca(client: TestClient) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
