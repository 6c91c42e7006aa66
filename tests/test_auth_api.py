import pytest

from conftest import OFFICER
from utils.jwt_auth import _claims_rejected, _revoked_token, _stale_token, _unknown_user


def test_signup_returns_officer_without_password(client):
    resp = client.post("/api/auth/signup", json=OFFICER)
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["message"] == "Policial cadastrado com sucesso"
    assert set(data["policial"]) == {"id", "nome", "posto", "matricula"}
    assert data["policial"]["matricula"] == "PN001234"


def test_signup_missing_fields(client):
    resp = client.post("/api/auth/signup", json={"email": "a@b.ao", "password": "x"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Todos os campos são obrigatórios"


def test_signup_rejects_bad_matricula_and_posto(client):
    resp = client.post("/api/auth/signup", json=dict(OFFICER, matricula="12345"))
    assert resp.status_code == 400
    assert "PN000000" in resp.get_json()["error"]

    resp = client.post("/api/auth/signup", json=dict(OFFICER, posto="General"))
    assert resp.status_code == 400
    assert "Posto inválido" in resp.get_json()["error"]


def test_signup_duplicate_matricula(client, officer):
    resp = client.post("/api/auth/signup", json=dict(OFFICER, email="outro@pn.gov.ao"))
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "Matrícula já cadastrada"


def test_signup_duplicate_email_is_provider_error(client, officer):
    resp = client.post("/api/auth/signup", json=dict(OFFICER, matricula="PN009999"))
    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("Erro ao criar usuário")


def test_login_success(client, officer):
    resp = client.post("/api/auth/login", json={"matricula": "PN001234", "password": OFFICER["password"]})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["access_token"]
    assert data["policial"]["id"] == officer["id"]
    assert "password" not in data["policial"]
    assert "senha" not in data["policial"]


def test_login_matricula_is_case_insensitive(client, officer):
    resp = client.post("/api/auth/login", json={"matricula": "pn001234", "password": OFFICER["password"]})
    assert resp.status_code == 200


def test_login_errors(client, officer):
    resp = client.post("/api/auth/login", json={"matricula": "PN001234"})
    assert resp.status_code == 400

    resp = client.post("/api/auth/login", json={"matricula": "PN999999", "password": "x"})
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Matrícula não encontrada"

    resp = client.post("/api/auth/login", json={"matricula": "PN001234", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Credenciais inválidas"


def test_protected_routes_need_token(client):
    resp = client.get("/api/boletins")
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Token de acesso não fornecido"

    resp = client.get("/api/boletins", headers={"Authorization": "Bearer pn-session-1-abc"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Token de acesso inválido"


def test_password_hash_never_listed(client, auth):
    policiais = client.get("/api/policiais", headers=auth).get_json()["policiais"]
    assert len(policiais) == 1
    assert all("password" not in p for p in policiais)


def test_health_is_public(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["status"] == "OK"
    assert data["version"] == "1.0.0"
    assert data["timestamp"]


def test_password_is_not_trimmed(client):
    client.post("/api/auth/signup", json=dict(OFFICER, password="  segredo  ", nome="  Comandante João  "))

    resp = client.post("/api/auth/login", json={"matricula": "PN001234", "password": "  segredo  "})
    assert resp.status_code == 200
    assert resp.get_json()["policial"]["nome"] == "Comandante João"

    resp = client.post("/api/auth/login", json={"matricula": "PN001234", "password": "segredo"})
    assert resp.status_code == 401


def test_refresh_token_is_not_an_access_token(app, client, officer):
    from flask_jwt_extended import create_refresh_token

    with app.app_context():
        refresh = create_refresh_token(identity=officer["id"])
    resp = client.get("/api/boletins", headers={"Authorization": f"Bearer {refresh}"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Token de acesso inválido"}


@pytest.mark.parametrize("loader", [_revoked_token, _stale_token, _claims_rejected, _unknown_user])
def test_token_failures_answer_with_error_body(app, loader):
    with app.test_request_context():
        resp, status = loader({}, {})
        assert status == 401
        assert resp.get_json() == {"error": "Token de acesso inválido"}
