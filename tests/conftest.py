import pytest

from app import create_app
from models import db

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "JWT_SECRET_KEY": "test-secret-key-with-enough-length-for-hs256",
    "API_PREFIX": "/api",
}

OFFICER = {
    "email": "joao.muana@pn.gov.ao",
    "password": "segredo123",
    "nome": "Comandante João Silva Muana",
    "posto": "Comandante",
    "matricula": "PN001234",
}


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def officer(client):
    resp = client.post("/api/auth/signup", json=OFFICER)
    assert resp.status_code == 200
    return resp.get_json()["policial"]


@pytest.fixture
def token(client, officer):
    resp = client.post("/api/auth/login", json={"matricula": OFFICER["matricula"], "password": OFFICER["password"]})
    assert resp.status_code == 200
    return resp.get_json()["access_token"]


@pytest.fixture
def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def boletim_payload():
    return {
        "numeroBoletim": "BO-2025-099",
        "tipoOcorrencia": "Furto Simples",
        "local": "Rua X",
        "descricao": "Furto de telemóvel na paragem.",
        "declaranteId": "1",
        "dataHoraOcorrencia": "2025-08-03T14:30:00",
    }
