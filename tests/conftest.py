import pytest
from fastapi.testclient import TestClient

from plataforma_cursos.core.config import Settings
from plataforma_cursos.core.security import AuthorizationGate, build_path_rules
from plataforma_cursos.main import create_app


@pytest.fixture
def settings():
    # Sin .env: los tests solo ven los valores por defecto
    return Settings(_env_file=None)


@pytest.fixture
def gate(settings):
    return AuthorizationGate(build_path_rules(settings))


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def bearer():
    def _headers(token="token-de-prueba"):
        return {"Authorization": f"Bearer {token}"}
    return _headers
