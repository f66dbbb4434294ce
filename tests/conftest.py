"""Configuração do pytest para o projeto Onde Tem?."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.bootstrap.dependencies import AppContainer, create_container  # noqa: E402
from config.settings import AuthSettings, DatabaseSettings, StorageSettings  # noqa: E402

TEST_JWT_SECRET = "test-secret-with-at-least-32-characters!"


@pytest.fixture
def container(tmp_path: Path) -> AppContainer:
    """Container com SQLite e diretório de upload temporários."""
    return create_container(
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'onde_tem_test.db'}"),
        storage=StorageSettings(upload_dir=str(tmp_path / "uploads")),
        auth=AuthSettings(jwt_secret=TEST_JWT_SECRET),
    )


@pytest.fixture
def client(container: AppContainer) -> Iterator:
    """TestClient com lifespan ativo (schema criado no startup)."""
    from fastapi.testclient import TestClient

    from app.app import create_app

    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def signup(client):
    """Cadastra e autentica um usuário; retorna (headers, user_id)."""

    def _signup(
        email: str = "maria@example.com",
        password: str = "segredo123",
        nickname: str = "Maria",
    ) -> tuple[dict[str, str], str]:
        created = client.post(
            "/api/users",
            data={
                "fullName": f"{nickname} da Silva",
                "nickname": nickname,
                "email": email,
                "password": password,
            },
        )
        assert created.status_code == 201, created.text
        login = client.post("/api/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['token']}"}, created.json()["userId"]

    return _signup
