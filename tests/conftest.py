from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from chirpy.core.config import Settings
from chirpy.core.context import build_context
from chirpy.main import create_app
from tests.helpers import JWT_SECRET, POLKA_KEY


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        JWT_SECRET=JWT_SECRET,
        POLKA_API_KEY=POLKA_KEY,
        DATABASE_PATH=str(tmp_path / "database.json"),
        FILESERVER_ROOT=str(tmp_path),
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def ctx(settings):
    context = build_context(settings)
    context.store.ensure()
    return context


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
