from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from podium.backend.app.core.deps import get_file_storage, get_identity_provider
from podium.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage
from podium.backend.app.main import create_app
from tests.unit.fakes.identity import FakeIdentityProvider, session_cookie_for


@pytest.fixture
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def public_dir(tmp_path) -> Path:
    return tmp_path / "public"


@pytest.fixture
def storage(public_dir) -> FilesystemFileStorage:
    return FilesystemFileStorage(public_dir)


@pytest.fixture
def app(storage, identity) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_file_storage] = lambda: storage
    app.dependency_overrides[get_identity_provider] = lambda: identity
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def login(client):
    """Puts a session cookie for `uid` into the test client's jar."""
    def _login(uid: str) -> None:
        client.cookies.set("session", session_cookie_for(uid))
    return _login
