import os

# Configuration de test, posée avant l'import de l'application
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret-for-the-shop-backend-suite")
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")
os.environ.setdefault("CORS_ORIGINS", "*")

import pytest
from typing import Any, Dict, Generator
from fastapi.testclient import TestClient

from shop_backend.app import app as fastapi_app
from shop_backend.infra.supabase_client import get_db
from tests.fakes import FakeSupabase, bearer

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)

MEMBER_EMAIL = "member@example.com"
ADMIN_EMAIL = "admin@example.com"

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def fake_db() -> FakeSupabase:
    """Document store en mémoire: un membre et un admin déjà inscrits."""
    return FakeSupabase({
        "users": [
            {"id": "u-member", "email": MEMBER_EMAIL, "role": "member"},
            {"id": "u-admin", "email": ADMIN_EMAIL, "role": "admin"},
        ],
    })

@pytest.fixture()
def client(app, fake_db) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_db] = lambda: fake_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_db, None)

@pytest.fixture()
def member_headers() -> Dict[str, str]:
    return bearer(MEMBER_EMAIL)

@pytest.fixture()
def admin_headers() -> Dict[str, str]:
    return bearer(ADMIN_EMAIL)
