import os
import tempfile

_tmp = tempfile.mkdtemp(prefix="golden-store-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_tmp, 'test.db')}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_DEFAULT_PASSWORD"] = "admin123"
os.environ.pop("OFFLINE_MODE", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from golden_store import bootstrap  # noqa: E402
from golden_store.core.database import Base, SessionLocal, engine  # noqa: E402
from golden_store.main import app  # noqa: E402
from golden_store.models import models  # noqa: E402,F401

ADMIN_PASSWORD = "admin123"

PRODUCT = {
    "name": "Cincin Aurora",
    "price": 1250000,
    "image": "https://cdn.example.com/aurora.jpg",
    "description": "Statement ring with crystal shine.",
    "shopeeUrl": "https://shopee.co.id/product/1/10",
    "whatsappNumber": "6281234567890",
    "tags": ["Ring", "Best Seller"],
}

SETTINGS = {
    "storeName": "Golden Store",
    "heroHeadline": "Accessories",
    "heroTagline": "for every day",
    "heroDescription": "Pick your favourite.",
    "heroImage": "https://cdn.example.com/hero.jpg",
}


@pytest.fixture(autouse=True)
def _fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    bootstrap.reset_bootstrap()
    yield
    bootstrap.reset_bootstrap()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token(client):
    r = client.post("/api/auth/login", json={"username": "admin", "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    return r.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
