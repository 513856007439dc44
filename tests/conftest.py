# tests/conftest.py
from __future__ import annotations

import os
import tempfile
from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path

import pytest

# ---------------------------------------------------------------------
# Environnement fixe a l'import (collecte), avant tout import de boutique:
# settings.py lit les variables une seule fois.
# ---------------------------------------------------------------------
_DB_DIR = Path(tempfile.mkdtemp(prefix="boutique-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'boutique.db'}"
os.environ["CELERY_ALWAYS_EAGER"] = "1"
os.environ["ADMIN_API_KEY"] = "k_test_admin_1234567890"
os.environ.setdefault("LOG_LEVEL", "WARNING")

ADMIN_HEADERS = {"X-Admin-Key": os.environ["ADMIN_API_KEY"]}

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


class FakeCooldown:
    """Fenetre anti double-clic en memoire; expire_all() simule l'expiration."""

    def __init__(self):
        self.keys: set[tuple[str, str, int]] = set()
        self.released: list[tuple[str, str, int]] = []

    def acquire(self, scope, owner, product_id, ttl):
        key = (scope, owner, product_id)
        if key in self.keys:
            return False
        self.keys.add(key)
        return True

    def release(self, scope, owner, product_id):
        self.released.append((scope, owner, product_id))
        self.keys.discard((scope, owner, product_id))
        return True

    def expire_all(self):
        self.keys.clear()


class FakeEvents:
    def __init__(self):
        self.published: list[tuple[str, str, int]] = []

    def publish_count(self, scope, owner, count):
        self.published.append((scope, owner, count))


@pytest.fixture(autouse=True)
def _fresh_schema():
    from boutique.data.database import Base, engine
    import boutique.data.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    from boutique.data.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def cooldown():
    return FakeCooldown()


@pytest.fixture
def events():
    return FakeEvents()


@pytest.fixture
def client(cooldown, events):
    from fastapi.testclient import TestClient

    from boutique.api.deps import get_cooldown, get_events
    from boutique.main import app

    app.dependency_overrides[get_cooldown] = lambda: cooldown
    app.dependency_overrides[get_events] = lambda: events
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(db):
    """Insere un produit; created_at avance d'un jour par produit par defaut."""
    from boutique.data.models.product import ProductModel

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "title": f"Produit {counter['n']}",
            "description": "Description",
            "price": Decimal("10.00"),
            "promo": None,
            "image_urls": [f"https://cdn.example.com/p{counter['n']}.jpg"],
            "colors": None,
            "status": True,
            "category": None,
            "subcategory": None,
            "sales": 0,
            "created_at": BASE_TIME + timedelta(days=counter["n"]),
        }
        data.update(overrides)
        product = ProductModel(**data)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture
def make_user(client):
    def _make(email="client@example.com", name="Amira Ben Salah"):
        r = client.post("/users", json={"email": email, "name": name, "phone": "22123456", "address": "Tunis"})
        assert r.status_code == 201, r.text
        return r.json()

    return _make
