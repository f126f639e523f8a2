import os
from decimal import Decimal

# Settings are read at import time; keep the app away from the dev database
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import store_admin.db.models  # noqa: E402,F401
from store_admin.core.auth import create_access_token  # noqa: E402
from store_admin.database import Base, get_db, make_engine, make_sessionmaker  # noqa: E402
from store_admin.db.models import Billboard, Category, Color, Product, ProductImage, Size, Store  # noqa: E402
from store_admin.main import app  # noqa: E402

OWNER_ID = "user_owner"
OTHER_ID = "user_other"

test_engine = make_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = make_sessionmaker(test_engine)
# Fixture rows stay readable after the API deletes or changes them
FixtureSessionLocal = sessionmaker(bind=test_engine, expire_on_commit=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session():
    db = FixtureSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def owner_headers():
    return auth_headers(OWNER_ID)


@pytest.fixture
def other_headers():
    return auth_headers(OTHER_ID)


@pytest.fixture
def store(db_session):
    db_store = Store(name="Store One", user_id=OWNER_ID)
    db_session.add(db_store)
    db_session.commit()
    db_session.refresh(db_store)
    return db_store


@pytest.fixture
def other_store(db_session):
    db_store = Store(name="Store Two", user_id=OTHER_ID)
    db_session.add(db_store)
    db_session.commit()
    db_session.refresh(db_store)
    return db_store


@pytest.fixture
def billboard(db_session, store):
    db_billboard = Billboard(store_id=store.id, label="Summer", image_url="https://img.example/summer.png")
    db_session.add(db_billboard)
    db_session.commit()
    db_session.refresh(db_billboard)
    return db_billboard


@pytest.fixture
def category(db_session, store, billboard):
    db_category = Category(store_id=store.id, billboard_id=billboard.id, name="Shirts")
    db_session.add(db_category)
    db_session.commit()
    db_session.refresh(db_category)
    return db_category


@pytest.fixture
def size(db_session, store):
    db_size = Size(store_id=store.id, name="Medium", value="M")
    db_session.add(db_size)
    db_session.commit()
    db_session.refresh(db_size)
    return db_size


@pytest.fixture
def color(db_session, store):
    db_color = Color(store_id=store.id, name="Black", value="#000000")
    db_session.add(db_color)
    db_session.commit()
    db_session.refresh(db_color)
    return db_color


@pytest.fixture
def product(db_session, store, category, size, color):
    db_product = Product(
        store_id=store.id,
        category_id=category.id,
        size_id=size.id,
        color_id=color.id,
        name="Basic tee",
        price=Decimal("19.99"),
    )
    db_product.images = [ProductImage(url="https://img.example/tee.png")]
    db_session.add(db_product)
    db_session.commit()
    db_session.refresh(db_product)
    return db_product


@pytest.fixture
def fetch():
    """Read a row back through a fresh session."""

    def _fetch(model, record_id):
        with TestingSessionLocal() as db:
            return db.get(model, record_id)

    return _fetch


@pytest.fixture
def count():
    def _count(model):
        with TestingSessionLocal() as db:
            return db.query(func.count(model.id)).scalar()

    return _count
