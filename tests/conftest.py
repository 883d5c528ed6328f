"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, API clients, and catalog data fixtures.

==============================================================================
"""

import os

# Keep application startup off the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from decimal import Decimal
from typing import Any, Dict, Generator

import httpx
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from product_catalog.main import app
from product_catalog.db.database import Base, enable_sqlite_foreign_keys, get_db
from product_catalog.db.models import AddOn, Product, ProductType, Variant
from product_catalog.client import CatalogClient


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def override_db(db: Session) -> Generator[Session, None, None]:
    """Point every request at the test session."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield db
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(override_db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def catalog_client(override_db: Session) -> CatalogClient:
    """Async catalog client talking to the app in-process."""
    return CatalogClient(
        base_url="http://testserver/api",
        transport=httpx.ASGITransport(app=app),
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


# ============================================================================
# API DATA FIXTURES
# ============================================================================

@pytest.fixture
def food_type(client: TestClient) -> Dict[str, Any]:
    """Create the 'Food' product type through the API."""
    response = client.post("/api/product-types", json={"name": "Food", "description": "Edibles"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def clothing_type(client: TestClient) -> Dict[str, Any]:
    """Create the 'Clothing' product type through the API."""
    response = client.post("/api/product-types", json={"name": "Clothing"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def pizza(client: TestClient, food_type: Dict[str, Any]) -> Dict[str, Any]:
    """Create a food product."""
    response = client.post(
        "/api/products",
        json={
            "name": "Pizza",
            "description": "Wood-fired",
            "productTypeId": food_type["id"],
            "images": ["https://img.example.com/pizza.jpg"],
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def t_shirt(client: TestClient, clothing_type: Dict[str, Any]) -> Dict[str, Any]:
    """Create a clothing product."""
    response = client.post(
        "/api/products",
        json={"name": "T-Shirt", "productTypeId": clothing_type["id"]},
    )
    assert response.status_code == 201
    return response.json()


# ============================================================================
# ORM DATA FIXTURES
# ============================================================================

@pytest.fixture
def seeded_catalog(override_db: Session) -> Dict[str, Any]:
    """
    Seed a small catalog directly through the ORM.

    Food/Pizza has two variants and two add-ons; Clothing/T-Shirt has
    size and color variants, one of them out of stock.
    """
    db = override_db

    food = ProductType(name="Food")
    clothing = ProductType(name="Clothing")
    db.add_all([food, clothing])
    db.flush()

    pizza = Product(name="Pizza", product_type_id=food.id, images=[])
    shirt = Product(name="T-Shirt", product_type_id=clothing.id, images=[])
    db.add_all([pizza, shirt])
    db.flush()

    db.add_all([
        Variant(product_id=pizza.id, size="S", price=Decimal("10.00"), stock=5, sku="PZ-S"),
        Variant(product_id=pizza.id, size="M", price=Decimal("8.00"), stock=5, sku="PZ-M"),
        AddOn(product_id=pizza.id, name="Extra Cheese", price=Decimal("1.50")),
        AddOn(product_id=pizza.id, name="Olives", price=Decimal("0.75")),
        Variant(product_id=shirt.id, size="M", color="Red", price=Decimal("20.00"), stock=3, sku="TS-M-RED"),
        Variant(product_id=shirt.id, size="L", color="Blue", price=Decimal("22.00"), stock=0, sku="TS-L-BLUE"),
    ])
    db.commit()

    return {
        "food_id": food.id,
        "clothing_id": clothing.id,
        "pizza_id": pizza.id,
        "shirt_id": shirt.id,
    }
