import copy
from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from receipt_points.main import app
from receipt_points.models import Item, Receipt
from receipt_points.storage import ReceiptStore, get_store

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


def make_receipt(
    retailer: str = "Shop",
    purchased_at: datetime = datetime(2022, 1, 2, 10, 0),
    items: list[tuple[str, str]] | None = None,
    total: str | None = None,
) -> Receipt:
    """Build a typed receipt; defaults to a single item and a matching total."""
    if items is None:
        items = [("Milk", "1.10")]
    built = tuple(Item(description=d, price=Decimal(p)) for d, p in items)
    return Receipt(
        retailer=retailer,
        purchased_at=purchased_at,
        items=built,
        total=Decimal(total) if total is not None else sum(i.price for i in built),
    )


@pytest.fixture
def target_payload() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_payload() -> dict:
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def store() -> ReceiptStore:
    return ReceiptStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    def unavailable_store():
        raise RuntimeError("store unavailable")

    app.dependency_overrides[get_store] = unavailable_store
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
