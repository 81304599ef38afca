from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    price: Decimal


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    retailer: str
    purchased_at: datetime  # naive, as given on the receipt
    items: tuple[Item, ...]
    total: Decimal


class StoredReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    receipt: Receipt
    points: int
