from pydantic import BaseModel, Field


# --- Receipts ---
# Raw request fields. Everything arrives as a string and is converted
# into typed values by receipt_points.validation.

class ItemIn(BaseModel):
    short_description: str = Field(alias="shortDescription")
    price: str

    model_config = {"populate_by_name": True}


class ReceiptIn(BaseModel):
    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: list[ItemIn]
    total: str

    model_config = {"populate_by_name": True}
