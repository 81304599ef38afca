"""Conversion of raw receipt fields into a validated ``Receipt``."""

import re
from datetime import datetime
from decimal import Decimal

from receipt_points.errors import ParseError, ReceiptValidationError
from receipt_points.models import Item, Receipt
from receipt_points.schemas import ReceiptIn

# Allowed gap between the declared total and the sum of item prices
TOTAL_TOLERANCE = Decimal("0.01")

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")
# Plain ASCII decimals: no exponents, underscores or special values
AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


def parse_amount(value: str, field: str) -> Decimal:
    """Parse a decimal money string such as ``"6.49"``."""
    if not AMOUNT_PATTERN.fullmatch(value):
        raise ParseError(f"invalid {field}: {value!r}")
    return Decimal(value)


def parse_purchase_datetime(purchase_date: str, purchase_time: str) -> datetime:
    """Combine ``YYYY-MM-DD`` and ``HH:MM`` into a naive datetime."""
    if not DATE_PATTERN.fullmatch(purchase_date) or not TIME_PATTERN.fullmatch(purchase_time):
        raise ParseError(f"invalid date/time format: {purchase_date!r} {purchase_time!r}")
    try:
        return datetime.strptime(f"{purchase_date}T{purchase_time}", "%Y-%m-%dT%H:%M")
    except ValueError as e:
        raise ParseError(f"invalid date/time format: {e}")


def to_receipt(data: ReceiptIn) -> Receipt:
    """Parse and validate raw receipt fields.

    Raises ParseError when a date, time or amount cannot be read and
    ReceiptValidationError when the parsed values break a receipt rule.
    """
    purchased_at = parse_purchase_datetime(data.purchase_date, data.purchase_time)
    total = parse_amount(data.total, "total")
    items = tuple(
        Item(
            description=item.short_description,
            price=parse_amount(item.price, f"price for item {i}"),
        )
        for i, item in enumerate(data.items, start=1)
    )

    receipt = Receipt(
        retailer=data.retailer,
        purchased_at=purchased_at,
        items=items,
        total=total,
    )
    validate_receipt(receipt)
    return receipt


def validate_receipt(receipt: Receipt) -> None:
    if not receipt.retailer.strip():
        raise ReceiptValidationError("retailer name is required")
    if not receipt.items:
        raise ReceiptValidationError("at least one item is required")

    item_sum = Decimal(0)
    for i, item in enumerate(receipt.items, start=1):
        if not item.description.strip():
            raise ReceiptValidationError(f"item {i}: description is required")
        if item.price <= 0:
            raise ReceiptValidationError(f"item {i}: invalid price")
        item_sum += item.price

    if abs(receipt.total - item_sum) > TOTAL_TOLERANCE:
        raise ReceiptValidationError(
            f"total {receipt.total:.2f} does not match sum of items {item_sum:.2f}"
        )
