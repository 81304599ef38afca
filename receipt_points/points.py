"""Loyalty points computation for validated receipts."""

import math
from decimal import Decimal

from receipt_points.models import Item, Receipt

ROUND_TOTAL_POINTS = 50
QUARTER_TOTAL_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")

# Purchases in [14:00, 16:00) earn the afternoon bonus.
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


def retailer_points(retailer: str) -> int:
    """One point for every letter or digit in the retailer name."""
    return sum(1 for ch in retailer if ch.isalnum())


def round_total_points(total: Decimal) -> int:
    if total == total.to_integral_value():
        return ROUND_TOTAL_POINTS
    return 0


def quarter_total_points(total: Decimal) -> int:
    # Exact for any magnitude: total is a multiple of 0.25 iff 4 * total is whole.
    numerator, denominator = total.as_integer_ratio()
    if (4 * numerator) % denominator == 0:
        return QUARTER_TOTAL_POINTS
    return 0


def item_pair_points(items: tuple[Item, ...]) -> int:
    return (len(items) // 2) * ITEM_PAIR_POINTS


def item_description_points(items: tuple[Item, ...]) -> int:
    """Sum of ceil(price * 0.2) over items whose trimmed description
    length in UTF-8 bytes is a multiple of three.

    The ceiling is taken per item, before summing.
    """
    points = 0
    for item in items:
        if len(item.description.strip().encode("utf-8")) % DESCRIPTION_LENGTH_MULTIPLE == 0:
            points += math.ceil(item.price * DESCRIPTION_PRICE_MULTIPLIER)
    return points


def odd_day_points(receipt: Receipt) -> int:
    if receipt.purchased_at.day % 2 == 1:
        return ODD_DAY_POINTS
    return 0


def afternoon_points(receipt: Receipt) -> int:
    if AFTERNOON_START_HOUR <= receipt.purchased_at.hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


def score_breakdown(receipt: Receipt) -> dict[str, int]:
    """Points earned by each rule, keyed by rule name."""
    return {
        "retailer": retailer_points(receipt.retailer),
        "round_total": round_total_points(receipt.total),
        "quarter_total": quarter_total_points(receipt.total),
        "item_pairs": item_pair_points(receipt.items),
        "item_descriptions": item_description_points(receipt.items),
        "odd_day": odd_day_points(receipt),
        "afternoon": afternoon_points(receipt),
    }


def compute_points(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())
