import logging

from fastapi import APIRouter, Depends

from receipt_points.deps import get_receipt
from receipt_points.errors import ParseError, ReceiptNotFoundError
from receipt_points.models import Receipt
from receipt_points.points import score_breakdown
from receipt_points.serializers import serialize_points, serialize_processed
from receipt_points.storage import ReceiptStore, get_store

logger = logging.getLogger("receipt_points")
router = APIRouter()


@router.post("/receipts/process", status_code=201)
def process_receipt(
    receipt: Receipt = Depends(get_receipt),
    store: ReceiptStore = Depends(get_store),
):
    receipt_id, points = store.submit(receipt)

    logger.info(
        "Receipt processed",
        extra={"extra_data": {"receipt_id": receipt_id, "points": points}},
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Points breakdown",
            extra={"extra_data": {"receipt_id": receipt_id, **score_breakdown(receipt)}},
        )

    return serialize_processed(receipt_id, points)


# The id is captured as a path so that an empty segment reaches the
# handler and is reported as a bad request instead of an unknown route.
@router.get("/receipts/{receipt_id:path}/points")
def get_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_store),
):
    if not receipt_id.strip():
        raise ParseError("Invalid receipt ID format")

    try:
        points = store.lookup(receipt_id)
    except ReceiptNotFoundError:
        logger.warning("Receipt not found", extra={"extra_data": {"receipt_id": receipt_id}})
        raise

    return serialize_points(points)
