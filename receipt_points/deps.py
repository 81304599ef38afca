import json
import logging
from typing import Any

from fastapi import Depends, Request
from pydantic import ValidationError

from receipt_points.errors import ParseError, ReceiptValidationError, UnsupportedMediaTypeError
from receipt_points.models import Receipt
from receipt_points.schemas import ReceiptIn
from receipt_points.validation import to_receipt

logger = logging.getLogger("receipt_points")


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON after checking its Content-Type."""
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise UnsupportedMediaTypeError()

    body = await request.body()
    try:
        return json.loads(body)
    except ValueError as e:
        logger.warning("Invalid JSON body", extra={"extra_data": {"error": str(e)}})
        raise ParseError("Invalid JSON format")


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]


def get_receipt(payload: Any = Depends(read_json_body)) -> Receipt:
    """Bind the decoded body to raw receipt fields, then convert them."""
    try:
        data = ReceiptIn.model_validate(payload)
    except ValidationError as e:
        message = _describe_validation_error(e)
        logger.warning("Receipt rejected", extra={"extra_data": {"reason": message}})
        raise ParseError(f"Invalid receipt: {message}")

    try:
        return to_receipt(data)
    except ParseError as e:
        logger.warning("Receipt rejected", extra={"extra_data": {"reason": e.message}})
        raise ParseError(f"Invalid receipt: {e.message}") from e
    except ReceiptValidationError as e:
        logger.warning("Receipt rejected", extra={"extra_data": {"reason": e.message}})
        raise ReceiptValidationError(f"Invalid receipt: {e.message}") from e
