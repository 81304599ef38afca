from fastapi.responses import JSONResponse


def serialize_processed(receipt_id: str, points: int) -> dict:
    return {
        "id": receipt_id,
        "points": points,
    }


def serialize_points(points: int) -> dict:
    return {"points": points}


def error_response(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)
