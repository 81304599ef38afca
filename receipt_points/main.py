import os

import sentry_sdk
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from receipt_points.errors import MethodNotAllowedError, ReceiptServiceError
from receipt_points.logging_config import setup_logging
from receipt_points.middleware import RequestLoggingMiddleware
from receipt_points.routes import receipts
from receipt_points.serializers import error_response

load_dotenv()

# Sentry
sentry_dsn = os.getenv("SENTRY_DSN")
if sentry_dsn:
    sentry_sdk.init(
        dsn=sentry_dsn,
        traces_sample_rate=0.1,
        send_default_pii=False,
    )

logger = setup_logging()

app = FastAPI(title="Receipt Points API", version="0.1.0")

# CORS
origins = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in origins],
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)
app.add_middleware(RequestLoggingMiddleware)


# Every error leaves the service as {"error": <message>}
@app.exception_handler(ReceiptServiceError)
async def receipt_service_error_handler(request: Request, exc: ReceiptServiceError):
    return error_response(exc.message, exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == MethodNotAllowedError.status_code:
        message = MethodNotAllowedError().message
    else:
        message = str(exc.detail)
    return error_response(message, exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response("Invalid request", 400)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        exc_info=exc,
    )
    return error_response("Internal server error", 500)


# Routes
app.include_router(receipts.router)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "receipt_points.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )
