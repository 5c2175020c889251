from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from flashdeck.core.errors import (
    FlashdeckError,
    InferenceConnectionError,
    InferenceDecodeError,
    InferenceServerError,
    MalformedOutputError,
    PersistenceError,
    StorageConfigError,
)
from flashdeck.core.logging import get_logger

logger = get_logger(__name__)

# Most specific first; the first isinstance match wins.
STATUS_BY_ERROR: list[tuple[type[FlashdeckError], int]] = [
    (InferenceConnectionError, 503),
    (InferenceServerError, 502),
    (InferenceDecodeError, 502),
    (MalformedOutputError, 502),
    (StorageConfigError, 500),
    (PersistenceError, 400),
]


def status_for(exc: FlashdeckError) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return 500


async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
    code = status_for(exc)
    logger.warning("%s %s failed (%s): %s", request.method, request.url.path, code, exc)
    return JSONResponse(status_code=code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FlashdeckError, flashdeck_error_handler)
