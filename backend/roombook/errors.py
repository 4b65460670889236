# backend/roombook/errors.py
"""
Error envelope for API responses.

Every error is returned as:
    {"success": false, "message": str, "error_sources": [{"path": ..., "message": ...}]}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .services.slots.exceptions import SlotError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, sources: list[dict] | None = None) -> JSONResponse:
    if sources is None:
        sources = [{"path": "", "message": message}]
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "error_sources": sources,
        },
    )


def _is_cast_error(err: dict) -> bool:
    """Path parameter that could not be parsed (e.g. /slots/abc)."""
    loc = err.get("loc") or ()
    return len(loc) >= 1 and loc[0] == "path"


async def slot_error_handler(request: Request, exc: SlotError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} → {exc.status_code} {exc.kind}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    sources = [
        {
            "path": err["loc"][-1] if err.get("loc") else "",
            "message": err.get("msg", ""),
        }
        for err in errors
    ]
    message = "Invalid ID" if errors and all(_is_cast_error(e) for e in errors) else "Validation Error"
    return error_response(status.HTTP_400_BAD_REQUEST, message, sources)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SlotError, slot_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
