"""Uniform JSON error envelope for every non-2xx response"""

from datetime import datetime
from http import HTTPStatus
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

VALIDATION_FAILED = "Validation Failed"


def error_body(status_code: int, error: str, message: str, path: str) -> Dict[str, Any]:
    """Build the {timestamp, status, error, message, path} body"""
    return {
        "timestamp": datetime.now().isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
        "path": path,
    }


def format_validation_errors(errors) -> str:
    """Render pydantic errors as 'field: message; ' pairs keyed by the wire field name"""
    parts = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = loc[-1] if loc else "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}; ")
    return "".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = error_body(400, VALIDATION_FAILED, format_validation_errors(exc.errors()), request.url.path)
    return JSONResponse(status_code=400, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = error_body(exc.status_code, HTTPStatus(exc.status_code).phrase, str(exc.detail), request.url.path)
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
