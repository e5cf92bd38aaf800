# payroll_app/utils/error_handler.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, HTTPException as FastAPIHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from payroll_app.errors import PayrollAppError

logger = logging.getLogger(__name__)


def _json_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _log_http(request: Request, status_code: int, message: str) -> None:
    """
    Log levels:
    - 404 -> INFO
    - 401/403 -> WARNING
    - other 4xx -> WARNING
    - 5xx -> ERROR
    """
    method = request.method
    path = request.url.path

    if status_code == 404:
        logger.info("404 Not Found: %s %s | %s", method, path, message)
    elif status_code in (401, 403):
        logger.warning("%s: %s %s | %s", status_code, method, path, message)
    elif 400 <= status_code < 500:
        logger.warning("%s: %s %s | %s", status_code, method, path, message)
    else:
        logger.error("%s: %s %s | %s", status_code, method, path, message)


async def app_error_handler(request: Request, exc: PayrollAppError):
    _log_http(request, exc.status_code, exc.message)
    return _json_error(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    status_code = int(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    _log_http(request, status_code, message)
    return _json_error(status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning("400 Validation error: %s %s | %s", request.method, request.url.path, errors)
    if errors and errors[0].get("type") == "json_invalid":
        message = "Invalid JSON body"
    elif errors:
        first = errors[0]
        # list indices and JSON decode offsets are ints, not field names
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body" and not isinstance(p, int))
        message = f"Invalid value for '{field}': {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return _json_error(400, message)


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    # never leak store details to the client
    logger.error("500 Database error: %s %s", request.method, request.url.path, exc_info=exc)
    return _json_error(500, "Server error")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("500 Unhandled exception: %s %s | %s", request.method, request.url.path, exc, exc_info=exc)
    return _json_error(500, "Something went wrong!")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PayrollAppError, app_error_handler)
    # Starlette covers routing 404/405, FastAPI covers the ones raised in handlers
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(FastAPIHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
