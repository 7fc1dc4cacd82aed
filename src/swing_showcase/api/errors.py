"""Uniform error envelope for every API response."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from swing_showcase.domain.errors import ShowcaseError

_logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def error_body(message: str, code: str) -> dict[str, object]:
    return {"success": False, "error": message, "code": code}


def route_errors(
    code: str, message: str
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Turn unexpected failures inside an endpoint into a coded 500 error."""

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except ShowcaseError:
                raise
            except Exception as exc:
                _logger.exception("%s", message)
                raise ShowcaseError(message, code=code) from exc

        return wrapper

    return decorator


def install_error_handlers(app: FastAPI) -> None:
    """Register handlers that render every failure as an envelope."""

    @app.exception_handler(ShowcaseError)
    async def showcase_error(_request: Request, exc: ShowcaseError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code, content=error_body(exc.message, exc.code)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        detail = errors[0].get("msg") if errors else None
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(str(detail or "Invalid request"), "VALIDATION_ERROR"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=exc.status_code,
                content=error_body("Endpoint not found", "NOT_FOUND"),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail), "HTTP_ERROR"),
        )

    @app.exception_handler(Exception)
    async def unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
        _logger.exception("Server error", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error", "INTERNAL_ERROR"),
        )
