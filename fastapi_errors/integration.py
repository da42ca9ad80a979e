"""Wire the error middleware onto a FastAPI application."""

from __future__ import annotations

from typing import Mapping

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .config import ErrorHandlerSettings, get_settings
from .handlers.log_sink import LogSink
from .middleware.error_middleware import ErrorHandlerCallable, ErrorMiddleware


async def raise_to_error_middleware(request: Request, exc: StarletteHTTPException) -> None:
    """Send ``HTTPException`` past FastAPI's own handler to :class:`ErrorMiddleware`."""
    raise exc


def install_error_handling(
    app: FastAPI,
    settings: ErrorHandlerSettings | None = None,
    *,
    error_handlers: Mapping[type[BaseException], ErrorHandlerCallable] | None = None,
    default_error_handler: ErrorHandlerCallable | None = None,
    log_sink: LogSink | None = None,
) -> None:
    """Add :class:`ErrorMiddleware` to ``app`` configured from ``settings``.

    Routing failures (unmatched paths and methods) and ``HTTPException`` raised
    by endpoints are rendered by the middleware too, instead of FastAPI's
    default JSON handler.
    """
    settings = settings or get_settings()
    app.add_exception_handler(StarletteHTTPException, raise_to_error_middleware)
    app.add_middleware(
        ErrorMiddleware,
        display_error_details=settings.display_error_details,
        log_errors=settings.log_errors,
        log_error_details=settings.log_error_details,
        log_sink=log_sink,
        error_handlers=error_handlers,
        default_error_handler=default_error_handler,
    )
