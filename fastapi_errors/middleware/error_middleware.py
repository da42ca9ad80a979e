"""ASGI middleware routing uncaught exceptions to error handlers."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Mapping

from starlette.requests import Request
from starlette.responses import Response

from fastapi_errors.core.errors import ErrorRendererConfigurationError
from fastapi_errors.handlers.error_handler import ErrorHandler
from fastapi_errors.handlers.log_sink import LogSink

logger = logging.getLogger(__name__)

ErrorHandlerCallable = Callable[[Request, Response, BaseException, bool], Any]


class ErrorMiddleware:
    """Convert exceptions raised downstream into error responses.

    Handlers are looked up by exception type, walking the exception's MRO so
    that a handler registered for a base class also covers its subclasses.
    Anything without a specific handler goes to the default handler, an
    :class:`ErrorHandler` unless one is set explicitly.
    """

    def __init__(
        self,
        app: Any,
        display_error_details: bool = False,
        log_errors: bool = False,
        *,
        log_error_details: bool = True,
        log_sink: LogSink | None = None,
        error_handlers: Mapping[type[BaseException], ErrorHandlerCallable] | None = None,
        default_error_handler: ErrorHandlerCallable | None = None,
    ) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.display_error_details = display_error_details
        self.log_errors = log_errors
        self.log_error_details = log_error_details
        self.log_sink = log_sink
        self.handlers: dict[type[BaseException], ErrorHandlerCallable] = {}
        self.default_error_handler: ErrorHandlerCallable | None = None
        for exc_type, handler in (error_handlers or {}).items():
            self.set_error_handler(exc_type, handler)
        if default_error_handler is not None:
            self.set_default_error_handler(default_error_handler)

    def set_error_handler(
        self, exc_type: type[BaseException], handler: ErrorHandlerCallable
    ) -> None:
        if not callable(handler):
            raise ErrorRendererConfigurationError(
                f"Error handler for {exc_type.__name__} is not callable: {handler!r}"
            )
        self.handlers[exc_type] = handler

    def set_default_error_handler(self, handler: ErrorHandlerCallable) -> None:
        if not callable(handler):
            raise ErrorRendererConfigurationError(
                f"Default error handler is not callable: {handler!r}"
            )
        self.default_error_handler = handler

    def get_default_error_handler(self) -> ErrorHandlerCallable:
        if self.default_error_handler is None:
            self.default_error_handler = ErrorHandler(
                self.log_errors,
                log_error_details=self.log_error_details,
                log_sink=self.log_sink,
            )
        return self.default_error_handler

    def get_error_handler(self, exc_type: type[BaseException]) -> ErrorHandlerCallable:
        """Return the handler registered for ``exc_type`` or its nearest base."""
        for klass in exc_type.__mro__:
            if klass in self.handlers:
                return self.handlers[klass]
        return self.get_default_error_handler()

    async def handle_exception(self, request: Request, exc: BaseException) -> Response:
        handler = self.get_error_handler(type(exc))
        result = handler(request, Response(), exc, self.display_error_details)
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, Response):
            raise ErrorRendererConfigurationError(
                f"Error handler {handler!r} returned {type(result).__name__}, expected a Response"
            )
        return result

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Run the downstream app and render any exception it raises."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            logger.debug("Handling %s raised on %s", type(exc).__name__, scope.get("path"))
            request = Request(scope, receive)
            response = await self.handle_exception(request, exc)
            await response(scope, receive, send)
