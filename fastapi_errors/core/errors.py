"""HTTP-aware exception types and the capability query used to classify them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from starlette.exceptions import HTTPException
from starlette.requests import Request


class ErrorRendererConfigurationError(RuntimeError):
    """Raised when an error renderer or handler is misconfigured."""


class HttpError(Exception):
    """Base class for errors that carry an explicit HTTP status code."""

    status_code: int = 500
    title: str = ""
    description: str = ""

    def __init__(
        self,
        request: Request | None = None,
        message: str | None = None,
        *,
        status_code: int | None = None,
        previous: BaseException | None = None,
    ) -> None:
        self.request = request
        if status_code is not None:
            self.status_code = status_code
        self.message = message or self.title or "HTTP error"
        super().__init__(self.message)
        if previous is not None:
            self.__cause__ = previous


class HttpBadRequestError(HttpError):
    status_code = 400
    title = "400 Bad Request"
    description = "The server cannot or will not process the request due to an apparent client error."


class HttpUnauthorizedError(HttpError):
    status_code = 401
    title = "401 Unauthorized"
    description = "The request requires valid user authentication."


class HttpForbiddenError(HttpError):
    status_code = 403
    title = "403 Forbidden"
    description = "You are not permitted to perform the requested operation."


class HttpNotFoundError(HttpError):
    status_code = 404
    title = "404 Not Found"
    description = "The requested resource could not be found. Please verify the URI and try again."


class HttpMethodNotAllowedError(HttpError):
    """405 error that also reports which methods the resource accepts."""

    status_code = 405
    title = "405 Method Not Allowed"
    description = "The request method is not supported for the requested resource."

    def __init__(
        self,
        request: Request | None = None,
        message: str | None = None,
        *,
        allowed_methods: Iterable[str] = (),
        previous: BaseException | None = None,
    ) -> None:
        super().__init__(request, message, previous=previous)
        self.allowed_methods = [method.upper() for method in allowed_methods]

    def get_allowed_methods(self) -> str:
        """Return the allowed methods as an ``Allow`` header value."""
        return ", ".join(self.allowed_methods)


class HttpInternalServerError(HttpError):
    status_code = 500
    title = "500 Internal Server Error"
    description = "Unexpected condition encountered preventing server from fulfilling request."


class HttpNotImplementedError(HttpError):
    status_code = 501
    title = "501 Not Implemented"
    description = "The server does not support the functionality required to fulfill the request."


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status information extracted from an HTTP-aware error."""

    status_code: int
    allowed_methods: str | None = None

    @property
    def is_method_not_allowed(self) -> bool:
        return self.allowed_methods is not None


def http_error_info(exc: Any) -> HttpErrorInfo | None:
    """Return the HTTP status information carried by ``exc``, if any.

    Recognises :class:`HttpError` and Starlette's ``HTTPException``. A
    Starlette 405 with an ``Allow`` header counts as method-not-allowed.
    """
    if isinstance(exc, HttpMethodNotAllowedError):
        return HttpErrorInfo(exc.status_code, exc.get_allowed_methods())
    if isinstance(exc, HttpError):
        return HttpErrorInfo(exc.status_code)
    if isinstance(exc, HTTPException):
        headers = {name.lower(): value for name, value in (exc.headers or {}).items()}
        allowed = headers.get("allow") if exc.status_code == 405 else None
        return HttpErrorInfo(exc.status_code, allowed)
    return None
