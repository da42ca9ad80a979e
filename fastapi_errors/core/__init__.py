"""Core error types and media types."""

from .errors import (
    ErrorRendererConfigurationError,
    HttpBadRequestError,
    HttpError,
    HttpErrorInfo,
    HttpForbiddenError,
    HttpInternalServerError,
    HttpMethodNotAllowedError,
    HttpNotFoundError,
    HttpNotImplementedError,
    HttpUnauthorizedError,
    http_error_info,
)
from .media_types import DEFAULT_CONTENT_TYPE, KNOWN_CONTENT_TYPES, MediaType

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "ErrorRendererConfigurationError",
    "HttpBadRequestError",
    "HttpError",
    "HttpErrorInfo",
    "HttpForbiddenError",
    "HttpInternalServerError",
    "HttpMethodNotAllowedError",
    "HttpNotFoundError",
    "HttpNotImplementedError",
    "HttpUnauthorizedError",
    "KNOWN_CONTENT_TYPES",
    "MediaType",
    "http_error_info",
]
