"""Content-negotiated error responses for FastAPI and Starlette."""

from .config import ErrorHandlerSettings, get_settings
from .core.errors import (
    ErrorRendererConfigurationError,
    HttpError,
    HttpMethodNotAllowedError,
    HttpNotFoundError,
    http_error_info,
)
from .core.media_types import MediaType
from .handlers.error_handler import ErrorHandler, ResolvedOutcome
from .handlers.log_sink import LoggerSink, LogSink
from .integration import install_error_handling
from .middleware.error_middleware import ErrorMiddleware
from .renderers import (
    ErrorRenderer,
    HtmlErrorRenderer,
    JsonErrorRenderer,
    PlainTextErrorRenderer,
    XmlErrorRenderer,
)
from .utils.content_negotiation import negotiate_content_type

__all__ = [
    "ErrorHandler",
    "ErrorHandlerSettings",
    "ErrorMiddleware",
    "ErrorRenderer",
    "ErrorRendererConfigurationError",
    "HtmlErrorRenderer",
    "HttpError",
    "HttpMethodNotAllowedError",
    "HttpNotFoundError",
    "JsonErrorRenderer",
    "LogSink",
    "LoggerSink",
    "MediaType",
    "PlainTextErrorRenderer",
    "ResolvedOutcome",
    "XmlErrorRenderer",
    "get_settings",
    "http_error_info",
    "install_error_handling",
    "negotiate_content_type",
]
