"""Terminal error handler: status, negotiation, rendering and logging.

``ErrorHandler`` turns any caught error into a finished Starlette response.
Each step of the decision sequence is its own method so that subclasses and
tests can exercise or replace one step at a time:

1. :meth:`ErrorHandler.determine_status_code`
2. :meth:`ErrorHandler.determine_content_type`
3. :meth:`ErrorHandler.determine_renderer`
4. :meth:`ErrorHandler.write_to_error_log` (only when ``log_errors`` is set)
5. :meth:`ErrorHandler.format_response`

No per-request state is kept on the handler, so one instance can serve
concurrent requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from starlette.requests import Request
from starlette.responses import Response

from fastapi_errors.core.errors import ErrorRendererConfigurationError, http_error_info
from fastapi_errors.renderers import ErrorRenderer, PlainTextErrorRenderer, renderer_for
from fastapi_errors.utils.content_negotiation import negotiate_content_type

from .log_sink import LoggerSink, LogSink

logger = logging.getLogger(__name__)

LOG_NOTICE = '\nView in rendered output by enabling the "displayErrorDetails" setting.\n'

# Headers recomputed for every error response.
_REPLACED_HEADERS = {"content-type", "content-length", "allow"}


@dataclass(frozen=True)
class ResolvedOutcome:
    """Status, media type and renderer chosen for one error."""

    status_code: int
    content_type: str
    renderer: ErrorRenderer


class ErrorHandler:
    """Render caught errors in a representation the client accepts."""

    def __init__(
        self,
        log_errors: bool = False,
        *,
        log_error_details: bool = True,
        renderer: ErrorRenderer | type[ErrorRenderer] | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        self.log_errors = log_errors
        self.log_error_details = log_error_details
        self.renderer = renderer
        self.log_sink = log_sink or LoggerSink()

    def __call__(
        self,
        request: Request,
        response: Response | None,
        exc: Any,
        display_error_details: bool,
    ) -> Response:
        return self.handle(request, response, exc, display_error_details)

    def handle(
        self,
        request: Request,
        response: Response | None,
        exc: Any,
        display_error_details: bool,
    ) -> Response:
        """Build the error response for ``exc``.

        Raises:
            ErrorRendererConfigurationError: the renderer override does not
                implement the renderer interface.
        """
        outcome = self.resolve(request, exc)
        if self.log_errors:
            self.write_to_error_log(exc)
        return self.format_response(outcome, response, exc, display_error_details)

    def resolve(self, request: Request, exc: Any) -> ResolvedOutcome:
        """Run the status, content type and renderer steps in order."""
        status_code = self.determine_status_code(request.method, exc)
        content_type = self.determine_content_type(request)
        renderer = self.determine_renderer(content_type)
        return ResolvedOutcome(status_code, content_type, renderer)

    def determine_status_code(self, method: str, exc: Any) -> int:
        if method == "OPTIONS":
            return 200
        info = http_error_info(exc)
        if info is not None:
            return info.status_code
        return 500

    def determine_content_type(self, request: Request) -> str:
        return negotiate_content_type(request.headers.get("accept", ""))

    def determine_renderer(self, content_type: str) -> ErrorRenderer:
        """Return the override renderer if set, else one matching ``content_type``."""
        override = self.renderer
        if override is None:
            return renderer_for(content_type)

        if isinstance(override, type):
            if not _implements_renderer(override):
                raise _non_compliant(override)
            try:
                override = override()
            except TypeError as exc:
                raise ErrorRendererConfigurationError(
                    f"Error renderer {override!r} cannot be instantiated without arguments"
                ) from exc
        if not isinstance(override, ErrorRenderer):
            raise _non_compliant(override)
        return override

    def write_to_error_log(self, exc: Any) -> None:
        """Send the plain text rendering of ``exc`` to the log sink."""
        message = PlainTextErrorRenderer().render(exc, self.log_error_details)
        message += LOG_NOTICE
        self.log_error(message)

    def log_error(self, message: str) -> None:
        try:
            self.log_sink.write(message)
        except Exception:
            logger.exception("Failed to write error log entry")

    def format_response(
        self,
        outcome: ResolvedOutcome,
        response: Response | None,
        exc: Any,
        display_error_details: bool,
    ) -> Response:
        body = outcome.renderer.render_with_body(exc, display_error_details)
        error_response = Response(
            content=body,
            status_code=outcome.status_code,
            headers={"content-type": outcome.content_type},
        )
        if response is not None:
            for name, value in response.headers.items():
                if name not in _REPLACED_HEADERS:
                    error_response.headers.append(name, value)

        info = http_error_info(exc)
        if info is not None and info.is_method_not_allowed:
            error_response.headers["allow"] = info.allowed_methods or ""
        return error_response


def _implements_renderer(renderer_class: type) -> bool:
    return all(
        callable(getattr(renderer_class, name, None)) for name in ("render", "render_with_body")
    )


def _non_compliant(renderer: Any) -> ErrorRendererConfigurationError:
    return ErrorRendererConfigurationError(
        f"Non compliant error renderer provided ({renderer!r}). "
        "Renderer must implement the ErrorRenderer interface"
    )
