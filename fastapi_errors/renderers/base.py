"""Error renderer capability and shared rendering helpers."""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import Any, Iterator, Protocol, runtime_checkable

from fastapi_errors.core.errors import HttpError, http_error_info

DEFAULT_TITLE = "Application Error"
DEFAULT_DESCRIPTION = "A website error has occurred. Sorry for the temporary inconvenience."


@runtime_checkable
class ErrorRenderer(Protocol):
    """Turn a caught error into a response body of one media type."""

    def render(self, exc: Any, display_error_details: bool) -> str:
        ...

    def render_with_body(self, exc: Any, display_error_details: bool) -> bytes:
        ...


@dataclass(frozen=True)
class ExceptionSummary:
    """Diagnostic fields for a single exception in a chain."""

    type: str
    code: int
    message: str
    file: str | None
    line: int | None
    trace: str

    @classmethod
    def from_exception(cls, exc: Any) -> ExceptionSummary:
        info = http_error_info(exc)
        tb = getattr(exc, "__traceback__", None)
        frames = traceback.extract_tb(tb) if tb is not None else []
        last = frames[-1] if frames else None
        return cls(
            type=exception_type_name(exc),
            code=info.status_code if info is not None else 0,
            message=str(exc),
            file=last.filename if last is not None else None,
            line=last.lineno if last is not None else None,
            trace="".join(traceback.format_list(frames)),
        )


def exception_type_name(exc: Any) -> str:
    """Return the dotted type name of ``exc`` (bare name for builtins)."""
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def iter_exception_chain(exc: Any) -> Iterator[Any]:
    """Yield ``exc`` followed by its causes, oldest last."""
    seen: set[int] = set()
    current = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        cause = getattr(current, "__cause__", None)
        if cause is None and not getattr(current, "__suppress_context__", False):
            cause = getattr(current, "__context__", None)
        current = cause


class AbstractErrorRenderer:
    """Base renderer providing body encoding and title/description lookup."""

    media_type: str = ""
    charset = "utf-8"

    def render(self, exc: Any, display_error_details: bool) -> str:
        raise NotImplementedError

    def render_with_body(self, exc: Any, display_error_details: bool) -> bytes:
        """Return the rendered error encoded for a response body."""
        return self.render(exc, display_error_details).encode(self.charset)

    def get_error_title(self, exc: Any) -> str:
        if isinstance(exc, HttpError) and exc.title:
            return exc.title
        return DEFAULT_TITLE

    def get_error_description(self, exc: Any) -> str:
        if isinstance(exc, HttpError) and exc.description:
            return exc.description
        return DEFAULT_DESCRIPTION

    def summarize(self, exc: Any) -> list[ExceptionSummary]:
        """Return summaries for ``exc`` and every exception it chains to."""
        return [ExceptionSummary.from_exception(item) for item in iter_exception_chain(exc)]
