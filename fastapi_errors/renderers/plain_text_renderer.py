"""Plain text error renderer, also used for diagnostic log lines."""

from __future__ import annotations

from typing import Any

from .base import AbstractErrorRenderer, ExceptionSummary


class PlainTextErrorRenderer(AbstractErrorRenderer):
    """Render errors as human-readable plain text."""

    media_type = "text/plain"

    def render(self, exc: Any, display_error_details: bool) -> str:
        text = f"{self.get_error_title(exc)}\n"
        if display_error_details:
            summaries = self.summarize(exc)
            text += self.format_fragment(summaries[0])
            for summary in summaries[1:]:
                text += "\nPrevious Error:\n"
                text += self.format_fragment(summary)
        return text

    def format_fragment(self, summary: ExceptionSummary) -> str:
        text = f"Type: {summary.type}\n"
        text += f"Code: {summary.code}\n"
        if summary.message:
            text += f"Message: {summary.message}\n"
        if summary.file is not None:
            text += f"File: {summary.file}\n"
        if summary.line is not None:
            text += f"Line: {summary.line}\n"
        if summary.trace:
            text += f"Trace: {summary.trace}"
        return text
