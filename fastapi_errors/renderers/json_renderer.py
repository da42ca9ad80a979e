"""JSON error renderer."""

from __future__ import annotations

from typing import Any

from fastapi_errors.schemas.error import ErrorDocument, ExceptionDetail

from .base import AbstractErrorRenderer


class JsonErrorRenderer(AbstractErrorRenderer):
    """Render errors as a JSON document."""

    media_type = "application/json"

    def render(self, exc: Any, display_error_details: bool) -> str:
        document = ErrorDocument(message=self.get_error_title(exc))
        if display_error_details:
            document.exception = [
                ExceptionDetail(
                    type=summary.type,
                    code=summary.code,
                    message=summary.message,
                    file=summary.file,
                    line=summary.line,
                )
                for summary in self.summarize(exc)
            ]
        return document.model_dump_json(indent=4, exclude_none=True)
