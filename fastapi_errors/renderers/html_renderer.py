"""HTML error renderer."""

from __future__ import annotations

from html import escape
from typing import Any

from .base import AbstractErrorRenderer, ExceptionSummary

_PAGE = (
    "<html>"
    "   <head>"
    "       <meta http-equiv='Content-Type' content='text/html; charset=utf-8'>"
    "       <title>{title}</title>"
    "       <style>"
    "           body{{margin:0;padding:30px;font:12px/1.5 Helvetica,Arial,Verdana,sans-serif}}"
    "           h1{{margin:0;font-size:48px;font-weight:normal;line-height:48px}}"
    "           strong{{display:inline-block;width:65px}}"
    "       </style>"
    "   </head>"
    "   <body>"
    "       <h1>{title}</h1>"
    "       <div>{content}</div>"
    "       <a href='#' onClick='window.history.go(-1)'>Go Back</a>"
    "   </body>"
    "</html>"
)


class HtmlErrorRenderer(AbstractErrorRenderer):
    """Render errors as a standalone HTML page."""

    media_type = "text/html"

    def render(self, exc: Any, display_error_details: bool) -> str:
        title = escape(self.get_error_title(exc))
        if display_error_details:
            summaries = self.summarize(exc)
            content = "<p>The application could not run because of the following error:</p>"
            content += "<h2>Details</h2>"
            content += self.format_fragment(summaries[0])
            for summary in summaries[1:]:
                content += "<h2>Previous exception</h2>"
                content += self.format_fragment(summary)
        else:
            content = f"<p>{escape(self.get_error_description(exc))}</p>"
        return _PAGE.format(title=title, content=content)

    def format_fragment(self, summary: ExceptionSummary) -> str:
        html = f"<div><strong>Type:</strong> {escape(summary.type)}</div>"
        html += f"<div><strong>Code:</strong> {summary.code}</div>"
        if summary.message:
            html += f"<div><strong>Message:</strong> {escape(summary.message)}</div>"
        if summary.file is not None:
            html += f"<div><strong>File:</strong> {escape(summary.file)}</div>"
        if summary.line is not None:
            html += f"<div><strong>Line:</strong> {summary.line}</div>"
        if summary.trace:
            html += "<h2>Trace</h2>"
            html += f"<pre>{escape(summary.trace)}</pre>"
        return html
