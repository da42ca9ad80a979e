"""XML error renderer."""

from __future__ import annotations

from typing import Any

from .base import AbstractErrorRenderer


def _cdata(value: str) -> str:
    # A literal "]]>" would close the section early, so split it across two.
    return "<![CDATA[" + value.replace("]]>", "]]]]><![CDATA[>") + "]]>"


class XmlErrorRenderer(AbstractErrorRenderer):
    """Render errors as an ``<error>`` XML document."""

    media_type = "application/xml"

    def render(self, exc: Any, display_error_details: bool) -> str:
        xml = "<error>\n"
        xml += f"  <message>{_cdata(self.get_error_title(exc))}</message>\n"
        if display_error_details:
            for summary in self.summarize(exc):
                xml += "  <exception>\n"
                xml += f"    <type>{_cdata(summary.type)}</type>\n"
                xml += f"    <code>{summary.code}</code>\n"
                xml += f"    <message>{_cdata(summary.message)}</message>\n"
                xml += f"    <file>{_cdata(summary.file or '')}</file>\n"
                xml += f"    <line>{summary.line if summary.line is not None else ''}</line>\n"
                xml += "  </exception>\n"
        xml += "</error>"
        return xml
