"""Error renderers and the media type dispatch table."""

from fastapi_errors.core.media_types import MediaType

from .base import AbstractErrorRenderer, ErrorRenderer, ExceptionSummary
from .html_renderer import HtmlErrorRenderer
from .json_renderer import JsonErrorRenderer
from .plain_text_renderer import PlainTextErrorRenderer
from .xml_renderer import XmlErrorRenderer

RENDERERS: dict[MediaType, type[AbstractErrorRenderer]] = {
    MediaType.APPLICATION_JSON: JsonErrorRenderer,
    MediaType.APPLICATION_XML: XmlErrorRenderer,
    MediaType.TEXT_XML: XmlErrorRenderer,
    MediaType.TEXT_HTML: HtmlErrorRenderer,
    MediaType.TEXT_PLAIN: PlainTextErrorRenderer,
}

DEFAULT_RENDERER = HtmlErrorRenderer


def renderer_for(content_type: str) -> AbstractErrorRenderer:
    """Return a renderer for ``content_type``, falling back to HTML."""
    try:
        return RENDERERS[MediaType(content_type)]()
    except ValueError:
        return DEFAULT_RENDERER()


__all__ = [
    "AbstractErrorRenderer",
    "DEFAULT_RENDERER",
    "ErrorRenderer",
    "ExceptionSummary",
    "HtmlErrorRenderer",
    "JsonErrorRenderer",
    "PlainTextErrorRenderer",
    "RENDERERS",
    "XmlErrorRenderer",
    "renderer_for",
]
