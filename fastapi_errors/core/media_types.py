"""Media types the error handler knows how to render."""

from enum import Enum


class MediaType(str, Enum):
    """Supported error response media types, in tie-break precedence order."""

    APPLICATION_JSON = "application/json"
    APPLICATION_XML = "application/xml"
    TEXT_XML = "text/xml"
    TEXT_HTML = "text/html"
    TEXT_PLAIN = "text/plain"


KNOWN_CONTENT_TYPES: tuple[str, ...] = tuple(media_type.value for media_type in MediaType)

DEFAULT_CONTENT_TYPE = MediaType.TEXT_HTML
