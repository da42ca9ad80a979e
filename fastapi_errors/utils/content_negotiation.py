"""Accept header negotiation for error responses.

This is a bare-bones heuristic for picking an error representation. Tokens
are compared verbatim: no whitespace trimming, no ``q=`` weighting and no
wildcard matching. Use a full negotiation library for anything else.
"""

from __future__ import annotations

import re

from fastapi_errors.core.media_types import DEFAULT_CONTENT_TYPE, KNOWN_CONTENT_TYPES

_SUFFIX_PATTERN = re.compile(r"\+(json|xml)")


def select_known_content_types(
    accept_header: str, known_content_types: tuple[str, ...] = KNOWN_CONTENT_TYPES
) -> list[str]:
    """Return the known types listed in ``accept_header``, in header order."""
    tokens = dict.fromkeys(accept_header.split(","))
    return [token for token in tokens if token in known_content_types]


def negotiate_content_type(
    accept_header: str, known_content_types: tuple[str, ...] = KNOWN_CONTENT_TYPES
) -> str:
    """Pick the error media type for a raw ``Accept`` header value."""
    selected = select_known_content_types(accept_header, known_content_types)
    if selected:
        # text/plain only wins when it is the sole match.
        if selected[0] == "text/plain" and len(selected) > 1:
            return selected[1]
        return selected[0]

    match = _SUFFIX_PATTERN.search(accept_header)
    if match:
        media_type = f"application/{match.group(1)}"
        if media_type in known_content_types:
            return media_type

    return DEFAULT_CONTENT_TYPE.value
