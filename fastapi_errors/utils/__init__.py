"""Helpers for error response negotiation."""

from .content_negotiation import negotiate_content_type, select_known_content_types

__all__ = ["negotiate_content_type", "select_known_content_types"]
