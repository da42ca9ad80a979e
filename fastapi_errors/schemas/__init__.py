"""Pydantic schemas for error documents."""

from .error import ErrorDocument, ExceptionDetail

__all__ = ["ErrorDocument", "ExceptionDetail"]
