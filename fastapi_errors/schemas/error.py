"""Pydantic schemas for serialized error documents."""

from typing import List, Optional

from pydantic import BaseModel


class ExceptionDetail(BaseModel):
    """One exception in a chain: type, code, message and origin."""

    type: str
    code: int
    message: str
    file: Optional[str] = None
    line: Optional[int] = None


class ErrorDocument(BaseModel):
    """Top-level JSON error document."""

    message: str
    exception: Optional[List[ExceptionDetail]] = None
