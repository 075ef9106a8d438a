"""
Custom exceptions for ContentAudit.
"""
from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail
        )


class ContentAuditError(Exception):
    """Base error for failures outside the validators (files, directories)."""


class BuildDirectoryNotFoundError(ContentAuditError):
    """The built-site directory to audit does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Build directory not found: {path}")
