"""
Core utilities for ContentAudit.
"""
from contentaudit.core.exceptions import (
    BadRequestError,
    ContentAuditError,
    BuildDirectoryNotFoundError,
)

__all__ = [
    "BadRequestError",
    "ContentAuditError",
    "BuildDirectoryNotFoundError",
]
