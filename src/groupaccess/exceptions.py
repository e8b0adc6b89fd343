"""Exception hierarchy for groupaccess.

All errors inherit from GroupAccessError and carry a stable ``code``.

Usage:
    from groupaccess.exceptions import (
        ConfigurationInvalidError,
        NotFoundError,
        StorageConflictError,
    )

Integrations may define thin subclasses for their own errors:
    class MembershipError(GroupAccessError):
        code = "MEMBERSHIP_ERROR"
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "GroupAccessError",
    "ConfigurationInvalidError",
    "StorageConflictError",
    "NotFoundError",
]


# ---- Exception Hierarchy ----------------------------------------------------


class GroupAccessError(Exception):
    """Base exception for all groupaccess errors.

    Attributes:
        code: Stable error code string (e.g. "STORAGE_CONFLICT").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationInvalidError(GroupAccessError):
    """A role or permission is missing required values or has an inconsistent id."""

    code: str = "CONFIGURATION_INVALID"
    message: str = "Invalid configuration"


class StorageConflictError(GroupAccessError):
    """An entry with the same id already exists in the store."""

    code: str = "STORAGE_CONFLICT"
    message: str = "An entry with this id already exists"


class NotFoundError(GroupAccessError):
    """A referenced entity type, bundle or permission is unknown."""

    code: str = "NOT_FOUND"
    message: str = "Not found"
