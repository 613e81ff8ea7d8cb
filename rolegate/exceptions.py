# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Error taxonomy for the access-control engine."""

from fastapi import HTTPException, status


class RbacError(Exception):
    """Base exception for access-control errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Access control error") -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(RbacError):
    """Raised when input is missing or malformed."""


class NotFoundError(RbacError):
    """Raised when a referenced role or user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(RbacError):
    """Raised when an operation is blocked by existing dependents or a name clash."""

    status_code = status.HTTP_409_CONFLICT


class CircularDependencyError(RbacError):
    """Raised when a parent reassignment would create a cycle."""

    def __init__(self, message: str = "Circular dependency detected") -> None:
        super().__init__(message)


class ForbiddenError(RbacError):
    """Raised when a delegation boundary or permission check is violated."""

    status_code = status.HTTP_403_FORBIDDEN


def to_http_exception(exc: RbacError) -> HTTPException:
    """Translate an access-control error into the matching HTTP error."""
    return HTTPException(status_code=exc.status_code, detail=exc.message)
