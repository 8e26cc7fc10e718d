"""Domain exceptions for the rebac core.

Defines domain-level exceptions for rejected input and denied checks.
Cache and store failures are not modeled here; errors raised by the
key-value or SQL collaborators propagate unchanged.
"""

from typing import Any


class RebacException(Exception):
    """Base exception for all rebac errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, subject).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(RebacException):
    """Raised when a subject, object, relation or query input is malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional argument that failed validation (e.g. 'subject').
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthorizationException(RebacException):
    """Raised when a subject does not hold the required relation to an object."""

    def __init__(
        self,
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with the checked triple.

        Args:
            subject: Subject identifier (e.g. 'user:1').
            relation: Relation or permission that was checked (e.g. 'read').
            object: Object identifier (e.g. 'doc:42').
            message: Human-readable message; default used when the triple is incomplete.
        """
        if subject and relation and object:
            message = f"Permission denied: {subject} cannot {relation} {object}"
        details: dict[str, Any] = {}
        if subject:
            details["subject"] = subject
        if relation:
            details["relation"] = relation
        if object:
            details["object"] = object
        super().__init__(message, "PERMISSION_DENIED", details)


class UnsupportedDialectException(RebacException):
    """Raised when an access-list query is requested for an unknown SQL dialect."""

    def __init__(self, dialect: str) -> None:
        super().__init__(
            f"Unsupported SQL dialect: {dialect}",
            "UNSUPPORTED_DIALECT",
            {"dialect": dialect},
        )


class SqlNotConfiguredException(RebacException):
    """Raised when an operation requires a SQL database that is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
