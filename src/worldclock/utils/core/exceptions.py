"""
Basic exception classes for WorldClock.

This module contains fundamental exception classes that are used throughout
the codebase without creating import cycles.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    TIMEZONE = "timezone"
    VALIDATION = "validation"
    CATALOG = "catalog"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class WorldClockError(Exception):
    """Base exception class for WorldClock specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        user_message: str | None = None,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.user_message: str = user_message or message
        self.context: object | None = context
        self.recoverable: bool = recoverable


class InvalidTimezoneError(WorldClockError):
    """
    Raised when an identifier cannot be resolved by the host zone database.

    This is never a transient condition, so it is not recoverable: either the
    identifier is valid or the caller has a data bug.
    """

    def __init__(
        self,
        timezone_id: object,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            f"Unknown IANA timezone identifier: {timezone_id!r}",
            category=ErrorCategory.TIMEZONE,
            severity=ErrorSeverity.LOW,
            user_message=user_message
            or f"'{timezone_id}' is not a recognized timezone.",
            context=context,
            recoverable=False,
        )
        self.timezone_id: object = timezone_id


class ValidationError(WorldClockError):
    """Input validation errors."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            recoverable=False,
            user_message=user_message,
            context=context,
        )


class CityNotFoundError(WorldClockError):
    """Raised when a city name is not present in the catalog."""

    def __init__(self, name: str, context: object | None = None) -> None:
        super().__init__(
            f"City not found in catalog: {name!r}",
            category=ErrorCategory.CATALOG,
            severity=ErrorSeverity.LOW,
            user_message=f"Unknown city '{name}'. Use a catalog city name or an IANA timezone.",
            context=context,
            recoverable=False,
        )
        self.name: str = name


class ConfigurationError(WorldClockError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            recoverable=False,
            user_message=user_message,
            context=context,
        )
