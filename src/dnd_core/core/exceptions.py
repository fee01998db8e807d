"""Custom exception hierarchy for the D&D 5E core mechanics library.

All exceptions inherit from DndCoreError, so consumers can catch every
library failure at one boundary while still getting the offending field,
value and bounds in ``details``.

None of these classes derive from ``ValueError``. Validators raising them
inside a pydantic model therefore propagate unchanged instead of being
wrapped into a ``pydantic.ValidationError``.

Example:
    >>> from dnd_core.core.exceptions import OutOfRangeError
    >>> raise OutOfRangeError(
    ...     "Level cannot be greater than 20",
    ...     field_name="level",
    ...     invalid_value=21,
    ...     minimum=1,
    ...     maximum=20,
    ... )
"""

from __future__ import annotations

from typing import Any


class DndCoreError(Exception):
    """Base exception for all dnd_core errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DndCoreError):
    """Raised when library settings are missing or invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with the offending key.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationError(DndCoreError):
    """Raised when input to a rules type fails validation.

    This is the library's own validation error; it is distinct from
    ``pydantic.ValidationError``, which still reports type mismatches.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


class OutOfRangeError(ValidationError):
    """Raised when a bounded value is constructed outside its domain.

    Ability scores, levels, modifiers and proficiency bonuses all reject
    out-of-range input through this error. Clamping is only ever done by
    the explicit ``clamped()`` constructors.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: int | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize out-of-range error with the violated bounds.

        Args:
            message: Human-readable error description.
            field_name: Name of the bounded type or field.
            invalid_value: The rejected value.
            minimum: Smallest accepted value.
            maximum: Largest accepted value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if minimum is not None:
            combined_details["minimum"] = minimum
        if maximum is not None:
            combined_details["maximum"] = maximum
        super().__init__(
            message,
            field_name=field_name,
            invalid_value=invalid_value,
            details=combined_details,
        )


class UnknownNameError(ValidationError):
    """Raised when text does not name a known ability or skill."""


__all__ = [
    "DndCoreError",
    "ConfigurationError",
    "ValidationError",
    "OutOfRangeError",
    "UnknownNameError",
]
