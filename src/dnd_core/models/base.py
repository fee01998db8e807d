"""Shared base for bounded integer value types.

Ability scores, ability modifiers, levels and proficiency bonuses are all
small integers with a fixed valid range. ``BoundedValue`` holds that range
on the class and implements validation, clamping, ordering and integer
conversion once.

Out-of-range policy is the same for every subclass: the constructor (and
deserialization) rejects the value with ``OutOfRangeError``; ``clamped()``
is the only way to pull a value into range.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dnd_core.core.exceptions import OutOfRangeError
from dnd_core.core.logging import get_logger


logger = get_logger(__name__)

_UNSET: Any = object()


@total_ordering
class BoundedValue(BaseModel):
    """Immutable integer constrained to ``[MIN_VALUE, MAX_VALUE]``.

    Subclasses set ``MIN_VALUE``, ``MAX_VALUE`` and ``LABEL`` and redeclare
    ``value`` with their default.

    Attributes:
        value: The validated integer.

    Example:
        >>> class Die(BoundedValue):
        ...     MIN_VALUE: ClassVar[int] = 1
        ...     MAX_VALUE: ClassVar[int] = 6
        ...     LABEL: ClassVar[str] = "Die face"
        >>> Die(7)
        Traceback (most recent call last):
        ...
        OutOfRangeError: Die face cannot be greater than 6 [...]
        >>> Die.clamped(7).value
        6
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    MIN_VALUE: ClassVar[int]
    MAX_VALUE: ClassVar[int]
    LABEL: ClassVar[str]

    value: int = Field(strict=True)

    def __init__(self, value: Any = _UNSET, /, **data: Any) -> None:
        """Construct from a positional or keyword ``value``.

        Args:
            value: The raw integer. Omit to use the type's default.
            **data: Keyword fields, as accepted by pydantic.

        Raises:
            OutOfRangeError: If the value is outside the valid range.
            pydantic.ValidationError: If the value is not an int.
        """
        if value is not _UNSET:
            data["value"] = value
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_value(cls, data: Any) -> Any:
        """Accept a bare integer wherever a mapping is expected."""
        if isinstance(data, int) and not isinstance(data, bool):
            return {"value": data}
        return data

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        """Reject values outside the subclass range.

        Raises:
            OutOfRangeError: If value < MIN_VALUE or value > MAX_VALUE.
        """
        cls = type(self)
        if self.value < cls.MIN_VALUE:
            message = f"{cls.LABEL} cannot be less than {cls.MIN_VALUE}"
        elif self.value > cls.MAX_VALUE:
            message = f"{cls.LABEL} cannot be greater than {cls.MAX_VALUE}"
        else:
            return self

        logger.debug("Rejected out-of-range value", type=cls.__name__, value=self.value)
        raise OutOfRangeError(
            message,
            field_name=cls.__name__,
            invalid_value=self.value,
            minimum=cls.MIN_VALUE,
            maximum=cls.MAX_VALUE,
        )

    @classmethod
    def clamped(cls, value: int) -> Self:
        """Construct, clamping ``value`` to the nearest bound instead of failing.

        Args:
            value: Any integer.

        Returns:
            An instance holding ``value`` limited to the valid range.
        """
        bounded = max(cls.MIN_VALUE, min(cls.MAX_VALUE, value))
        if bounded != value:
            logger.debug(
                "Clamped out-of-range value",
                type=cls.__name__,
                requested=value,
                clamped=bounded,
            )
        return cls(bounded)

    @classmethod
    def minimum(cls) -> Self:
        return cls(cls.MIN_VALUE)

    @classmethod
    def maximum(cls) -> Self:
        return cls(cls.MAX_VALUE)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value  # type: ignore[attr-defined]

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


__all__ = [
    "BoundedValue",
]
