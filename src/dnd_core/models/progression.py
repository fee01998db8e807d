"""Character level and proficiency bonus (PHB p.15).

The proficiency bonus is a pure function of level:

    ======  =====
    Level   Bonus
    ======  =====
    1-4     +2
    5-8     +3
    9-12    +4
    13-16   +5
    17-20   +6
    ======  =====

A ``ProficiencyBonus`` may also hold combined values up to 18 (for
expertise and stacking rules); those only come from ``combine`` or the
``expertise`` constructor, never from ``from_level``.
"""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import Field

from dnd_core.core.constants import (
    BASE_PROFICIENCY_BONUS,
    LEVELS_PER_PROFICIENCY_STEP,
    MAX_CHARACTER_LEVEL,
    MAX_PROFICIENCY_BONUS,
    MIN_CHARACTER_LEVEL,
)
from dnd_core.models.base import BoundedValue


class Level(BoundedValue):
    """Character level between 1 and 20 (default 1)."""

    MIN_VALUE: ClassVar[int] = MIN_CHARACTER_LEVEL
    MAX_VALUE: ClassVar[int] = MAX_CHARACTER_LEVEL
    LABEL: ClassVar[str] = "Level"

    value: int = Field(
        default=MIN_CHARACTER_LEVEL,
        strict=True,
        description="Character level (1-20)",
    )

    def proficiency_bonus(self) -> ProficiencyBonus:
        """Derive the proficiency bonus for this level."""
        return ProficiencyBonus.from_level(self)


class ProficiencyBonus(BoundedValue):
    """Proficiency bonus between 2 and 18 (default 2).

    Level-derived bonuses range from 2 to 6. Larger values represent
    combined bonuses, such as a doubled bonus for expertise.
    """

    MIN_VALUE: ClassVar[int] = BASE_PROFICIENCY_BONUS
    MAX_VALUE: ClassVar[int] = MAX_PROFICIENCY_BONUS
    LABEL: ClassVar[str] = "Proficiency bonus"

    value: int = Field(
        default=BASE_PROFICIENCY_BONUS,
        strict=True,
        description="Proficiency bonus (2-18)",
    )

    @classmethod
    def from_level(cls, level: Level) -> Self:
        """Get the proficiency bonus for a character level.

        Args:
            level: Character level (1-20).

        Returns:
            The stepped bonus, ``2 + (level - 1) // 4``.

        Example:
            >>> ProficiencyBonus.from_level(Level(5)).value
            3
        """
        return cls(BASE_PROFICIENCY_BONUS + (level.value - 1) // LEVELS_PER_PROFICIENCY_STEP)

    @classmethod
    def expertise(cls, level: Level) -> Self:
        """Get the doubled proficiency bonus applied with expertise at ``level``.

        Example:
            >>> ProficiencyBonus.expertise(Level(17)).value
            12
        """
        base = cls.from_level(level)
        return base.combine(base)

    def combine(self, other: ProficiencyBonus) -> Self:
        """Add two proficiency bonuses.

        Args:
            other: The bonus to add.

        Returns:
            A bonus holding the sum.

        Raises:
            OutOfRangeError: If the sum exceeds 18.
        """
        return type(self)(self.value + other.value)


__all__ = [
    "Level",
    "ProficiencyBonus",
]
