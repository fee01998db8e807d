"""Ability scores and modifiers.

An ability score is a raw rating from 1 to 30. Its modifier is derived,
never stored:

    modifier = (score - 10) // 2

Floor division rounds toward negative infinity, so a score of 9 gives
-1 rather than 0.

Example:
    >>> strength = AbilityScore(16)
    >>> strength.modifier().value
    3
    >>> AbilityModifier.from_score(AbilityScore(9)).signed()
    '-1'
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from dnd_core.core.constants import (
    DEFAULT_ABILITY_SCORE,
    MAX_ABILITY_MODIFIER,
    MAX_ABILITY_SCORE,
    MIN_ABILITY_MODIFIER,
    MIN_ABILITY_SCORE,
)
from dnd_core.models.base import BoundedValue
from dnd_core.models.enums import Ability


class AbilityScore(BoundedValue):
    """A raw ability score between 1 and 30 (default 10)."""

    MIN_VALUE: ClassVar[int] = MIN_ABILITY_SCORE
    MAX_VALUE: ClassVar[int] = MAX_ABILITY_SCORE
    LABEL: ClassVar[str] = "Ability score"

    value: int = Field(
        default=DEFAULT_ABILITY_SCORE,
        strict=True,
        description="Ability score (1-30)",
    )

    def modifier(self) -> AbilityModifier:
        """Derive the ability modifier for this score."""
        return AbilityModifier.from_score(self)


class AbilityModifier(BoundedValue):
    """Bonus or penalty derived from an ability score (-5 to +10)."""

    MIN_VALUE: ClassVar[int] = MIN_ABILITY_MODIFIER
    MAX_VALUE: ClassVar[int] = MAX_ABILITY_MODIFIER
    LABEL: ClassVar[str] = "Ability modifier"

    value: int = Field(
        default=0,
        strict=True,
        description="Ability modifier (-5 to +10)",
    )

    @classmethod
    def from_score(cls, score: AbilityScore) -> Self:
        """Calculate the modifier for an ability score.

        Args:
            score: The ability score (1-30).

        Returns:
            The modifier, ``(score - 10) // 2``.

        Example:
            >>> AbilityModifier.from_score(AbilityScore(7)).value
            -2
        """
        return cls((score.value - 10) // 2)

    def signed(self) -> str:
        """Format with an explicit sign, as printed on a character sheet ('+3', '-1', '+0')."""
        return f"{self.value:+d}"


class Abilities(BaseModel):
    """The six ability scores of one creature.

    Scores may be given as AbilityScore instances or plain integers.
    Modifiers are derived on access.

    Attributes:
        strength: Physical power, athletic training, raw physical force.
        dexterity: Agility, reflexes, balance, coordination.
        constitution: Health, stamina, vital force, endurance.
        intelligence: Mental acuity, information recall, analytical skill.
        wisdom: Awareness, intuition, insight, perception.
        charisma: Confidence, eloquence, leadership, force of personality.

    Example:
        >>> abilities = Abilities(strength=16, dexterity=14)
        >>> abilities[Ability.STR]
        AbilityScore(value=16)
        >>> abilities.modifier(Ability.DEX).value
        2
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    strength: AbilityScore = Field(default_factory=AbilityScore)
    dexterity: AbilityScore = Field(default_factory=AbilityScore)
    constitution: AbilityScore = Field(default_factory=AbilityScore)
    intelligence: AbilityScore = Field(default_factory=AbilityScore)
    wisdom: AbilityScore = Field(default_factory=AbilityScore)
    charisma: AbilityScore = Field(default_factory=AbilityScore)

    @classmethod
    def uniform(cls, score: AbilityScore) -> Self:
        """Build a block with the same score in all six abilities."""
        return cls(**{ability.value: score for ability in Ability})

    def __getitem__(self, ability: Ability) -> AbilityScore:
        return getattr(self, ability.value)

    def items(self) -> Iterator[tuple[Ability, AbilityScore]]:
        """Iterate over (ability, score) pairs in canonical order."""
        for ability in Ability:
            yield ability, self[ability]

    def modifier(self, ability: Ability) -> AbilityModifier:
        """Get the modifier for a specific ability."""
        return self[ability].modifier()

    def with_score(self, ability: Ability, score: AbilityScore) -> Self:
        """Return a copy with one ability score replaced."""
        scores = {name.value: value for name, value in self.items()}
        scores[ability.value] = score
        return type(self)(**scores)


__all__ = [
    "AbilityScore",
    "AbilityModifier",
    "Abilities",
]
