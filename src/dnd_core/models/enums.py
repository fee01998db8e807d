"""Enumeration types for D&D 5E core mechanics.

This module defines the six abilities, the eighteen skills with their
governing abilities, and the three skill proficiency tiers.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

from dnd_core.core.exceptions import UnknownNameError
from dnd_core.core.logging import get_logger


logger = get_logger(__name__)


class Ability(StrEnum):
    """D&D 5E ability scores.

    The six core abilities that define a character's physical
    and mental characteristics.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name

    def skills(self) -> tuple[Skill, ...]:
        """Get the skills governed by this ability, in canonical order."""
        return tuple(skill for skill in Skill if SKILL_ABILITIES[skill] is self)

    @classmethod
    def parse(cls, text: str) -> Ability:
        """Parse an ability from its full name or abbreviation.

        Matching is case-insensitive and ignores surrounding whitespace.

        Args:
            text: Text such as 'Strength', 'str' or 'DEX'.

        Returns:
            The matching Ability.

        Raises:
            UnknownNameError: If the text names no ability.

        Example:
            >>> Ability.parse("wis")
            <Ability.WIS: 'wisdom'>
        """
        key = text.strip().lower()
        for ability in cls:
            if key in (ability.value, ability.name.lower()):
                return ability
        logger.debug("Unknown ability name", text=text)
        raise UnknownNameError(
            f"Unknown ability: {text!r}",
            field_name="ability",
            invalid_value=text,
        )


class Skill(StrEnum):
    """D&D 5E skills.

    Members are declared in alphabetical order of their printed names,
    which is the canonical order used for iteration and display.
    Each skill is governed by exactly one ability (see ``ability``).
    """

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal_handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def ability(self) -> Ability:
        """Get the governing ability for checks with this skill."""
        return SKILL_ABILITIES[self]

    @property
    def display_name(self) -> str:
        """Get the printed skill name.

        Returns:
            Name as printed on a character sheet (e.g., 'Sleight of Hand').
        """
        words = self.value.split("_")
        return " ".join(
            word if index and word == "of" else word.capitalize()
            for index, word in enumerate(words)
        )

    @classmethod
    def parse(cls, text: str) -> Skill:
        """Parse a skill from its printed name or value.

        Matching is case-insensitive; spaces, hyphens and underscores are
        interchangeable.

        Args:
            text: Text such as 'Sleight of Hand', 'sleight-of-hand' or 'stealth'.

        Returns:
            The matching Skill.

        Raises:
            UnknownNameError: If the text names no skill.
        """
        key = "_".join(text.strip().lower().replace("-", " ").replace("_", " ").split())
        try:
            return cls(key)
        except ValueError:
            logger.debug("Unknown skill name", text=text)
            raise UnknownNameError(
                f"Unknown skill: {text!r}",
                field_name="skill",
                invalid_value=text,
            ) from None


SKILL_ABILITIES: dict[Skill, Ability] = {
    Skill.ACROBATICS: Ability.DEX,
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.ARCANA: Ability.INT,
    Skill.ATHLETICS: Ability.STR,
    Skill.DECEPTION: Ability.CHA,
    Skill.HISTORY: Ability.INT,
    Skill.INSIGHT: Ability.WIS,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.INVESTIGATION: Ability.INT,
    Skill.MEDICINE: Ability.WIS,
    Skill.NATURE: Ability.INT,
    Skill.PERCEPTION: Ability.WIS,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
    Skill.RELIGION: Ability.INT,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    Skill.SURVIVAL: Ability.WIS,
}
"""Governing ability for each skill (PHB p.175)."""


def governing_ability(skill: Skill) -> Ability:
    """Get the ability that governs checks with ``skill``."""
    return SKILL_ABILITIES[skill]


class SkillLevel(IntEnum):
    """Skill proficiency tiers.

    The integer value is the number of times the proficiency bonus is
    added to a check with the skill.

    Levels:
        UNTRAINED: Ability modifier only.
        PROFICIENT: Proficiency bonus added once.
        EXPERTISE: Proficiency bonus added twice.
    """

    UNTRAINED = 0
    PROFICIENT = 1
    EXPERTISE = 2

    @property
    def multiplier(self) -> int:
        """Number of times the proficiency bonus applies."""
        return int(self)

    @property
    def display_name(self) -> str:
        """Printed tier name, e.g. 'Expertise'."""
        return self.name.capitalize()


__all__ = [
    "Ability",
    "Skill",
    "SkillLevel",
    "SKILL_ABILITIES",
    "governing_ability",
]
