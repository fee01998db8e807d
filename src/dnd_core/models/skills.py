"""Skill proficiencies and skill check bonuses.

A skill check adds the governing ability's modifier and, depending on the
character's tier in the skill, the proficiency bonus zero, one or two
times.

Example:
    >>> profs = SkillProficiencies().set(Skill.ATHLETICS, SkillLevel.PROFICIENT)
    >>> skill_bonus(AbilityModifier(3), ProficiencyBonus(3), profs.get(Skill.ATHLETICS))
    6
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Self, assert_never

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dnd_core.models.abilities import Abilities, AbilityModifier
from dnd_core.models.enums import Skill, SkillLevel
from dnd_core.models.progression import ProficiencyBonus


def skill_bonus(
    ability_modifier: AbilityModifier,
    proficiency_bonus: ProficiencyBonus,
    skill_level: SkillLevel,
) -> int:
    """Calculate the total bonus for a skill check.

    Args:
        ability_modifier: Modifier of the skill's governing ability.
        proficiency_bonus: The character's proficiency bonus.
        skill_level: The character's tier in the skill.

    Returns:
        The modifier, plus the proficiency bonus once when proficient or
        twice with expertise.
    """
    match skill_level:
        case SkillLevel.UNTRAINED:
            return ability_modifier.value
        case SkillLevel.PROFICIENT:
            return ability_modifier.value + proficiency_bonus.value
        case SkillLevel.EXPERTISE:
            return ability_modifier.value + 2 * proficiency_bonus.value
        case _:
            assert_never(skill_level)


class SkillProficiencies(BaseModel):
    """Skill tiers for one character.

    Every skill is UNTRAINED unless set otherwise. Only trained skills are
    stored, so two instances with the same trained skills compare equal.
    Any tier can replace any other; whether a change is legal under the
    game rules is up to the caller.

    Attributes:
        levels: Trained skills mapped to PROFICIENT or EXPERTISE.

    Example:
        >>> profs = SkillProficiencies()
        >>> profs.get(Skill.STEALTH)
        <SkillLevel.UNTRAINED: 0>
        >>> profs.set_expertise(Skill.STEALTH).get(Skill.STEALTH)
        <SkillLevel.EXPERTISE: 2>
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    levels: dict[Skill, SkillLevel] = Field(
        default_factory=dict,
        description="Trained skills and their tier",
    )

    @field_validator("levels", mode="after")
    @classmethod
    def drop_untrained(cls, v: dict[Skill, SkillLevel]) -> dict[Skill, SkillLevel]:
        """Untrained is the implicit default and is never stored."""
        return {skill: level for skill, level in v.items() if level != SkillLevel.UNTRAINED}

    @classmethod
    def with_levels(cls, pairs: Iterable[tuple[Skill, SkillLevel]]) -> Self:
        """Build from (skill, level) pairs; later pairs win."""
        return cls().update(pairs)

    def get(self, skill: Skill) -> SkillLevel:
        """Get the tier for a skill, UNTRAINED if never set."""
        return self.levels.get(skill, SkillLevel.UNTRAINED)

    def set(self, skill: Skill, level: SkillLevel) -> Self:
        """Set the tier for a skill, replacing any previous tier.

        Args:
            skill: The skill to update.
            level: The new tier. UNTRAINED removes the entry.

        Returns:
            Self, for chaining.

        Raises:
            ValueError: If ``level`` is not a SkillLevel value.
        """
        level = SkillLevel(level)
        if level == SkillLevel.UNTRAINED:
            self.levels.pop(skill, None)
        else:
            self.levels[skill] = level
        return self

    def update(self, pairs: Iterable[tuple[Skill, SkillLevel]]) -> Self:
        """Apply (skill, level) pairs in order."""
        for skill, level in pairs:
            self.set(skill, level)
        return self

    def set_proficient(self, skill: Skill) -> Self:
        """Mark a skill PROFICIENT, downgrading expertise if present."""
        return self.set(skill, SkillLevel.PROFICIENT)

    def set_expertise(self, skill: Skill) -> Self:
        """Mark a skill EXPERTISE."""
        return self.set(skill, SkillLevel.EXPERTISE)

    def clear(self, skill: Skill) -> Self:
        """Reset one skill to UNTRAINED."""
        return self.set(skill, SkillLevel.UNTRAINED)

    def clear_all(self) -> Self:
        """Reset every skill to UNTRAINED."""
        self.levels.clear()
        return self

    def is_proficient(self, skill: Skill) -> bool:
        """True if the skill is at PROFICIENT or EXPERTISE."""
        return self.get(skill) >= SkillLevel.PROFICIENT

    def has_expertise(self, skill: Skill) -> bool:
        """True only if the skill is at EXPERTISE."""
        return self.get(skill) == SkillLevel.EXPERTISE

    def items(self) -> Iterator[tuple[Skill, SkillLevel]]:
        """Iterate over trained skills in canonical skill order.

        Yields:
            (skill, level) pairs at PROFICIENT or EXPERTISE.
        """
        for skill in Skill:
            level = self.levels.get(skill)
            if level is not None:
                yield skill, level

    def bonus(
        self,
        skill: Skill,
        abilities: Abilities,
        proficiency_bonus: ProficiencyBonus,
    ) -> int:
        """Calculate the check bonus for a skill.

        Args:
            skill: The skill to check.
            abilities: The character's ability scores.
            proficiency_bonus: The character's proficiency bonus.

        Returns:
            Total skill check bonus.
        """
        return skill_bonus(abilities.modifier(skill.ability), proficiency_bonus, self.get(skill))

    def __contains__(self, skill: object) -> bool:
        return skill in self.levels

    def __len__(self) -> int:
        return len(self.levels)


__all__ = [
    "SkillProficiencies",
    "skill_bonus",
]
