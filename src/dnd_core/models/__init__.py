"""Domain models for D&D 5E core mechanics.

This package contains the bounded value types (ability scores, modifiers,
levels, proficiency bonuses), the ability and skill enumerations, and the
skill proficiency container.

Modules:
    enums: Ability, Skill and SkillLevel enumerations.
    base: Shared bounded integer base class.
    abilities: AbilityScore, AbilityModifier and the Abilities block.
    progression: Level and ProficiencyBonus.
    skills: SkillProficiencies and the skill bonus calculation.
"""

from __future__ import annotations

from dnd_core.models.abilities import Abilities, AbilityModifier, AbilityScore
from dnd_core.models.base import BoundedValue
from dnd_core.models.enums import (
    SKILL_ABILITIES,
    Ability,
    Skill,
    SkillLevel,
    governing_ability,
)
from dnd_core.models.progression import Level, ProficiencyBonus
from dnd_core.models.skills import SkillProficiencies, skill_bonus


__all__ = [
    # Enums
    "Ability",
    "Skill",
    "SkillLevel",
    "SKILL_ABILITIES",
    "governing_ability",
    # Value types
    "BoundedValue",
    "AbilityScore",
    "AbilityModifier",
    "Level",
    "ProficiencyBonus",
    # Containers
    "Abilities",
    "SkillProficiencies",
    # Calculations
    "skill_bonus",
]
