"""dnd_core - D&D 5E types and common mechanics.

Bounded value types and derivation rules for ability scores, ability
modifiers, character level, proficiency bonus and skill proficiencies.
Every type is an in-memory pydantic model; nothing here performs I/O.

Example:
    >>> from dnd_core import AbilityScore, Level, Skill, SkillLevel, SkillProficiencies
    >>>
    >>> strength = AbilityScore(16)
    >>> strength.modifier().value
    3
    >>> Level(5).proficiency_bonus().value
    3
    >>>
    >>> profs = SkillProficiencies().set(Skill.ATHLETICS, SkillLevel.EXPERTISE)
    >>> profs.get(Skill.ATHLETICS)
    <SkillLevel.EXPERTISE: 2>

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Enumerations, value types and the skill proficiency container.
"""

from __future__ import annotations

# Core
from dnd_core.core.config import Settings, get_settings
from dnd_core.core.exceptions import (
    DndCoreError,
    OutOfRangeError,
    UnknownNameError,
)
from dnd_core.core.logging import configure_logging, get_logger

# Models
from dnd_core.models import (
    SKILL_ABILITIES,
    Abilities,
    Ability,
    AbilityModifier,
    AbilityScore,
    Level,
    ProficiencyBonus,
    Skill,
    SkillLevel,
    SkillProficiencies,
    governing_ability,
    skill_bonus,
)


__version__ = "0.2.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "DndCoreError",
    "OutOfRangeError",
    "UnknownNameError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Ability",
    "Skill",
    "SkillLevel",
    "SKILL_ABILITIES",
    "governing_ability",
    "AbilityScore",
    "AbilityModifier",
    "Abilities",
    "Level",
    "ProficiencyBonus",
    "SkillProficiencies",
    "skill_bonus",
]
