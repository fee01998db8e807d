"""Rules constants for D&D 5E core mechanics.

Bounds and defaults shared by the value types in ``dnd_core.models``.
"""

from __future__ import annotations

# =============================================================================
# Ability Scores (PHB p.173)
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score (1 is barely functioning)."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score (deities and the mightiest monsters)."""

DEFAULT_ABILITY_SCORE = 10
"""Average human ability score; yields a +0 modifier."""

MIN_ABILITY_MODIFIER = -5
"""Modifier for an ability score of 1."""

MAX_ABILITY_MODIFIER = 10
"""Modifier for an ability score of 30."""

# =============================================================================
# Levels and Proficiency (PHB p.15)
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""

BASE_PROFICIENCY_BONUS = 2
"""Proficiency bonus at levels 1-4."""

LEVELS_PER_PROFICIENCY_STEP = 4
"""The proficiency bonus rises by one every four levels."""

MAX_PROFICIENCY_BONUS = 18
"""Upper bound for combined proficiency bonuses (doubled and stacked)."""


__all__ = [
    # Ability Scores
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "DEFAULT_ABILITY_SCORE",
    "MIN_ABILITY_MODIFIER",
    "MAX_ABILITY_MODIFIER",
    # Levels and Proficiency
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "BASE_PROFICIENCY_BONUS",
    "LEVELS_PER_PROFICIENCY_STEP",
    "MAX_PROFICIENCY_BONUS",
]
