"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the dnd_core test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from dnd_core.models import Abilities, SkillProficiencies


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dnd_core.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_CORE_DEBUG": "true",
        "DND_CORE_LOG_LEVEL": "DEBUG",
        "DND_CORE_JSON_LOGS": "true",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_character_stats() -> dict[str, int]:
    """Provide sample character ability scores.

    Returns:
        Dictionary of ability scores.
    """
    return {
        "strength": 16,
        "dexterity": 14,
        "constitution": 15,
        "intelligence": 10,
        "wisdom": 12,
        "charisma": 8,
    }


@pytest.fixture
def sample_abilities(sample_character_stats: dict[str, int]) -> Abilities:
    """Create an Abilities block from the sample scores."""
    from dnd_core.models import Abilities

    return Abilities(**sample_character_stats)


@pytest.fixture
def sample_proficiencies() -> SkillProficiencies:
    """Create proficiencies for a rogue-ish character.

    Returns:
        Proficient in Athletics and Perception, expertise in Stealth.
    """
    from dnd_core.models import Skill, SkillLevel, SkillProficiencies

    return SkillProficiencies.with_levels(
        [
            (Skill.ATHLETICS, SkillLevel.PROFICIENT),
            (Skill.PERCEPTION, SkillLevel.PROFICIENT),
            (Skill.STEALTH, SkillLevel.EXPERTISE),
        ]
    )
