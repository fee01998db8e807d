"""Integration tests for saving and loading core values.

Tests that every value type survives a trip through a JSON file and that
loading never accepts values the constructors would reject.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pydantic
import pytest

from dnd_core.core.exceptions import OutOfRangeError
from dnd_core.models import (
    Abilities,
    Ability,
    AbilityModifier,
    AbilityScore,
    Level,
    ProficiencyBonus,
    Skill,
    SkillLevel,
    SkillProficiencies,
)


if TYPE_CHECKING:
    from pathlib import Path


class TestValueSerialization:
    """Serialization of the bounded value types."""

    @pytest.mark.parametrize(
        "value",
        [AbilityScore(17), AbilityModifier(-2), Level(11), ProficiencyBonus(8)],
    )
    def test_json_round_trip(self, value: object) -> None:
        cls = type(value)
        restored = cls.model_validate_json(value.model_dump_json())  # type: ignore[attr-defined]
        assert restored == value

    def test_dump_shape(self) -> None:
        assert Level(3).model_dump() == {"value": 3}

    def test_bare_integer_input(self) -> None:
        """Stored bare integers load as values."""
        assert AbilityScore.model_validate_json("14") == AbilityScore(14)

    def test_out_of_range_load_rejected(self) -> None:
        with pytest.raises(OutOfRangeError):
            Level.model_validate_json('{"value": 21}')


class TestEnumSerialization:
    """Enums serialize by value."""

    def test_ability_values(self) -> None:
        assert [a.value for a in Ability] == [
            "strength",
            "dexterity",
            "constitution",
            "intelligence",
            "wisdom",
            "charisma",
        ]

    def test_skill_value(self) -> None:
        assert Skill.SLEIGHT_OF_HAND.value == "sleight_of_hand"
        assert Skill("animal_handling") is Skill.ANIMAL_HANDLING

    def test_skill_level_value(self) -> None:
        assert [level.value for level in SkillLevel] == [0, 1, 2]


class TestCharacterFile:
    """Save a character's core block to disk and load it back."""

    def test_abilities_round_trip(self, tmp_path: Path, sample_abilities: Abilities) -> None:
        path = tmp_path / "abilities.json"
        path.write_text(sample_abilities.model_dump_json())

        loaded = Abilities.model_validate_json(path.read_text())

        assert loaded == sample_abilities
        assert json.loads(path.read_text())["strength"] == {"value": 16}

    def test_abilities_from_plain_numbers(self) -> None:
        """Hand-written files may store scores as plain integers."""
        loaded = Abilities.model_validate_json('{"strength": 18, "wisdom": 9}')

        assert loaded[Ability.STR] == AbilityScore(18)
        assert loaded[Ability.WIS] == AbilityScore(9)
        assert loaded[Ability.DEX] == AbilityScore(10)

    def test_abilities_invalid_score_rejected(self) -> None:
        with pytest.raises(OutOfRangeError):
            Abilities.model_validate_json('{"charisma": 0}')

    def test_proficiencies_round_trip(
        self,
        tmp_path: Path,
        sample_proficiencies: SkillProficiencies,
    ) -> None:
        path = tmp_path / "skills.json"
        path.write_text(sample_proficiencies.model_dump_json())

        loaded = SkillProficiencies.model_validate_json(path.read_text())

        assert loaded == sample_proficiencies
        assert list(loaded.items()) == list(sample_proficiencies.items())

    def test_proficiencies_json_shape(self) -> None:
        profs = SkillProficiencies().set_expertise(Skill.STEALTH)
        assert json.loads(profs.model_dump_json()) == {"levels": {"stealth": 2}}

    def test_proficiencies_unknown_skill_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SkillProficiencies.model_validate_json('{"levels": {"flying": 1}}')

    def test_proficiencies_unknown_tier_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SkillProficiencies.model_validate_json('{"levels": {"stealth": 3}}')
