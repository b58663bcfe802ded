"""Unit tests for cross-reference checks and placement advisories."""

from pathlib import Path
from typing import Any

import pytest

from kitchenplan.application.config import (
    ProjectConfiguration,
    ValidationResult,
    check_placement_advisories,
    check_references,
    load_config,
    validate_config,
)


def _config(instances: list[dict[str, Any]], **fields: Any) -> ProjectConfiguration:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "room": {"width": 4000, "depth": 3000},
        "catalog": [
            {
                "product_id": "base-600",
                "name": "Base 600",
                "category": "Base",
                "default_size": {"width": 600, "height": 870, "depth": 575},
            },
            {"product_id": "plain", "name": "No size", "category": "Base"},
        ],
        "instances": instances,
    }
    data.update(fields)
    return ProjectConfiguration.model_validate(data)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert result.exit_code == 0
        result.add_warning("room", "Looks odd")
        assert result.has_warnings
        assert result.exit_code == 2
        result.add_error("room.width", "Bad", -1)
        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        first = ValidationResult().add_error("a", "one")
        second = ValidationResult().add_warning("b", "two", suggestion="fix it")
        merged = first.merge(second)
        assert merged is first
        assert len(merged.errors) == 1
        assert merged.warnings[0].suggestion == "fix it"


class TestCheckReferences:
    """Tests for check_references()."""

    def test_valid(self) -> None:
        config = _config([{"instance_id": "a", "product_id": "base-600"}])
        assert check_references(config).is_valid

    def test_unknown_product(self) -> None:
        config = _config(
            [
                {"instance_id": "a", "product_id": "base-600"},
                {"instance_id": "b", "product_id": "missing"},
            ]
        )
        result = check_references(config)
        assert [e.path for e in result.errors] == ["instances[1].product_id"]
        assert result.errors[0].value == "missing"


class TestPlacementAdvisories:
    """Tests for check_placement_advisories()."""

    def test_clear_layout(self) -> None:
        config = _config(
            [
                {"instance_id": "a", "product_id": "base-600", "x": 300, "z": 287.5},
                {"instance_id": "b", "product_id": "base-600", "x": 900, "z": 287.5},
            ]
        )
        assert check_placement_advisories(config).warnings == []

    def test_overlap(self) -> None:
        config = _config(
            [
                {"instance_id": "a", "product_id": "base-600", "x": 300, "z": 287.5},
                {"instance_id": "b", "product_id": "base-600", "x": 700, "z": 287.5},
            ]
        )
        warnings = check_placement_advisories(config).warnings
        assert len(warnings) == 1
        assert warnings[0].path == "instances[0]"
        assert "instances[1] ('b')" in warnings[0].message

    def test_overlap_within_tolerance(self) -> None:
        config = _config(
            [
                {"instance_id": "a", "product_id": "base-600", "x": 300, "z": 287.5},
                {"instance_id": "b", "product_id": "base-600", "x": 897, "z": 287.5},
            ]
        )
        assert check_placement_advisories(config).warnings == []
        assert check_placement_advisories(config, overlap_tolerance=0).warnings

    def test_outside_room(self) -> None:
        config = _config(
            [{"instance_id": "a", "product_id": "base-600", "x": 100, "z": 287.5}]
        )
        warnings = check_placement_advisories(config).warnings
        assert warnings[0].message == "Item extends outside the room"
        assert warnings[0].suggestion is not None

    def test_rotation_swaps_footprint(self) -> None:
        """A quarter turn puts the 575 depth along x."""
        config = _config(
            [
                {
                    "instance_id": "a",
                    "product_id": "base-600",
                    "x": 287.5,
                    "z": 300,
                    "rotation": 90,
                }
            ]
        )
        assert check_placement_advisories(config).warnings == []

    def test_unknown_size_skipped(self) -> None:
        config = _config(
            [
                {"instance_id": "a", "product_id": "plain", "x": 0, "z": 0},
                {"instance_id": "b", "product_id": "plain", "x": 0, "z": 0},
            ]
        )
        assert check_placement_advisories(config).warnings == []

    def test_explicit_instance_size(self) -> None:
        config = _config(
            [
                {
                    "instance_id": "a",
                    "product_id": "plain",
                    "x": 3900,
                    "z": 1500,
                    "width": 600,
                    "depth": 575,
                }
            ]
        )
        assert len(check_placement_advisories(config).warnings) == 1


class TestValidateConfig:
    """Tests for validate_config() on fixture projects."""

    @pytest.mark.parametrize(
        "name,exit_code", [("valid_kitchen.json", 0), ("overlapping_items.json", 2)]
    )
    def test_fixture_exit_codes(
        self, fixtures_path: Path, name: str, exit_code: int
    ) -> None:
        result = validate_config(load_config(fixtures_path / name))
        assert result.exit_code == exit_code

    def test_overlapping_fixture_warnings(self, fixtures_path: Path) -> None:
        result = validate_config(load_config(fixtures_path / "overlapping_items.json"))
        paths = [warning.path for warning in result.warnings]
        assert paths == ["instances[0]", "instances[2]"]

    def test_uses_collision_padding(self) -> None:
        config = _config(
            [
                {"instance_id": "a", "product_id": "base-600", "x": 300, "z": 287.5},
                {"instance_id": "b", "product_id": "base-600", "x": 880, "z": 287.5},
            ],
            snap={"collision_padding": 30},
        )
        assert validate_config(config).exit_code == 0
