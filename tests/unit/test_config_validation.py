"""Tests for CLI merging and buildability validation of configurations."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from bookshelf.application.config import (
    BookshelfConfiguration,
    ValidationResult,
    load_config_from_dict,
    merge_config_with_cli,
    validate_config,
)
from bookshelf.domain.value_objects import EdgeProfile


def _config(shelf: dict | None = None, addons: dict | None = None) -> BookshelfConfiguration:
    return load_config_from_dict(
        {"schema_version": "1.0", "shelf": shelf or {}, "addons": addons or {}}
    )


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_overrides_replace_values(self) -> None:
        merged = merge_config_with_cli(_config(), width=120.0, lamps=True)
        assert merged.shelf.width == 120.0
        assert merged.addons.lamps
        assert merged.shelf.height == 200.0

    def test_none_values_are_ignored(self) -> None:
        config = _config({"width": 90.0}, {"doors": True})
        merged = merge_config_with_cli(config, width=None, doors=None)
        assert merged.shelf.width == 90.0
        assert merged.addons.doors

    def test_false_overrides_true(self) -> None:
        merged = merge_config_with_cli(_config(addons={"doors": True}), doors=False)
        assert not merged.addons.doors

    def test_enum_override(self) -> None:
        merged = merge_config_with_cli(_config(), edge_profile=EdgeProfile.ROUNDED)
        assert merged.shelf.edge_profile is EdgeProfile.ROUNDED

    def test_schema_version_is_kept(self) -> None:
        config = load_config_from_dict({"schema_version": "1.2"})
        assert merge_config_with_cli(config).schema_version == "1.2"

    def test_unknown_override_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown configuration overrides"):
            merge_config_with_cli(_config(), colour="red")

    def test_merged_values_are_revalidated(self) -> None:
        with pytest.raises(PydanticValidationError):
            merge_config_with_cli(_config(), board_thickness=20.0)


class TestValidationResult:
    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "b").exit_code == 2
        assert ValidationResult().add_warning("a", "b").add_error("c", "d").exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "b").merge(
            ValidationResult().add_warning("c", "d")
        )
        assert len(result.errors) == 1
        assert result.has_warnings


class TestValidateConfig:
    """Tests for validate_config."""

    def test_reference_unit_is_clean(self) -> None:
        result = validate_config(_config(addons={"doors": True, "lamps": True, "hangers": True}))
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_too_many_divisions_is_an_error(self) -> None:
        result = validate_config(_config({"vertical_divisions": 100}))
        assert result.exit_code == 1
        assert result.errors[0].path == "shelf.vertical_divisions"
        assert result.errors[0].value == 100

    def test_clamped_addons_are_warnings(self) -> None:
        result = validate_config(_config({"width": 10.0}, {"hangers": True, "lamps": True}))
        assert result.is_valid
        assert result.exit_code == 2
        assert {w.path for w in result.warnings} == {"addons.lamps", "addons.hangers"}
        assert all(w.suggestion for w in result.warnings)

    def test_disabled_addons_are_not_checked(self) -> None:
        result = validate_config(_config({"width": 10.0}))
        assert result.exit_code == 0
