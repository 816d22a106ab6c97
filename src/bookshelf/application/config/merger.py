"""Configuration merging utilities for CLI override support.

Precedence: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from bookshelf.application.config.schema import (
    AddonsConfigSchema,
    BookshelfConfiguration,
    ShelfConfigSchema,
)

_SHELF_FIELDS = tuple(ShelfConfigSchema.model_fields)
_ADDON_FIELDS = tuple(AddonsConfigSchema.model_fields)


def merge_config_with_cli(
    config: BookshelfConfiguration, **overrides: Any
) -> BookshelfConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base BookshelfConfiguration to merge with
        **overrides: Field overrides by name, e.g. ``width=120.0`` or
            ``doors=True``. None values are ignored.

    Returns:
        A new, re-validated BookshelfConfiguration with merged values

    Raises:
        ValueError: If an override names an unknown field.
        pydantic.ValidationError: If the merged values are invalid.

    Example:
        >>> merged = merge_config_with_cli(config, width=120.0, lamps=None)
        >>> merged.shelf.width
        120.0
    """
    unknown = set(overrides) - set(_SHELF_FIELDS) - set(_ADDON_FIELDS)
    if unknown:
        raise ValueError(f"Unknown configuration overrides: {sorted(unknown)}")

    shelf_data = _apply_overrides(config.shelf.model_dump(), _SHELF_FIELDS, overrides)
    addon_data = _apply_overrides(config.addons.model_dump(), _ADDON_FIELDS, overrides)

    return BookshelfConfiguration(
        schema_version=config.schema_version,
        shelf=ShelfConfigSchema.model_validate(shelf_data),
        addons=AddonsConfigSchema.model_validate(addon_data),
    )


def _apply_overrides(
    data: dict[str, Any], fields: tuple[str, ...], overrides: dict[str, Any]
) -> dict[str, Any]:
    for name in fields:
        value = overrides.get(name)
        if value is not None:
            data[name] = value
    return data
