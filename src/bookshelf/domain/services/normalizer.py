"""Configuration normalization and validation.

The boundary layer (config schema, UI) should never hand over an invalid
configuration, but the core re-checks every invariant before any geometry
is created.
"""

from __future__ import annotations

import dataclasses
import math
import numbers

from ..errors import DegenerateConfigError, InvalidCountError, ShelfGenerationError
from ..value_objects import Configuration, EdgeProfile, MaterialPreset

__all__ = ["normalize_configuration"]


def _normalize_count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidCountError(
            f"{name} must be an integer, got {value!r}", field=name, value=value
        )
    try:
        as_float = float(value)
    except OverflowError as e:
        raise InvalidCountError(
            f"{name} is too large to represent", field=name, value=value
        ) from e
    if not math.isfinite(as_float) or value != int(value):
        raise InvalidCountError(
            f"{name} must be a whole number, got {value!r}", field=name, value=value
        )
    count = int(value)
    if count < 1:
        raise InvalidCountError(
            f"{name} must be at least 1, got {count}", field=name, value=value
        )
    return count


def _normalize_length(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise DegenerateConfigError(
            f"{name} must be a number, got {value!r}", field=name, value=value
        )
    try:
        length = float(value)
    except OverflowError as e:
        raise DegenerateConfigError(
            f"{name} is too large to represent", field=name, value=value
        ) from e
    if not math.isfinite(length) or length <= 0:
        raise DegenerateConfigError(
            f"{name} must be positive and finite, got {value!r}",
            field=name,
            value=value,
        )
    return length


def normalize_configuration(configuration: Configuration) -> Configuration:
    """Validate a configuration and coerce its fields to canonical types.

    Counts given as integral floats become ints; material and edge profile
    given by their display names become enum members.

    Args:
        configuration: Configuration as supplied by the caller.

    Returns:
        An equivalent configuration with canonical field types.

    Raises:
        InvalidCountError: If a level or division count is below 1 or not
            a whole number.
        DegenerateConfigError: If any length is non-positive or non-finite,
            the board thickness is not below half the smallest dimension, or
            the resulting cells would have no positive size.
    """
    levels = _normalize_count("horizontal_levels", configuration.horizontal_levels)
    divisions = _normalize_count("vertical_divisions", configuration.vertical_divisions)
    width = _normalize_length("width", configuration.width)
    height = _normalize_length("height", configuration.height)
    depth = _normalize_length("depth", configuration.depth)
    thickness = _normalize_length("board_thickness", configuration.board_thickness)

    limit = min(width, height, depth) / 2
    if thickness >= limit:
        raise DegenerateConfigError(
            f"board_thickness {thickness} must be less than half the smallest "
            f"dimension ({limit})",
            field="board_thickness",
            value=thickness,
        )

    inner_width = width - 2 * thickness
    inner_height = height - 2 * thickness
    cell_width = (inner_width - (divisions - 1) * thickness) / divisions
    cell_height = (inner_height - (levels - 1) * thickness) / levels
    if cell_width <= 0:
        raise DegenerateConfigError(
            f"{divisions} vertical divisions leave no room between boards "
            f"of thickness {thickness} in a width of {width}",
            field="vertical_divisions",
            value=divisions,
        )
    if cell_height <= 0:
        raise DegenerateConfigError(
            f"{levels} horizontal levels leave no room between boards "
            f"of thickness {thickness} in a height of {height}",
            field="horizontal_levels",
            value=levels,
        )

    try:
        material = MaterialPreset(configuration.material)
    except ValueError as e:
        raise ShelfGenerationError(
            f"Unknown material {configuration.material!r}",
            field="material",
            value=configuration.material,
        ) from e
    try:
        edge_profile = EdgeProfile(configuration.edge_profile)
    except ValueError as e:
        raise ShelfGenerationError(
            f"Unknown edge profile {configuration.edge_profile!r}",
            field="edge_profile",
            value=configuration.edge_profile,
        ) from e

    return dataclasses.replace(
        configuration,
        width=width,
        height=height,
        depth=depth,
        horizontal_levels=levels,
        vertical_divisions=divisions,
        board_thickness=thickness,
        material=material,
        edge_profile=edge_profile,
        doors=bool(configuration.doors),
        lamps=bool(configuration.lamps),
        hangers=bool(configuration.hangers),
    )
