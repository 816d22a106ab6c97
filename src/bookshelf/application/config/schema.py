"""Pydantic configuration schema models for shelving unit specifications.

This module defines the configuration schema for JSON-based shelving unit
configuration files. It uses Pydantic v2 for validation and serialization.

The MaterialPreset and EdgeProfile enums are reused from the domain layer
to ensure consistency and avoid duplication.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from bookshelf.domain.value_objects import EdgeProfile, MaterialPreset

# Supported schema versions for configuration files
# Version 1.0: Initial schema with unit dimensions, structure and addons
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class ShelfConfigSchema(BaseModel):
    """Dimensions, structure and finish of the shelving unit.

    Attributes:
        width: Overall width of the unit
        height: Overall height of the unit
        depth: Overall depth of the unit
        horizontal_levels: Number of stacked rows of cells (1 or more)
        vertical_divisions: Number of side-by-side columns (1 or more)
        board_thickness: Thickness of every board
        material: Board material preset
        edge_profile: Edge finishing of the boards
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=150.0, gt=0, allow_inf_nan=False)
    height: float = Field(default=200.0, gt=0, allow_inf_nan=False)
    depth: float = Field(default=30.0, gt=0, allow_inf_nan=False)
    horizontal_levels: int = Field(default=4, ge=1)
    vertical_divisions: int = Field(default=3, ge=1)
    board_thickness: float = Field(default=2.0, gt=0, allow_inf_nan=False)
    material: MaterialPreset = MaterialPreset.GLOSS_WHITE
    edge_profile: EdgeProfile = EdgeProfile.SHARP

    @model_validator(mode="after")
    def validate_board_thickness(self) -> "ShelfConfigSchema":
        """Validate that boards leave room inside the unit.

        Reported with the ``board_thickness_too_large`` error type so the
        loader can attribute it to the ``board_thickness`` field.
        """
        limit = min(self.width, self.height, self.depth) / 2
        if self.board_thickness >= limit:
            raise PydanticCustomError(
                "board_thickness_too_large",
                "board_thickness ({board_thickness}) must be less than half "
                "the smallest dimension ({limit})",
                {"board_thickness": self.board_thickness, "limit": limit},
            )
        return self


class AddonsConfigSchema(BaseModel):
    """Independently toggled addons.

    Attributes:
        doors: One full-height door per column
        lamps: One lamp per cell
        hangers: Hanger rails across the top row
    """

    model_config = ConfigDict(extra="forbid")

    doors: bool = False
    lamps: bool = False
    hangers: bool = False


class BookshelfConfiguration(BaseModel):
    """Root configuration model for shelving unit specifications.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        shelf: Unit dimensions, structure and finish
        addons: Addon toggles

    Example:
        >>> config = BookshelfConfiguration(
        ...     schema_version="1.0",
        ...     shelf=ShelfConfigSchema(width=120.0, horizontal_levels=5),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    shelf: ShelfConfigSchema = Field(default_factory=ShelfConfigSchema)
    addons: AddonsConfigSchema = Field(default_factory=AddonsConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
