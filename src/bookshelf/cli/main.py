"""Typer CLI for shelving unit scene generation."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError

from bookshelf.application import get_factory
from bookshelf.application.config import (
    SUPPORTED_VERSIONS,
    BookshelfConfiguration,
    ConfigError,
    config_to_configuration,
    load_config,
    merge_config_with_cli,
    validation_details,
)
from bookshelf.cli.commands import display_load_error, validate_command
from bookshelf.domain.value_objects import EdgeProfile, MaterialPreset

E = TypeVar("E", bound=Enum)

app = typer.Typer(
    name="bookshelf",
    help="Generate 3D scene graphs of modular shelving units.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log build stages to stderr"),
    ] = False,
) -> None:
    """Generate 3D scene graphs of modular shelving units."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_choice(enum_cls: type[E], value: str | None, option: str) -> E | None:
    """Match a CLI value against an enum's display value or member name.

    Names are matched case-insensitively with '-' and '_' interchangeable,
    so "matte-black" selects "Matte Black".
    """
    if value is None:
        return None
    key = value.strip().lower().replace("-", "_")
    for member in enum_cls:
        if value == member.value or key == member.name.lower():
            return member
    choices = ", ".join(m.name.lower().replace("_", "-") for m in enum_cls)
    typer.echo(f"Error: invalid {option} '{value}' (choose from {choices})", err=True)
    raise typer.Exit(code=1)


@app.command()
def summary(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Overall width")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", "-h", help="Overall height")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Overall depth")
    ] = None,
    levels: Annotated[
        int | None, typer.Option("--levels", "-l", help="Horizontal levels (rows)")
    ] = None,
    divisions: Annotated[
        int | None,
        typer.Option("--divisions", "-s", help="Vertical divisions (columns)"),
    ] = None,
    thickness: Annotated[
        float | None, typer.Option("--thickness", "-t", help="Board thickness")
    ] = None,
    material: Annotated[
        str | None,
        typer.Option("--material", "-m", help="gloss-white or matte-black"),
    ] = None,
    edge_profile: Annotated[
        str | None,
        typer.Option("--edge-profile", "-e", help="sharp or rounded"),
    ] = None,
    doors: Annotated[
        bool | None, typer.Option("--doors/--no-doors", help="One door per column")
    ] = None,
    lamps: Annotated[
        bool | None, typer.Option("--lamps/--no-lamps", help="One lamp per cell")
    ] = None,
    hangers: Annotated[
        bool | None,
        typer.Option("--hangers/--no-hangers", help="Hanger rails in the top row"),
    ] = None,
) -> None:
    """Build a shelving unit and print a summary of its scene graph.

    Options override values from --config; anything left unset uses the
    defaults (150 x 200 x 30, 4 levels, 3 divisions, 2 thick boards).

    Example:
        bookshelf summary --levels 5 --lamps --edge-profile rounded
    """
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
    else:
        config = BookshelfConfiguration(schema_version=max(SUPPORTED_VERSIONS))

    try:
        config = merge_config_with_cli(
            config,
            width=width,
            height=height,
            depth=depth,
            horizontal_levels=levels,
            vertical_divisions=divisions,
            board_thickness=thickness,
            material=_parse_choice(MaterialPreset, material, "material"),
            edge_profile=_parse_choice(EdgeProfile, edge_profile, "edge profile"),
            doors=doors,
            lamps=lamps,
            hangers=hangers,
        )
    except PydanticValidationError as e:
        for detail in validation_details(e):
            location = detail["path"] or "configuration"
            typer.echo(f"Error: {location}: {detail['message']}", err=True)
        raise typer.Exit(code=1)

    factory = get_factory()
    outcome = factory.create_build_command().execute(config_to_configuration(config))
    if not outcome.success or outcome.scene is None:
        for error in outcome.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    try:
        formatter = factory.get_scene_summary_formatter()
        typer.echo(formatter.format(outcome.scene, outcome.warnings))
    finally:
        outcome.scene.release()


@app.command()
def materials() -> None:
    """List the board material presets and addon materials."""
    typer.echo(get_factory().get_material_table_formatter().format())


if __name__ == "__main__":
    app()
