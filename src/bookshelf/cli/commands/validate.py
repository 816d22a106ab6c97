"""Validate command for shelving unit configuration files.

Loads a JSON configuration, reports schema problems by field, then checks
that the unit can actually be built and which addons will be shrunk to fit
its cells.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from bookshelf.application.config import (
    BookshelfConfiguration,
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)

_LOAD_FAILURES = {
    "file_not_found": "File not found",
    "file_read_error": "Cannot read file",
    "json_parse": "Invalid JSON syntax",
    "validation": "Schema violations",
}


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="JSON configuration file to check"),
    ],
) -> None:
    """Check that a configuration file describes a buildable shelving unit.

    Exit codes:
        0 - The unit can be built as configured
        1 - The file cannot be loaded or the unit cannot be built
        2 - The unit can be built but some addons will be shrunk to fit

    Example:
        bookshelf validate my-shelf.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(_describe_unit(config))
    typer.echo()

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _describe_unit(config: BookshelfConfiguration) -> str:
    shelf = config.shelf
    addons = [name for name, enabled in config.addons.model_dump().items() if enabled]
    return (
        f"Unit: {shelf.width:g} x {shelf.height:g} x {shelf.depth:g}, "
        f"{shelf.horizontal_levels} x {shelf.vertical_divisions} cells, "
        f"{shelf.material.value}, addons: {', '.join(addons) or 'none'}"
    )


def _echo_field(path: str, message: str, value: Any = None, err: bool = False) -> None:
    typer.echo(f"  {path or 'configuration'}: {message}", err=err)
    if value is not None:
        typer.echo(f"    got {value!r}", err=err)


def display_load_error(error: ConfigError) -> None:
    """Print why a configuration file could not be loaded, on stderr."""
    typer.echo("Errors:", err=True)
    heading = _LOAD_FAILURES.get(error.error_type)
    if heading is None:
        typer.echo(f"  {error.message}", err=True)
    else:
        location = f": {error.path}" if error.path else ""
        typer.echo(f"  {heading}{location}", err=True)

    for detail in error.details:
        if "line" in detail:
            typer.echo(f"    line {detail['line']}: {detail['message']}", err=True)
        else:
            _echo_field(detail["path"], detail["message"], detail["value"], err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            _echo_field(error.path, error.message, error.value, err=True)
        typer.echo(err=True)
        typer.echo(
            f"Validation failed: the unit cannot be built "
            f"({len(result.errors)} error(s))",
            err=True,
        )
        return

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            _echo_field(warning.path, warning.message)
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
