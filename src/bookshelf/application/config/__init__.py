"""Configuration schema and loading system for shelving unit specifications.

Public API:
    - BookshelfConfiguration: Root configuration model
    - ShelfConfigSchema: Unit dimensions, structure and finish
    - AddonsConfigSchema: Addon toggles
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validation_details: Per-field description of schema violations
    - merge_config_with_cli: Apply command line overrides
    - config_to_configuration: Convert to the domain Configuration
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from bookshelf.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-shelf.json"))
    ...     print(f"Unit: {config.shelf.width}x{config.shelf.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from bookshelf.application.config.adapter import config_to_configuration
from bookshelf.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    validation_details,
)
from bookshelf.application.config.merger import merge_config_with_cli
from bookshelf.application.config.schema import (
    SUPPORTED_VERSIONS,
    AddonsConfigSchema,
    BookshelfConfiguration,
    ShelfConfigSchema,
)
from bookshelf.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "AddonsConfigSchema",
    "BookshelfConfiguration",
    "ConfigError",
    "SUPPORTED_VERSIONS",
    "ShelfConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_configuration",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
    "validation_details",
]
