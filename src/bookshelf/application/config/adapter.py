"""Adapter to convert BookshelfConfiguration to the domain Configuration."""

from bookshelf.application.config.schema import BookshelfConfiguration
from bookshelf.domain.value_objects import Configuration


def config_to_configuration(config: BookshelfConfiguration) -> Configuration:
    """Convert a validated configuration file to the domain value object.

    Example:
        >>> config = load_config(Path("unit.json"))
        >>> configuration = config_to_configuration(config)
        >>> configuration.inner_width
        146.0
    """
    shelf = config.shelf
    addons = config.addons
    return Configuration(
        width=shelf.width,
        height=shelf.height,
        depth=shelf.depth,
        horizontal_levels=shelf.horizontal_levels,
        vertical_divisions=shelf.vertical_divisions,
        board_thickness=shelf.board_thickness,
        material=shelf.material,
        edge_profile=shelf.edge_profile,
        doors=addons.doors,
        lamps=addons.lamps,
        hangers=addons.hangers,
    )
