"""Dimensions and lighting constants for addons."""

from __future__ import annotations

# Smallest size a clamped addon dimension may take
MIN_DIMENSION = 0.01

# Doors
DOOR_GAP = 0.5  # subtracted from column width and inner height
DOOR_THICKNESS = 1.0
DOOR_INSET = 0.5  # door center sits this far behind the front face
HANDLE_RADIUS = 0.5
HANDLE_SEGMENTS = 16
HANDLE_LENGTH_RATIO = 0.25
HANDLE_EDGE_OFFSET = 2.0  # from the door's right edge
HANDLE_STANDOFF = 1.0  # in front of the door center

# Lamps
LAMP_COLOR = 0xFFEEBB
LAMP_INTENSITY = 100.0
LAMP_RANGE_FACTOR = 1.5  # times the cell width
LAMP_DROP = 1.5  # light sits this far below the cell top
LAMP_SETBACK = 5.0  # behind the front of the cell
FIXTURE_RADIUS = 3.0
FIXTURE_HEIGHT = 0.5
FIXTURE_SEGMENTS = 16

# Hanger rails
HANGER_RADIUS = 0.75
HANGER_SEGMENTS = 20
HANGER_MARGIN = 2.0  # subtracted from the cell width
HANGER_DROP = 5.0  # below the cell top
HANGER_SETBACK_RATIO = 0.25  # of the unit depth


def clamp_dimension(value: float, minimum: float = MIN_DIMENSION) -> float:
    """Clamp a derived size to the smallest valid positive value."""
    return max(value, minimum)
