"""Fixed pixel grid of a rendered diagram."""

from __future__ import annotations

PITCH = 22  # px between adjacent points
ARM = 11  # half a pitch: length of each board-line arm
LABEL_MARGIN = 6  # extra px per dimension when coordinates are shown
ORIGIN = 22.5
ORIGIN_WITH_COORDINATES = 28.5


def surface_size(width: int, height: int, coordinates: bool) -> tuple[int, int]:
    """Pixel size of the surface for a *width* × *height* board."""
    extra = LABEL_MARGIN if coordinates else 0
    return (width + 1) * PITCH + extra, (height + 1) * PITCH + extra


def origin(coordinates: bool) -> float:
    return ORIGIN_WITH_COORDINATES if coordinates else ORIGIN


def cell_center(row: int, col: int, coordinates: bool) -> tuple[float, float]:
    """Centre of the point at (*row*, *col*)."""
    edge = origin(coordinates)
    return col * PITCH + edge, row * PITCH + edge
