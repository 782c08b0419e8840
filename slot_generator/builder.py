"""Slot-grid builder: fills one building footprint with slots."""

import re
from typing import Callable, List, Optional, Tuple

from .config import LayoutConfig, DEFAULT_CONFIG
from .constants import AVAILABLE_ROTATIONS, SLOT_ROTATION_AXIS, SLOT_ROTATION_DIAGONAL
from .geometry import axis_aligned_center, diagonal_center, reverse_diagonal_center
from .schema import Point, Slot

FOOTPRINT_PATTERN = re.compile(r'^(\d+)x(\d+)$')


class UnsupportedRotationError(ValueError):
    """Raised when a slot child is rotated outside the supported set."""

    def __init__(self, rotation):
        self.rotation = rotation
        super().__init__(f"Unknown rotation {rotation}, expected one of {AVAILABLE_ROTATIONS}")


def parse_footprint(footprint: str) -> Optional[Tuple[int, int]]:
    """Parse ``"WxH"`` into ``(w, h)``, or None when the token is malformed."""
    match = FOOTPRINT_PATTERN.match(footprint)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def build_slots(
    footprint: str,
    anchor: Point,
    rotation: int,
    config: LayoutConfig = DEFAULT_CONFIG
) -> List[Slot]:
    """
    Build the slots filling one footprint.

    Args:
        footprint: Building size "WxH" in slots
        anchor: Sector anchor relative to its block
        rotation: Placement rotation of the sector (0, 90, 45 or -45)
        config: Tile geometry

    Returns:
        Slots enumerated column-major (outer x, inner y), ids from 0

    Raises:
        UnsupportedRotationError: If rotation is not supported
        ValueError: If footprint is not "WxH"
    """
    sizes = parse_footprint(footprint)
    if sizes is None:
        raise ValueError(f"Malformed footprint '{footprint}', expected 'WxH'")
    w, h = sizes

    slot_size = config.slot_size
    half_diagonal = config.half_diagonal
    center: Callable[[Point, Point], Point]

    if rotation == 0:
        width, height = w, h
        offset = Point(0, 0)
        tile_rotation = SLOT_ROTATION_AXIS
        center = lambda rel, origin: axis_aligned_center(rel, origin, slot_size)
    elif rotation == 90:
        width, height = h, w
        offset = Point(0, -slot_size)
        tile_rotation = SLOT_ROTATION_AXIS
        center = lambda rel, origin: axis_aligned_center(rel, origin, slot_size)
    elif rotation == 45:
        width, height = w, h
        offset = Point(0, 0)
        tile_rotation = SLOT_ROTATION_DIAGONAL
        center = lambda rel, origin: diagonal_center(rel, origin, half_diagonal)
    elif rotation == -45:
        width, height = w, h
        offset = Point(0, 0)
        tile_rotation = SLOT_ROTATION_DIAGONAL
        center = lambda rel, origin: reverse_diagonal_center(rel, origin, half_diagonal)
    else:
        raise UnsupportedRotationError(rotation)

    origin = anchor + offset
    slots = []
    index = 0
    for x in range(width):
        for y in range(height):
            relative = Point(x, y)
            slots.append(Slot(
                id=index,
                relative_position=relative,
                absolute_position=center(relative, origin),
                rotation=tile_rotation,
                slot_size=slot_size
            ))
            index += 1

    return slots
