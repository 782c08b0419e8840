"""
Geometry primitives for slot placement.

Placement formulas map a slot's grid coordinate inside its sector to the
canvas coordinate of the tile center:
    axis-aligned:     anchor + slot/2 + slot * rel
    diagonal (+45):   x = anchor.x + h * (1 + rel.x + rel.y), y = anchor.y + h * (rel.y - rel.x)
    reverse (-45):    x = anchor.x + h * (rel.x - rel.y),     y = anchor.y + h * (1 + rel.x + rel.y)
where h is the half diagonal of a tile. Results are rounded half-up.
"""

import math
from typing import List

import numpy as np

from .schema import Number, Point, half_size, top_left_from_center


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, ties toward +inf."""
    return int(math.floor(value + 0.5))


def axis_aligned_center(relative: Point, anchor: Point, slot_size: Number) -> Point:
    return Point(
        round_half_up(anchor.x + slot_size / 2 + slot_size * relative.x),
        round_half_up(anchor.y + slot_size / 2 + slot_size * relative.y)
    )


def diagonal_center(relative: Point, anchor: Point, half_diagonal: int) -> Point:
    return Point(
        round_half_up(anchor.x + half_diagonal * (1 + relative.x + relative.y)),
        round_half_up(anchor.y + half_diagonal * (relative.y - relative.x))
    )


def reverse_diagonal_center(relative: Point, anchor: Point, half_diagonal: int) -> Point:
    return Point(
        round_half_up(anchor.x + half_diagonal * (relative.x - relative.y)),
        round_half_up(anchor.y + half_diagonal * (1 + relative.x + relative.y))
    )


def mirror_points(points: List[Point]) -> List[Point]:
    """Reflect across the main diagonal (swap x and y)."""
    return [point.swapped() for point in points]


def rotate_points(points: List[Point], angle: float, translation: Point) -> List[Point]:
    """
    Rotate canvas points by ``angle`` radians and translate.

    x' = round(x cos + y sin) + t.x
    y' = round(-(x sin + y cos)) + t.y
    """
    if not points:
        return []

    coords = np.array([[p.x, p.y] for p in points], dtype=np.float64)
    cos, sin = np.cos(angle), np.sin(angle)
    rotated = np.column_stack((
        coords[:, 0] * cos + coords[:, 1] * sin,
        -(coords[:, 0] * sin + coords[:, 1] * cos)
    ))
    rounded = np.floor(rotated + 0.5).astype(np.int64)

    return [
        Point(int(x) + translation.x, int(y) + translation.y)
        for x, y in rounded
    ]
