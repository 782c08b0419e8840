"""
Variant generator: derives the mirrored and rotated copies of one block.

One authored block (variant "a") fills one quadrant of a symmetric field.
The other quadrants reuse it rotated by 270 degrees (b), twice by 270
degrees (c) and by 90 degrees (d); each of the four also has a copy
mirrored across the main diagonal.
"""

from typing import List

from .config import LayoutConfig, DEFAULT_CONFIG
from .constants import FIRST_QUARTER, THIRD_QUARTER
from .geometry import mirror_points, rotate_points
from .schema import Block, BlockShape, Layout, Point, Sector

TRIANGLE_ROTATIONS = [
    BlockShape.TRIANGLE_BOTTOM_LEFT,
    BlockShape.TRIANGLE_TOP_LEFT,
    BlockShape.TRIANGLE_TOP_RIGHT,
]
SQUARE_ROTATIONS = [BlockShape.SQUARE] * 3


def _transform(sectors: List[Sector], transform) -> List[Sector]:
    result = []
    for sector in sectors:
        centers = transform([slot.absolute_position for slot in sector.slots])
        result.append(sector.with_slots([
            slot.moved_to(center) for slot, center in zip(sector.slots, centers)
        ]))
    return result


def mirror(sectors: List[Sector]) -> List[Sector]:
    """Swap x and y of every slot center; ids, sizes and grid coordinates are kept."""
    return _transform(sectors, mirror_points)


def rotate(sectors: List[Sector], angle: float, translation: Point) -> List[Sector]:
    """Rotate every slot center by ``angle`` radians, then translate."""
    return _transform(sectors, lambda points: rotate_points(points, angle, translation))


def expand(
    block: Block,
    sectors: List[Sector],
    config: LayoutConfig = DEFAULT_CONFIG
) -> List[Layout]:
    """
    Derive the eight layouts of one block.

    Returns:
        Layouts without ids, in postfix order
        a, a_mirror, b, b_mirror, c, c_mirror, d, d_mirror
    """
    size = config.field_size
    is_square = block.shape == BlockShape.SQUARE
    shapes = SQUARE_ROTATIONS if is_square else TRIANGLE_ROTATIONS

    mirror_block = block.copy(
        BlockShape.SQUARE if is_square else BlockShape.TRIANGLE_BOTTOM_RIGHT,
        "a_mirror"
    )
    mirror_sectors = mirror(sectors)

    to_right = Point(size, 0)
    to_bottom = Point(0, size)
    third_quarter = rotate(sectors, THIRD_QUARTER, to_right)
    third_quarter_mirrored = rotate(mirror_sectors, THIRD_QUARTER, to_right)

    return [
        Layout(block=block, sectors=sectors),
        Layout(block=mirror_block, sectors=mirror_sectors),
        Layout(block=block.copy(shapes[0], "b"), sectors=third_quarter),
        Layout(block=mirror_block.copy(shapes[0], "b_mirror"), sectors=third_quarter_mirrored),
        Layout(
            block=block.copy(shapes[1], "c"),
            sectors=rotate(third_quarter, THIRD_QUARTER, to_right)
        ),
        Layout(
            block=mirror_block.copy(shapes[1], "c_mirror"),
            sectors=rotate(third_quarter_mirrored, THIRD_QUARTER, to_right)
        ),
        Layout(
            block=block.copy(shapes[2], "d"),
            sectors=rotate(sectors, FIRST_QUARTER, to_bottom)
        ),
        Layout(
            block=mirror_block.copy(shapes[2], "d_mirror"),
            sectors=rotate(mirror_sectors, FIRST_QUARTER, to_bottom)
        ),
    ]
