import math

import pytest

from slot_generator.builder import build_slots
from slot_generator.constants import VARIANT_POSTFIXES
from slot_generator.schema import Block, BlockShape, BlockType, Point, Sector, Slot
from slot_generator.variants import expand, mirror, rotate


def make_sector(*centers, sector_id=0, size="1x1"):
    slots = [
        Slot(id=i, relative_position=Point(i, 0), absolute_position=center, rotation=45)
        for i, center in enumerate(centers)
    ]
    return Sector(id=sector_id, slots=slots, size=size)


def centers(layout):
    return [slot.absolute_position for sector in layout.sectors for slot in sector.slots]


@pytest.fixture
def square_block():
    return Block(shape=BlockShape.SQUARE, type=BlockType.PARK, density="High", position=12)


@pytest.fixture
def triangle_block():
    return Block(shape=BlockShape.TRIANGLE_BOTTOM_RIGHT, type=BlockType.COMMERCIAL, density="Low", position=3)


def test_mirror_swaps_centers_and_keeps_structure():
    sector = make_sector(Point(24, 34), Point(52, 90), sector_id=3, size="2x1")
    mirrored = mirror([sector])[0]

    assert [slot.absolute_position for slot in mirrored.slots] == [Point(34, 24), Point(90, 52)]
    assert [slot.top_left_position for slot in mirrored.slots] == [Point(20, 10), Point(76, 38)]
    assert [slot.relative_position for slot in mirrored.slots] == [Point(0, 0), Point(1, 0)]
    assert [slot.id for slot in mirrored.slots] == [0, 1]
    assert all(slot.rotation == 45 for slot in mirrored.slots)
    assert mirrored.id == 3
    assert mirrored.size == "2x1"


def test_mirror_is_an_involution():
    sectors = [Sector(id=0, slots=build_slots("2x3", Point(15, 40), 45), size="2x3")]
    assert mirror(mirror(sectors)) == sectors


def test_mirror_leaves_input_untouched():
    sector = make_sector(Point(24, 34))
    mirror([sector])
    assert sector.slots[0].absolute_position == Point(24, 34)


def test_rotate_translates_after_rotation():
    rotated = rotate([make_sector(Point(24, 34))], 3 * math.pi / 2, Point(400, 0))[0]
    assert rotated.slots[0].absolute_position == Point(366, 24)
    assert rotated.slots[0].top_left_position == Point(352, 10)


def test_expand_square(square_block):
    layouts = expand(square_block, [make_sector(Point(24, 34))])

    assert [layout.block.postfix for layout in layouts] == VARIANT_POSTFIXES
    assert all(layout.block.shape == BlockShape.SQUARE for layout in layouts)
    assert all(layout.block.type == BlockType.PARK for layout in layouts)
    assert all(layout.block.density == "High" for layout in layouts)
    assert all(layout.block.position == 12 for layout in layouts)
    assert all(layout.id is None for layout in layouts)
    assert layouts[0].block is square_block


def test_expand_triangle_shapes(triangle_block):
    layouts = expand(triangle_block, [])
    assert [layout.block.shape for layout in layouts] == [
        BlockShape.TRIANGLE_BOTTOM_RIGHT, BlockShape.TRIANGLE_BOTTOM_RIGHT,
        BlockShape.TRIANGLE_BOTTOM_LEFT, BlockShape.TRIANGLE_BOTTOM_LEFT,
        BlockShape.TRIANGLE_TOP_LEFT, BlockShape.TRIANGLE_TOP_LEFT,
        BlockShape.TRIANGLE_TOP_RIGHT, BlockShape.TRIANGLE_TOP_RIGHT,
    ]
    assert all(layout.sectors == [] for layout in layouts)


def test_expand_coordinates(triangle_block):
    layouts = expand(triangle_block, [make_sector(Point(24, 34))])
    by_postfix = {layout.block.postfix: centers(layout) for layout in layouts}

    assert by_postfix == {
        "a": [Point(24, 34)],
        "a_mirror": [Point(34, 24)],
        "b": [Point(366, 24)],
        "b_mirror": [Point(376, 34)],
        "c": [Point(376, 366)],
        "c_mirror": [Point(366, 376)],
        "d": [Point(34, 376)],
        "d_mirror": [Point(24, 366)],
    }


def test_expand_keeps_top_left_invariant(square_block):
    sectors = [
        Sector(id=0, slots=build_slots("2x3", Point(10, 20), 0), size="2x3"),
        Sector(id=1, slots=build_slots("3x3", Point(150, 60), -45), size="3x3"),
    ]
    for layout in expand(square_block, sectors):
        for sector in layout.sectors:
            for slot in sector.slots:
                assert slot.top_left_position == slot.absolute_position - Point(14, 14)


def test_expand_uses_field_size_from_config(square_block):
    from slot_generator.config import LayoutConfig

    layouts = expand(square_block, [make_sector(Point(10, 20))], LayoutConfig(field_size=100))
    assert centers(layouts[2]) == [Point(80, 10)]
    assert centers(layouts[6]) == [Point(20, 90)]
