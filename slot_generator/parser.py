"""Block name parsing and sector detection."""

import logging
import re
from typing import List

from .builder import UnsupportedRotationError, build_slots, parse_footprint
from .config import LayoutConfig, DEFAULT_CONFIG
from .constants import AVAILABLE_ROTATIONS, KNOWN_FOOTPRINTS, SLOT_PREFIX, TYPE_CODES
from .geometry import round_half_up
from .schema import Block, BlockShape, BlockType, Point, Sector

logger = logging.getLogger(__name__)

# <Shape>:<BlockType>_<Density>_<NNN>
BLOCK_NAME_PATTERN = re.compile(r'^([TS]):([a-z]+)_([a-z]+)_(\d+)', re.IGNORECASE)
SLOT_NAME_PATTERN = re.compile(r'^' + re.escape(SLOT_PREFIX) + r'(\w+)')

_TYPE_LOOKUP = {code.lower(): BlockType(value) for code, value in TYPE_CODES.items()}


class MalformedNameError(ValueError):
    """Raised when a block or slot name does not follow the naming convention."""

    def __init__(self, name: str, expected: str = "<Shape>:<Type>_<Density>_<NNN>"):
        self.name = name
        super().__init__(f"Malformed name '{name}', expected {expected}")


class UnknownTypeCodeError(ValueError):
    """Raised when a block type code is not in the type table."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown block type code '{code}'. Must be one of {list(TYPE_CODES)}")


def parse_block_name(name: str) -> Block:
    """
    Parse a block instance name such as ``S:Res_Low_023``.

    Returns:
        Block in its authored orientation with postfix "a"

    Raises:
        MalformedNameError: If the name does not match the pattern
        UnknownTypeCodeError: If the type code is not in the table
    """
    match = BLOCK_NAME_PATTERN.match(name)
    if not match:
        raise MalformedNameError(name)

    shape_code, type_code, density, digits = match.groups()
    block_type = _TYPE_LOOKUP.get(type_code.lower())
    if block_type is None:
        raise UnknownTypeCodeError(type_code)

    shape = BlockShape.TRIANGLE_BOTTOM_RIGHT if shape_code.upper() == "T" else BlockShape.SQUARE

    return Block(
        shape=shape,
        type=block_type,
        density=density,
        position=int(digits),
        postfix="a"
    )


def field_offset(position: int, config: LayoutConfig = DEFAULT_CONFIG) -> Point:
    """Top-left corner of the field square at ``position``."""
    step = config.offset + config.field_size
    return Point(
        config.offset + step * (position % config.field_width),
        config.offset + step * (position // config.field_width)
    )


def detect_sectors(block: Block, node, config: LayoutConfig = DEFAULT_CONFIG) -> List[Sector]:
    """
    Build one sector per ``Slot WxH`` child of a block node.

    Args:
        block: Parsed block descriptor (supplies the field position)
        node: Block node exposing ``children``, each with ``name``,
            ``position`` and ``rotation``
        config: Field and tile geometry

    Returns:
        Sectors in child order, ids from 0

    Raises:
        MalformedNameError: If a slot child has no "WxH" footprint
        UnsupportedRotationError: If a slot child is rotated outside the supported set
    """
    offset = field_offset(block.position, config)
    sectors = []

    for child in node.children:
        if not child.name.startswith(SLOT_PREFIX):
            continue

        match = SLOT_NAME_PATTERN.match(child.name)
        footprint = match.group(1) if match else ""
        if parse_footprint(footprint) is None:
            raise MalformedNameError(child.name, expected=f"'{SLOT_PREFIX}WxH'")
        if footprint not in KNOWN_FOOTPRINTS:
            logger.warning(f"Block {block.position}: footprint {footprint} has no known building size")

        anchor = Point(
            round_half_up(child.position.x - offset.x),
            round_half_up(child.position.y - offset.y)
        )
        rotation = round_half_up(child.rotation)
        if rotation not in AVAILABLE_ROTATIONS:
            raise UnsupportedRotationError(rotation)

        sector = Sector(
            id=len(sectors),
            slots=build_slots(footprint, anchor, rotation, config),
            size=footprint
        )
        logger.debug(
            f"Block {block.position}: sector {sector.id} {footprint} at "
            f"({anchor.x}, {anchor.y}) rotated {rotation}, {len(sector.slots)} slots"
        )
        sectors.append(sector)

    return sectors
