"""
Slot Generator Module

Reads block instances placed on a design canvas, infers the grid of building
slots inside each block and derives the mirrored and rotated copies that fill
the other quadrants of a symmetric field.

Design:
    Block name → Block descriptor; "Slot WxH" children → Sectors → 8 variant Layouts

Components:
    - schema: Data structures (Point, Slot, Sector, Block, Layout)
    - constants: Tile sizes, field layout, type codes
    - config: LayoutConfig (YAML loadable)
    - geometry: Placement formulas, mirror and rotation transforms
    - builder: Slot grid for one footprint
    - parser: Block names and sector detection
    - variants: Mirror/rotation variant generator
    - importer: Container scan and layout id numbering
    - host: Scene adapter and plugin command surface
"""

from .schema import Point, Slot, Sector, Block, BlockShape, BlockType, Layout
from .config import LayoutConfig, DEFAULT_CONFIG
from .builder import build_slots, UnsupportedRotationError
from .parser import (
    parse_block_name,
    detect_sectors,
    MalformedNameError,
    UnknownTypeCodeError
)
from .variants import mirror, rotate, expand
from .importer import SlotImporter, ImportResult, register_block, run_import

__all__ = [
    # Schema
    "Point",
    "Slot",
    "Sector",
    "Block",
    "BlockShape",
    "BlockType",
    "Layout",
    # Configuration
    "LayoutConfig",
    "DEFAULT_CONFIG",
    # Building
    "build_slots",
    "UnsupportedRotationError",
    # Parsing
    "parse_block_name",
    "detect_sectors",
    "MalformedNameError",
    "UnknownTypeCodeError",
    # Variants
    "mirror",
    "rotate",
    "expand",
    # Import
    "SlotImporter",
    "ImportResult",
    "register_block",
    "run_import",
]
