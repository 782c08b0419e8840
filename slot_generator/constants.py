"""Constants for slot generation: tile sizes, field layout, rotations, and code tables."""

import math
from typing import Dict, List, Tuple

# Slot tile edge in canvas units
SLOT_SIZE: int = 28

# Rotated tiles step by half the tile diagonal so they tile without gaps
DIAGONAL: int = int(math.floor(math.sqrt(SLOT_SIZE * SLOT_SIZE * 2) + 0.5))
HALF_DIAGONAL: int = int(math.floor(DIAGONAL / 2 + 0.5))

# Field layout: blocks sit on a grid of FIELD_SIZE squares separated by OFFSET
OFFSET: int = 50
FIELD_SIZE: int = 400
FIELD_WIDTH: int = 10
FIELD_ROWS: int = 6  # Max rows per artboard

# Placement rotations a "Slot WxH" child may carry (degrees)
AVAILABLE_ROTATIONS: List[int] = [0, 90, 45, -45]

# Visual tile rotations
SLOT_ROTATION_AXIS: int = 0
SLOT_ROTATION_DIAGONAL: int = 45

# Quarter turns used by the variant generator (radians)
THIRD_QUARTER: float = 3 * math.pi / 2
FIRST_QUARTER: float = math.pi / 2

# Variant postfixes in emission order
VARIANT_POSTFIXES: List[str] = [
    "a", "a_mirror",
    "b", "b_mirror",
    "c", "c_mirror",
    "d", "d_mirror",
]
VARIANTS_PER_BLOCK: int = len(VARIANT_POSTFIXES)

# Layout ids reserved per artboard: every field position times every variant
ARTBOARD_ID_COUNT: int = FIELD_WIDTH * FIELD_ROWS * VARIANTS_PER_BLOCK

# Three-letter block type codes -> BlockType value
TYPE_CODES: Dict[str, int] = {
    "Res": 1,  # Residential
    "Com": 2,  # Commercial
    "Ind": 3,  # Industrial
    "For": 4,  # Forest
    "Par": 5,  # Park
    "Agr": 6,  # Agricultural
    "Wat": 7,  # Water
    "Was": 8,  # Wasteland
}

# Building footprints the game ships assets for
KNOWN_FOOTPRINTS: Tuple[str, ...] = ("1x1", "1x2", "2x2", "2x3", "3x3", "2x4", "3x4", "4x4")

# Name prefixes
BLOCK_PREFIXES: Tuple[str, ...] = ("T:", "S:")
SLOT_PREFIX: str = "Slot "
