"""Data structures for block slot layouts and their JSON output format."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .constants import SLOT_SIZE

Number = Union[int, float]


class BlockType(Enum):
    """Block category, serialized as its integer value."""
    RESIDENTIAL = 1
    COMMERCIAL = 2
    INDUSTRIAL = 3
    FOREST = 4
    PARK = 5
    AGRICULTURAL = 6
    WATER = 7
    WASTELAND = 8


class BlockShape(Enum):
    """Block outline. Triangles are named after the corner holding the right angle."""
    SQUARE = 1
    TRIANGLE_TOP_LEFT = 2
    TRIANGLE_TOP_RIGHT = 3
    TRIANGLE_BOTTOM_LEFT = 4
    TRIANGLE_BOTTOM_RIGHT = 5


@dataclass(frozen=True)
class Point:
    """2D canvas coordinate."""
    x: Number
    y: Number

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def swapped(self) -> "Point":
        return Point(self.y, self.x)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


def half_size(slot_size: Number) -> Number:
    """Half a tile edge, kept integral when the edge is even."""
    half = slot_size / 2
    return int(half) if float(half).is_integer() else half


def top_left_from_center(center: Point, slot_size: Number) -> Point:
    half = half_size(slot_size)
    return Point(center.x - half, center.y - half)


@dataclass(frozen=True)
class Slot:
    """
    One buildable tile.

    The top-left corner is always derived from the center, so a slot can only
    be moved by building a new one with a different ``absolute_position``.
    """
    id: int
    relative_position: Point  # Grid coordinate inside the sector
    absolute_position: Point  # Tile center on the canvas
    rotation: int  # Visual tile rotation (0 or 45)
    slot_size: Number = field(default=SLOT_SIZE, repr=False, compare=False)

    @property
    def top_left_position(self) -> Point:
        return top_left_from_center(self.absolute_position, self.slot_size)

    def moved_to(self, absolute_position: Point) -> "Slot":
        """Copy of this slot centered at ``absolute_position``."""
        return Slot(
            id=self.id,
            relative_position=self.relative_position,
            absolute_position=absolute_position,
            rotation=self.rotation,
            slot_size=self.slot_size
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "relativePosition": self.relative_position.to_dict(),
            "absolutePosition": self.absolute_position.to_dict(),
            "topLeftPosition": self.top_left_position.to_dict(),
            "rotation": self.rotation
        }


@dataclass(frozen=True)
class Sector:
    """Rectangular grid of slots for one building footprint."""
    id: int
    slots: List[Slot]
    size: str  # Footprint, e.g. "2x3"

    def with_slots(self, slots: List[Slot]) -> "Sector":
        return Sector(id=self.id, slots=slots, size=self.size)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "slots": [slot.to_dict() for slot in self.slots],
            "size": self.size
        }


@dataclass(frozen=True)
class Block:
    """Block descriptor parsed from an instance name."""
    shape: BlockShape
    type: BlockType
    density: str
    position: int  # Index in the field, row-major with FIELD_WIDTH columns
    postfix: str = "a"

    def copy(self, shape: BlockShape, postfix: str) -> "Block":
        """Derived variant keeping type, density and position."""
        return Block(
            shape=shape,
            type=self.type,
            density=self.density,
            position=self.position,
            postfix=postfix
        )

    def to_dict(self) -> dict:
        return {
            "shape": self.shape.value,
            "type": self.type.value,
            "density": self.density,
            "position": self.position,
            "postfix": self.postfix
        }


@dataclass
class Layout:
    """One emitted block variant with its sectors."""
    block: Block
    sectors: List[Sector] = field(default_factory=list)
    id: Optional[int] = None

    def to_dict(self) -> dict:
        result = {}
        if self.id is not None:
            result["id"] = self.id
        result["block"] = self.block.to_dict()
        if self.sectors:
            result["sectors"] = [sector.to_dict() for sector in self.sectors]
        return result
