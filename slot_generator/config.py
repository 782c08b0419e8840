"""Configuration for slot generation."""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict
import math

import yaml

from .constants import (
    SLOT_SIZE, OFFSET, FIELD_SIZE, FIELD_WIDTH, FIELD_ROWS, VARIANTS_PER_BLOCK
)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Field and tile geometry.

    Defaults reproduce the reference artboard:
        slot_size: Edge of one slot tile
        offset: Gap around every field square
        field_size: Edge of one field square (the block)
        field_width: Field squares per row
        field_rows: Rows per artboard, used for id seeding only
        variants_per_block: Layouts emitted per block, used for id seeding only
    """
    slot_size: int = SLOT_SIZE
    offset: int = OFFSET
    field_size: int = FIELD_SIZE
    field_width: int = FIELD_WIDTH
    field_rows: int = FIELD_ROWS
    variants_per_block: int = VARIANTS_PER_BLOCK

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "offset":
                if value < 0:
                    raise ValueError(f"{f.name} must be non-negative, got {value}")
            elif value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value}")

    @property
    def half_diagonal(self) -> int:
        diagonal = math.floor(math.sqrt(2) * self.slot_size + 0.5)
        return int(math.floor(diagonal / 2 + 0.5))

    @property
    def artboard_id_count(self) -> int:
        return self.field_width * self.field_rows * self.variants_per_block

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown layout config keys: {sorted(unknown)}")
        return cls(**{key: int(value) for key, value in data.items()})

    @classmethod
    def from_yaml(cls, path: str) -> "LayoutConfig":
        """Load from a YAML mapping, optionally nested under a ``layout`` key."""
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Layout config {path} is not valid YAML: {e}")
        if isinstance(data, dict) and "layout" in data:
            data = data["layout"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"Layout config {path} must contain a mapping")
        return cls.from_dict(data)


DEFAULT_CONFIG = LayoutConfig()
