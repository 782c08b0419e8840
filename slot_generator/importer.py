"""Import orchestrator: scans a container of blocks and emits every variant layout."""

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from tqdm import tqdm

from .config import LayoutConfig, DEFAULT_CONFIG
from .constants import BLOCK_PREFIXES
from .parser import detect_sectors, parse_block_name
from .schema import Layout
from .variants import expand

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of one import run."""
    layouts: List[Layout] = field(default_factory=list)
    next_id: int = 0  # First id not handed out by this run
    found: bool = True  # False when the container did not exist
    num_blocks: int = 0

    def to_list(self) -> List[dict]:
        return [layout.to_dict() for layout in self.layouts]

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_list(), indent=indent)


def is_block_node(node) -> bool:
    return node.name.startswith(BLOCK_PREFIXES)


def register_block(
    node,
    next_id: int,
    config: LayoutConfig = DEFAULT_CONFIG
) -> Tuple[List[Layout], int]:
    """
    Parse one block node and number its variants.

    Args:
        node: Block node (name plus slot children)
        next_id: First layout id to assign
        config: Field and tile geometry

    Returns:
        Tuple of (layouts, next free id)
    """
    block = parse_block_name(node.name)
    sectors = detect_sectors(block, node, config)

    layouts = expand(block, sectors, config)
    for layout in layouts:
        layout.id = next_id
        next_id += 1

    logger.debug(f"Registered {node.name}: {len(sectors)} sectors, {len(layouts)} layouts")
    return layouts, next_id


class SlotImporter:
    """
    Turns a named container of block instances into layouts.

    Usage:
        importer = SlotImporter(scene.find_container)
        result = importer.run("Blocks", id_diff=2)
    """

    def __init__(
        self,
        find_container: Callable[[str], Optional[object]],
        config: Optional[LayoutConfig] = None,
        progress: bool = False
    ):
        """
        Args:
            find_container: Lookup returning the container node or None
            config: Field and tile geometry
            progress: Show a progress bar over blocks
        """
        self.find_container = find_container
        self.config = config or DEFAULT_CONFIG
        self.progress = progress

    def first_id(self, id_diff: int) -> int:
        """Layout id seed for an artboard offset."""
        return id_diff * self.config.artboard_id_count

    def run(self, frame_name: str, id_diff: int = 0) -> ImportResult:
        """
        Import every block child of ``frame_name``.

        A missing container is not an error: the result is empty with
        ``found=False``. Name and rotation errors propagate and abort the run.
        """
        next_id = self.first_id(id_diff)

        container = self.find_container(frame_name)
        if container is None:
            logger.warning(f"Container '{frame_name}' not found, nothing to import")
            return ImportResult(next_id=next_id, found=False)

        block_nodes = [child for child in container.children if is_block_node(child)]
        logger.info(f"Importing {len(block_nodes)} blocks from '{frame_name}' starting at id {next_id}")

        layouts: List[Layout] = []
        for node in tqdm(block_nodes, desc=f"Importing {frame_name}", disable=not self.progress):
            block_layouts, next_id = register_block(node, next_id, self.config)
            layouts.extend(block_layouts)

        logger.info(f"Imported {len(layouts)} layouts from '{frame_name}'")
        return ImportResult(
            layouts=layouts,
            next_id=next_id,
            found=True,
            num_blocks=len(block_nodes)
        )


def run_import(
    find_container: Callable[[str], Optional[object]],
    frame_name: str,
    id_diff: int = 0,
    config: Optional[LayoutConfig] = None
) -> ImportResult:
    """Convenience wrapper around ``SlotImporter.run``."""
    return SlotImporter(find_container, config).run(frame_name, id_diff)
