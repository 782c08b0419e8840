"""Scene-graph capability interface and a JSON scene document adapter."""

import json
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, TextIO

from ..schema import Point

logger = logging.getLogger(__name__)


class SceneNode(ABC):
    """Read-only view of one node on the canvas."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def position(self) -> Point:
        pass

    @property
    @abstractmethod
    def rotation(self) -> float:
        pass

    @property
    @abstractmethod
    def children(self) -> List["SceneNode"]:
        pass


class Host(ABC):
    """Design tool the importer runs inside."""

    @abstractmethod
    def find_container(self, name: str) -> Optional[SceneNode]:
        """First node named ``name``, or None."""
        pass

    @abstractmethod
    def emit(self, payload: str) -> None:
        """Write the run's output artifact."""
        pass

    @abstractmethod
    def notify(self, message: str, error: bool = False) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        """Signal that the plugin is done."""
        pass


class JsonSceneNode(SceneNode):
    """Node backed by a dict from a scene document."""

    def __init__(self, data: Dict[str, Any]):
        if "name" not in data:
            raise ValueError(f"Scene node missing required field 'name': {data}")
        self._name = str(data["name"])
        self._position = Point(float(data.get("x", 0)), float(data.get("y", 0)))
        self._rotation = float(data.get("rotation", 0))
        self._children = [JsonSceneNode(child) for child in data.get("children", [])]

    @property
    def name(self) -> str:
        return self._name

    @property
    def position(self) -> Point:
        return self._position

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def children(self) -> List[SceneNode]:
        return self._children

    def walk(self) -> Iterator["JsonSceneNode"]:
        """Depth-first pre-order traversal including this node."""
        yield self
        for child in self._children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"JsonSceneNode({self._name!r}, children={len(self._children)})"


class JsonScene(Host):
    """
    Host backed by an exported scene document.

    Document format:
        {"nodes": [{"name": ..., "x": ..., "y": ..., "rotation": ..., "children": [...]}]}
    A bare top-level list of nodes is accepted as well.
    """

    def __init__(self, document: Any, output: Optional[TextIO] = None):
        if isinstance(document, dict):
            nodes = document.get("nodes", [])
        elif isinstance(document, list):
            nodes = document
        else:
            raise ValueError("Scene document must be a dict with 'nodes' or a list of nodes")

        self.nodes = [JsonSceneNode(node) for node in nodes]
        self.output = output if output is not None else sys.stdout
        self.closed = False
        self.messages: List[str] = []

    @classmethod
    def load(cls, path: str, output: Optional[TextIO] = None) -> "JsonScene":
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
        return cls(document, output)

    def find_container(self, name: str) -> Optional[SceneNode]:
        for root in self.nodes:
            for node in root.walk():
                if node.name == name:
                    return node
        return None

    def emit(self, payload: str) -> None:
        self.output.write(payload)
        self.output.write("\n")
        self.output.flush()

    def notify(self, message: str, error: bool = False) -> None:
        self.messages.append(message)
        if error:
            logger.error(message)
        else:
            logger.info(message)

    def close(self) -> None:
        self.closed = True
