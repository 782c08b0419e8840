"""Plugin command surface: the ``import`` and ``cancel`` messages posted by the UI."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..builder import UnsupportedRotationError
from ..config import LayoutConfig
from ..importer import ImportResult, SlotImporter
from ..parser import MalformedNameError, UnknownTypeCodeError
from .scene import Host

logger = logging.getLogger(__name__)

IMPORT_ERRORS = (MalformedNameError, UnknownTypeCodeError, UnsupportedRotationError)


class MessageType(Enum):
    IMPORT = "import"
    CANCEL = "cancel"


@dataclass
class PluginMessage:
    """Command posted by the plugin UI."""
    type: MessageType
    frame_name: str = ""
    id_diff: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PluginMessage":
        """
        Build from the UI payload.

        ``idDiff`` comes from a text input, so strings are accepted and an
        empty or missing value means 0.

        Raises:
            ValueError: On an unknown type, a missing frame name or a non-integer idDiff
        """
        try:
            message_type = MessageType(data.get("type"))
        except ValueError:
            raise ValueError(f"Unknown message type '{data.get('type')}'. "
                             f"Must be one of {[t.value for t in MessageType]}")

        if message_type == MessageType.CANCEL:
            return cls(type=message_type)

        frame_name = data.get("frameName")
        if not isinstance(frame_name, str) or not frame_name.strip():
            raise ValueError("Import message: 'frameName' must be a non-empty string")

        raw_diff = data.get("idDiff", data.get("idDiffOffset"))
        if raw_diff is None or (isinstance(raw_diff, str) and not raw_diff.strip()):
            id_diff = 0
        else:
            try:
                id_diff = int(raw_diff)
            except (TypeError, ValueError):
                raise ValueError(f"Import message: 'idDiff' must be an integer, got {raw_diff!r}")

        return cls(type=message_type, frame_name=frame_name, id_diff=id_diff)

    def to_dict(self) -> Dict[str, Any]:
        result = {"type": self.type.value}
        if self.type == MessageType.IMPORT:
            result["frameName"] = self.frame_name
            result["idDiff"] = self.id_diff
        return result


def parse_message(raw: Any) -> PluginMessage:
    """
    Parse a raw UI message.

    Args:
        raw: Message dict or JSON text, optionally wrapped as
            {"pluginMessage": {...}} the way the UI posts it

    Raises:
        ValueError: If the message is not a JSON object or not a valid command
    """
    data = raw
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Plugin message is not valid JSON: {e}")

    if isinstance(data, dict) and isinstance(data.get("pluginMessage"), dict):
        data = data["pluginMessage"]
    if not isinstance(data, dict):
        raise ValueError("Plugin message is not a JSON object")
    return PluginMessage.from_dict(data)


def handle_message(
    message: Any,
    host: Host,
    config: Optional[LayoutConfig] = None,
    progress: bool = False
) -> Optional[ImportResult]:
    """
    Dispatch one UI message against a host.

    ``cancel`` closes the host without output. ``import`` runs the importer,
    emits the layout array when the container exists and closes the host.
    Name and rotation errors are reported to the host and re-raised; the
    host stays open so the failure is visible.

    Returns:
        ImportResult for ``import``, None for ``cancel``
    """
    if not isinstance(message, PluginMessage):
        message = parse_message(message)

    if message.type == MessageType.CANCEL:
        logger.info("Import cancelled")
        host.close()
        return None

    importer = SlotImporter(host.find_container, config, progress=progress)
    try:
        result = importer.run(message.frame_name, message.id_diff)
    except IMPORT_ERRORS as e:
        host.notify(f"Import of '{message.frame_name}' failed: {e}", error=True)
        raise

    if result.found:
        host.emit(result.to_json())
        host.notify(f"Imported {len(result.layouts)} layouts from {result.num_blocks} blocks")

    host.close()
    return result
