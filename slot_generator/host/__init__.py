"""Host boundary: scene access, plugin messages and output sink."""

from .scene import SceneNode, Host, JsonSceneNode, JsonScene
from .plugin import MessageType, PluginMessage, parse_message, handle_message

__all__ = [
    "SceneNode",
    "Host",
    "JsonSceneNode",
    "JsonScene",
    "MessageType",
    "PluginMessage",
    "parse_message",
    "handle_message",
]
