"""Event system: bus and event types for the build lifecycle."""

from gust.events.bus import EventBus
from gust.events.types import (
    BuildCompleted,
    BuildFailed,
    BuildStarted,
    FileScanned,
    FileSkipped,
    PluginLoaded,
)

__all__ = [
    "EventBus",
    "BuildCompleted",
    "BuildFailed",
    "BuildStarted",
    "FileScanned",
    "FileSkipped",
    "PluginLoaded",
]
