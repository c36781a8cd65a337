"""Synchronous event bus for build lifecycle events."""

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus used by the builder to report progress.

    Events are delivered on the emitting thread, catch-all listeners first,
    then listeners registered for the exact event type, each group in
    subscription order. The content scanner only emits from the coordinating
    thread, so listeners never run concurrently.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Receive events of exactly *event_type*."""
        self._by_type.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Listener) -> None:
        """Receive every event."""
        self._catch_all.append(callback)

    def emit(self, event: Any) -> None:
        for callback in self._catch_all:
            callback(event)
        for callback in self._by_type.get(type(event), []):
            callback(event)
