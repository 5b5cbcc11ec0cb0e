#!/usr/bin/env python3
"""
Editor activity notifications.
Hosts call ``emit`` from their lifecycle callbacks; the tracker subscribes
with ``on_activity``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .logger import HeartbeatLogger


class ActivityKind(Enum):
    SCENE_OPENED = "scene_opened"
    SCENE_CLOSING = "scene_closing"
    SCENE_SAVED = "scene_saved"
    SCENE_CREATED = "scene_created"
    HIERARCHY_CHANGED = "hierarchy_changed"
    PROPERTY_INSPECTED = "property_inspected"
    PLAY_MODE_CHANGED = "play_mode_changed"
    SCRIPTS_RELOADED = "scripts_reloaded"


@dataclass(frozen=True)
class ActivityEvent:
    kind: ActivityKind
    # Active scene path; None means "ask the host for the current one"
    entity_path: Optional[str] = None

    @property
    def is_save(self) -> bool:
        return self.kind is ActivityKind.SCENE_SAVED


ActivityListener = Callable[[ActivityEvent], None]


class EventSource:
    """Listener registry for editor activity."""

    def __init__(self, logger: Optional[HeartbeatLogger] = None):
        self._listeners: List[ActivityListener] = []
        self.logger = logger or HeartbeatLogger()

    def on_activity(self, listener: ActivityListener) -> None:
        """Subscribe a listener. Subscribing twice has no extra effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: ActivityListener) -> None:
        """Unsubscribe a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, event: ActivityEvent) -> None:
        """Deliver an event to every listener."""
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                self.logger.log_listener_error(e)
