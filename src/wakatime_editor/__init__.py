"""
WakaTime editor plugin - reports editor activity as WakaTime heartbeats.

This package provides:

- Heartbeats built from editor activity (scene open, save, hierarchy edits)
- A 120 second cooldown gate keyed on the last acknowledged heartbeat
- Non-blocking delivery to the WakaTime heartbeats API
- .wakatime-project project and branch overrides
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .core import HeartbeatTracker
from .debounce import DebounceGate
from .dispatcher import DeliveryOutcome, Dispatcher
from .events import ActivityEvent, ActivityKind, EventSource
from .heartbeat import Heartbeat, HeartbeatAck, build_heartbeat

__all__ = [
    "HeartbeatTracker",
    "DebounceGate",
    "Dispatcher",
    "DeliveryOutcome",
    "EventSource",
    "ActivityEvent",
    "ActivityKind",
    "Heartbeat",
    "HeartbeatAck",
    "build_heartbeat",
]
