"""Cooldown gate that suppresses redundant heartbeats."""

import threading
from typing import Optional

from .heartbeat import Heartbeat, HeartbeatAck

COOLDOWN_SECONDS = 120


class DebounceGate:
    """Decides whether a heartbeat is worth sending.

    Comparison is always against the last heartbeat the server acknowledged,
    never the last one attempted, so failed sends do not restart the window.
    """

    def __init__(self, cooldown: float = COOLDOWN_SECONDS):
        self.cooldown = cooldown
        self._last_ack: Optional[HeartbeatAck] = None
        # Acks arrive from executor worker threads
        self._lock = threading.Lock()

    @property
    def last_ack(self) -> Optional[HeartbeatAck]:
        with self._lock:
            return self._last_ack

    def admit(self, candidate: Heartbeat) -> bool:
        """Return True if the candidate should be sent."""
        last_ack = self.last_ack

        if last_ack is None or candidate.is_write:
            return True
        if candidate.entity != last_ack.entity:
            return True
        return candidate.time - last_ack.time >= self.cooldown

    def acknowledge(self, ack: HeartbeatAck) -> None:
        """Replace the last acknowledged heartbeat (last writer wins)."""
        with self._lock:
            self._last_ack = ack
