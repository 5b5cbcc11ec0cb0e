#!/usr/bin/env python3
"""
Console diagnostics for the WakaTime editor plugin.
"""

from .heartbeat import Heartbeat

PREFIX = "[WakaTime]"


class HeartbeatLogger:
    """Handles logging and output for heartbeat delivery.

    Debug lines only print in debug mode; warnings and failures always do.
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    def _debug(self, message: str) -> None:
        if self.debug:
            print(f"{PREFIX} {message}")

    def log_disabled(self) -> None:
        self._debug("Explicitly disabled, skipping initialization...")

    def log_missing_api_key(self) -> None:
        print(f"{PREFIX} [WARN] API key is not set, skipping initialization...")

    def log_initializing(self, project: str) -> None:
        self._debug(f"Initializing for project {project}...")

    def log_sending(self, heartbeat: Heartbeat) -> None:
        self._debug(f"Sending heartbeat for {heartbeat.entity}...")

    def log_skipped(self, heartbeat: Heartbeat) -> None:
        self._debug(f"Skip this heartbeat ({heartbeat.entity})")

    def log_response(self, body: str) -> None:
        self._debug(f"Got response\n{body}")

    def log_sent(self) -> None:
        self._debug("[OK] Sent heartbeat!")

    def log_duplicate(self) -> None:
        self._debug("Duplicate heartbeat")

    def log_unreachable(self) -> None:
        print(
            f"{PREFIX} [WARN] Network is unreachable. "
            "Consider disabling completely if you're working offline"
        )

    def log_remote_error(self, error: str) -> None:
        print(f"{PREFIX} [FAIL] Failed to send heartbeat to WakaTime!\n{error}")

    def log_listener_error(self, error: Exception) -> None:
        print(f"{PREFIX} [FAIL] Activity listener raised: {error}")
