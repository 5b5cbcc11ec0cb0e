#!/usr/bin/env python3
"""
WakaTime editor plugin
Turns editor activity into heartbeats and reports them to WakaTime.
"""

import time
from concurrent.futures import Future
from typing import Callable, Optional

from .config import Config, get_config
from .debounce import DebounceGate
from .dispatcher import DeliveryResultCollector, Dispatcher
from .events import ActivityEvent, ActivityKind, EventSource
from .heartbeat import build_heartbeat
from .http_sync import HeartbeatHttpClient, UserAgentBuilder
from .logger import HeartbeatLogger
from .project import ProjectInfo, ProjectResolver


class HeartbeatTracker:
    """
    WakaTime editor plugin - orchestrates heartbeat building, debouncing
    and delivery.

    Owns the single DebounceGate for the process; every activity event runs
    build -> admit -> dispatch synchronously and returns without waiting on
    the network.
    """

    def __init__(
        self,
        config: Config,
        events: Optional[EventSource] = None,
        entity_provider: Optional[Callable[[], str]] = None,
        dispatcher: Optional[Dispatcher] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the tracker.

        Args:
            config (Config): Preference store.
            events (Optional[EventSource]): Activity source to subscribe to.
            entity_provider (Optional[Callable]): Returns the active scene
                path, empty when the scene is unsaved.
            dispatcher (Optional[Dispatcher]): Delivery component. If None,
                one is created from the config on initialize().
            clock (Callable): Wall-clock source in epoch seconds.
        """
        self.config = config
        self.logger = HeartbeatLogger(debug=config.debug)
        self.events = events or EventSource(self.logger)
        self.entity_provider = entity_provider or (lambda: "")
        self.clock = clock

        self._owns_dispatcher = dispatcher is None
        self.dispatcher = dispatcher
        self.gate = dispatcher.gate if dispatcher else DebounceGate()
        # Survives dispatcher rebuilds on scripts reload
        self.results = dispatcher.results if dispatcher else DeliveryResultCollector()

        self.project: Optional[ProjectInfo] = None
        self.running = False

    def initialize(self, send_initial: bool = True) -> bool:
        """Read preferences, resolve the project and subscribe to activity.

        Safe to call repeatedly; scripts reloads call it again.
        Returns False when the plugin is disabled or has no API key.
        """
        self.logger.debug = self.config.debug

        if not self.config.enabled:
            self.logger.log_disabled()
            self._unlink()
            return False

        api_key = self.config.api_key
        if not api_key:
            self.logger.log_missing_api_key()
            self._unlink()
            return False

        self.project = ProjectResolver(
            self.config.project_root, self.config.default_project
        ).resolve()
        self.logger.log_initializing(self.project.name)

        if self._owns_dispatcher:
            self._replace_dispatcher(api_key)

        self.running = True
        if send_initial:
            self.send_heartbeat()
        self.events.on_activity(self.handle_activity)
        return True

    def _replace_dispatcher(self, api_key: str) -> None:
        if self.dispatcher is not None:
            self.dispatcher.shutdown(wait=False)

        client = HeartbeatHttpClient(
            self.config.api_url,
            api_key,
            user_agent=UserAgentBuilder(self.config.get("editor_version", "")),
        )
        self.dispatcher = Dispatcher(
            client, self.gate, logger=self.logger, results=self.results
        )

    def _unlink(self) -> None:
        self.running = False
        self.events.remove_listener(self.handle_activity)

    def handle_activity(self, event: ActivityEvent) -> None:
        """Listener registered with the event source."""
        if event.kind is ActivityKind.SCRIPTS_RELOADED:
            self.initialize()
            return

        self.send_heartbeat(from_save=event.is_save, entity_path=event.entity_path)

    def send_heartbeat(
        self, from_save: bool = False, entity_path: Optional[str] = None
    ) -> Optional[Future]:
        """Build a heartbeat and dispatch it unless the gate suppresses it.

        Returns the delivery future, or None if nothing was sent.
        """
        if not self.running or self.project is None or self.dispatcher is None:
            return None

        if entity_path is None:
            entity_path = self.entity_provider()

        heartbeat = build_heartbeat(
            entity_path,
            from_save,
            self.project.name,
            self.clock(),
            branch=self.project.branch,
        )

        if not self.gate.admit(heartbeat):
            self.logger.log_skipped(heartbeat)
            self.results.record_skip()
            return None

        return self.dispatcher.send(heartbeat)

    def stop(self) -> None:
        """Unsubscribe from activity and release the dispatcher."""
        self._unlink()
        if self._owns_dispatcher and self.dispatcher is not None:
            self.dispatcher.shutdown()


def print_usage():
    print("WakaTime editor plugin")
    print("Usage: python -m wakatime_editor <command> [options]")
    print("Commands:")
    print("  heartbeat [--write] [ENTITY]   Send one heartbeat and print the outcome")
    print("  project                        Show the resolved project and branch")
    print("  project NAME [BRANCH]          Write the .wakatime-project override file")
    print("\nEnvironment Variables:")
    print("  WAKATIME_API_KEY        WakaTime API key (required for heartbeats)")
    print("  WAKATIME_PROJECT_ROOT   Directory holding .wakatime-project")
    print("  WAKATIME_DEBUG          Enable verbose output")


def main():
    """Main entry point."""
    import sys

    args = sys.argv[1:]

    if not args or "--help" in args or "-h" in args:
        print_usage()
        return

    config = get_config()
    command = args[0]

    if command == "project":
        resolver = ProjectResolver(config.project_root, config.default_project)
        if len(args) > 1:
            resolver.write_project_file(args[1:3])
            print(f"Wrote {resolver.project_file}")
        project = resolver.resolve()
        print(f"Project: {project.name}")
        print(f"Branch: {project.branch}")

    elif command == "heartbeat":
        is_write = "--write" in args
        rest = [arg for arg in args[1:] if arg != "--write"]
        entity = rest[0] if rest else ""

        tracker = HeartbeatTracker(config, entity_provider=lambda: entity)
        if not tracker.initialize(send_initial=False):
            return

        try:
            future = tracker.send_heartbeat(from_save=is_write)
            if future is None:
                print("Heartbeat skipped")
            else:
                print(f"Heartbeat {future.result().value}")
            tracker.results.print_summary()
        finally:
            tracker.stop()

    else:
        print(f"Unknown command: {command}")
        print("Use --help for usage information")


if __name__ == "__main__":
    main()
