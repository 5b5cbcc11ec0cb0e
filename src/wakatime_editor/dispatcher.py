#!/usr/bin/env python3
"""
Fire-and-forget heartbeat delivery.
Sends admitted heartbeats off the caller's thread and applies the server's
acknowledgement to the debounce gate.
"""

import json
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import Enum
from typing import Dict, Optional

from .debounce import DebounceGate
from .heartbeat import Heartbeat, HeartbeatAck
from .http_sync import HeartbeatHttpClient
from .logger import HeartbeatLogger

DUPLICATE_ERROR = "Duplicate"


class DeliveryOutcome(Enum):
    SENT = "sent"
    DUPLICATE = "duplicate"
    FAILED = "failed"
    UNREACHABLE = "unreachable"


class DeliveryResultCollector:
    """Counts delivery outcomes and suppressed heartbeats."""

    def __init__(self):
        self.results = {"sent": 0, "duplicate": 0, "failed": 0, "unreachable": 0, "skipped": 0}
        self._lock = threading.Lock()

    def record(self, outcome: DeliveryOutcome) -> None:
        with self._lock:
            self.results[outcome.value] += 1

    def record_skip(self) -> None:
        with self._lock:
            self.results["skipped"] += 1

    def get_results(self) -> Dict[str, int]:
        """Get a copy of the counters."""
        with self._lock:
            return self.results.copy()

    def print_summary(self):
        """Print delivery summary."""
        results = self.get_results()
        print(
            f"Heartbeats: {results['sent']} sent, {results['duplicate']} duplicate, "
            f"{results['failed']} failed, {results['unreachable']} unreachable, "
            f"{results['skipped']} skipped"
        )


class Dispatcher:
    """Delivers heartbeats without blocking the editor thread."""

    def __init__(
        self,
        client: HeartbeatHttpClient,
        gate: DebounceGate,
        logger: Optional[HeartbeatLogger] = None,
        executor: Optional[Executor] = None,
        results: Optional[DeliveryResultCollector] = None,
    ):
        self.client = client
        self.gate = gate
        self.logger = logger or HeartbeatLogger()
        self.results = results or DeliveryResultCollector()
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="wakatime"
        )

    def send(self, heartbeat: Heartbeat) -> Future:
        """Queue a heartbeat for delivery and return immediately.

        The returned future resolves to a DeliveryOutcome and never raises.
        """
        self.logger.log_sending(heartbeat)
        return self.executor.submit(self._deliver, heartbeat)

    def _deliver(self, heartbeat: Heartbeat) -> DeliveryOutcome:
        try:
            body = self.client.post_heartbeat(heartbeat)
            outcome = self.handle_response(body)
        except Exception as e:
            self.logger.log_remote_error(f"Error sending heartbeat: {e}")
            outcome = DeliveryOutcome.FAILED
        self.results.record(outcome)
        return outcome

    def handle_response(self, body: str) -> DeliveryOutcome:
        """Classify a response body and update the gate on success."""
        if not body or not body.strip():
            self.logger.log_unreachable()
            return DeliveryOutcome.UNREACHABLE

        self.logger.log_response(body)

        try:
            response = json.loads(body)
        except json.JSONDecodeError as e:
            self.logger.log_remote_error(f"Malformed response: {e}")
            return DeliveryOutcome.FAILED

        if not isinstance(response, dict):
            self.logger.log_remote_error(f"Unexpected response: {body}")
            return DeliveryOutcome.FAILED

        error = response.get("error")
        if error is not None:
            if error == DUPLICATE_ERROR:
                self.logger.log_duplicate()
                return DeliveryOutcome.DUPLICATE
            self.logger.log_remote_error(str(error))
            return DeliveryOutcome.FAILED

        data = response.get("data")
        if not isinstance(data, dict):
            self.logger.log_remote_error(f"Response has no heartbeat data: {body}")
            return DeliveryOutcome.FAILED

        try:
            ack = HeartbeatAck.from_response_data(data)
        except (KeyError, TypeError, ValueError) as e:
            self.logger.log_remote_error(f"Invalid heartbeat data: {e}")
            return DeliveryOutcome.FAILED

        self.gate.acknowledge(ack)
        self.logger.log_sent()
        return DeliveryOutcome.SENT

    def shutdown(self, wait: bool = True) -> None:
        """Stop the executor if this dispatcher created it."""
        if self._owns_executor:
            self.executor.shutdown(wait=wait)
