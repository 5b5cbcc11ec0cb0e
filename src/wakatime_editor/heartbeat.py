"""
Heartbeat records exchanged with the WakaTime API.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

UNSAVED_ENTITY = "Unsaved Scene"
ENTITY_TYPE = "file"
CATEGORY = "designing"
DEFAULT_BRANCH = "master"
LANGUAGE = "unity"


@dataclass(frozen=True)
class Heartbeat:
    """A single activity report. Never mutated once built."""

    entity: str
    time: float
    project: str
    is_write: bool = False
    branch: str = DEFAULT_BRANCH
    type: str = ENTITY_TYPE
    category: str = CATEGORY
    language: str = LANGUAGE

    def to_payload(self) -> Dict[str, Any]:
        """Request body expected by the heartbeats endpoint."""
        return {
            "entity": self.entity,
            "type": self.type,
            "category": self.category,
            "time": self.time,
            "project": self.project,
            "branch": self.branch,
            "language": self.language,
            "is_write": self.is_write,
        }


@dataclass(frozen=True)
class HeartbeatAck:
    """The last heartbeat the server accepted."""

    id: str
    entity: str
    type: str
    time: float

    @classmethod
    def from_response_data(cls, data: Mapping[str, Any]) -> "HeartbeatAck":
        """Build an ack from the ``data`` object of a heartbeat response.

        Raises:
            KeyError, TypeError, ValueError: if ``data`` lacks a usable
                ``entity`` or ``time``.
        """
        return cls(
            id=str(data.get("id", "")),
            entity=data["entity"],
            type=data.get("type", ENTITY_TYPE),
            time=float(data["time"]),
        )


def build_heartbeat(
    entity_path: str,
    is_write: bool,
    project: str,
    now: float,
    branch: str = DEFAULT_BRANCH,
) -> Heartbeat:
    """Convert an activity notification into a Heartbeat.

    Args:
        entity_path: Path of the active scene or file, empty when unsaved.
        is_write: True only when the notification was an explicit save.
        project: Resolved project name.
        now: Wall-clock time in seconds since the epoch.
        branch: Branch override, ``master`` when none is configured.
    """
    return Heartbeat(
        entity=entity_path or UNSAVED_ENTITY,
        time=float(now),
        project=project,
        is_write=bool(is_write),
        branch=branch or DEFAULT_BRANCH,
    )
