#!/usr/bin/env python3
"""
HTTP client for the WakaTime heartbeats endpoint.
Handles request headers, device identification and the POST itself.
"""

import platform
import re
import socket
from typing import Dict, Optional
from urllib.parse import quote_plus

import requests

from .heartbeat import Heartbeat

PLUGIN_VERSION = "1.0.0"
EDITOR_NAME = "Unity"
PLUGIN_NAME = "unity-wakatime"


class DeviceIdentifier:
    """Generates device identification information."""

    @staticmethod
    def get_device_name() -> str:
        """Get the machine name sent in X-Machine-Name."""
        try:
            hostname = socket.gethostname()
            if not hostname:
                hostname = platform.node()
            return hostname or "Unknown"
        except Exception:
            return "Unknown"

    def get_escaped_device_name(self) -> str:
        """Machine name escaped for use as a header value."""
        return quote_plus(self.get_device_name())


class UserAgentBuilder:
    """Builds the User-Agent header from platform metadata.

    Format: wakatime/VERSION (OS-OSVERSION-ARCH) Unity/VERSION unity-wakatime/VERSION
    """

    def __init__(self, editor_version: str = "", plugin_version: str = PLUGIN_VERSION):
        self.editor_version = editor_version or "unknown"
        self.plugin_version = plugin_version

    @staticmethod
    def get_os_name() -> str:
        system = platform.system()
        if system.startswith("Win"):
            return "Windows"
        return system or "Unknown"

    @staticmethod
    def get_os_version() -> str:
        try:
            if platform.system() == "Darwin":
                release = platform.mac_ver()[0]
            elif platform.system() == "Windows":
                release = platform.version()
            else:
                release = platform.release()
            match = re.search(r"\d+(\.\d+){0,2}", release)
            return match.group(0) if match else "Unknown"
        except Exception:
            return "Unknown"

    @staticmethod
    def get_os_arch() -> str:
        return "x64" if platform.machine().endswith("64") else "x86"

    def build(self) -> str:
        return (
            f"wakatime/{self.plugin_version} "
            f"({self.get_os_name()}-{self.get_os_version()}-{self.get_os_arch()}) "
            f"{EDITOR_NAME}/{self.editor_version} "
            f"{PLUGIN_NAME}/{self.plugin_version}"
        )


class HeartbeatHttpClient:
    """HTTP client for posting heartbeats to WakaTime."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        user_agent: Optional[UserAgentBuilder] = None,
        device_identifier: Optional[DeviceIdentifier] = None,
    ):
        self.endpoint = f"{api_url.rstrip('/')}/users/current/heartbeats"
        self.api_key = api_key
        self.user_agent = user_agent or UserAgentBuilder()
        self.device_identifier = device_identifier or DeviceIdentifier()

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers for a heartbeat POST."""
        return {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent.build(),
            "X-Machine-Name": self.device_identifier.get_escaped_device_name(),
        }

    def post_heartbeat(self, heartbeat: Heartbeat) -> str:
        """POST one heartbeat and return the response body.

        Returns an empty string when the server could not be reached.
        """
        try:
            response = requests.post(
                self.endpoint,
                params={"api_key": self.api_key},
                json=heartbeat.to_payload(),
                headers=self._get_headers(),
                timeout=(5, 15),
            )
        except requests.exceptions.RequestException:
            return ""

        return response.text or ""
