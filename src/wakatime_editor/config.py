"""Configuration management for the WakaTime editor plugin."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_API_URL = "https://api.wakatime.com/api/v1"
FALLBACK_PROJECT = "Unity Project"

DEFAULT_CONFIG = {
    "api_key": "",  # nosec B105 - WakaTime API key, empty disables the plugin
    "enabled": True,
    "debug": False,
    "api_url": DEFAULT_API_URL,
    "default_project": "",
    "project_root": "",
    "editor_version": "",
}


class Config:
    """Preference store for the WakaTime editor plugin."""

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Custom configuration directory path
        """
        if config_dir:
            self.config_dir = Path(config_dir)
        else:
            self.config_dir = Path.home() / ".wakatime-editor" / "config"

        self.config_file = self.config_dir / "settings.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file or create default."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    config = json.load(f)
                merged_config = DEFAULT_CONFIG.copy()
                merged_config.update(config)
                return merged_config
            except (json.JSONDecodeError, IOError) as e:
                print(f"Warning: Could not load config file: {e}")
                print("Using default configuration.")

        return DEFAULT_CONFIG.copy()

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)
        except IOError as e:
            print(f"Warning: Could not save config file: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self._config[key] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update multiple configuration values."""
        self._config.update(config_dict)

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        return self._config.copy()

    @property
    def api_key(self) -> str:
        """Get the WakaTime API key."""
        return self.get("api_key", "") or ""

    @api_key.setter
    def api_key(self, value: str) -> None:
        self.set("api_key", value)

    @property
    def enabled(self) -> bool:
        """Get the master enable switch."""
        return bool(self.get("enabled", True))

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.set("enabled", value)

    @property
    def debug(self) -> bool:
        """Get verbose diagnostics setting."""
        return bool(self.get("debug", False))

    @debug.setter
    def debug(self, value: bool) -> None:
        self.set("debug", value)

    @property
    def api_url(self) -> str:
        """Get the API base URL without a trailing slash."""
        return (self.get("api_url") or DEFAULT_API_URL).rstrip("/")

    @property
    def project_root(self) -> Path:
        """Get the directory that holds the project override file."""
        project_root = self.get("project_root")
        if project_root:
            return Path(project_root)
        return Path.cwd()

    @property
    def default_project(self) -> str:
        """Get the host product name, falling back to the project directory name."""
        return (
            self.get("default_project")
            or self.project_root.resolve().name
            or FALLBACK_PROJECT
        )


def load_config_from_env() -> Dict[str, Any]:
    """Load configuration from environment variables.

    Returns:
        Configuration dictionary from environment
    """
    env_config: Dict[str, Any] = {}

    env_mappings = {
        "WAKATIME_API_KEY": "api_key",
        "WAKATIME_ENABLED": "enabled",
        "WAKATIME_DEBUG": "debug",
        "WAKATIME_API_URL": "api_url",
        "WAKATIME_PROJECT_ROOT": "project_root",
    }

    for env_var, config_key in env_mappings.items():
        value = os.getenv(env_var)
        if value is not None:
            if config_key in ["enabled", "debug"]:
                env_config[config_key] = value.lower() in ("true", "1", "yes", "on")
            else:
                env_config[config_key] = value

    return env_config


# Global config instance
_global_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance with environment overrides applied."""
    global _global_config
    if _global_config is None:
        _global_config = Config()
        env_config = load_config_from_env()
        if env_config:
            _global_config.update(env_config)
    return _global_config


def reload_config() -> Config:
    """Reload configuration from file."""
    global _global_config
    _global_config = None
    return get_config()
