"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        try:
            # 1st: explicit argument, 2nd: environment variable
            config_dir = config_dir or os.environ.get("AGENT_PROFILE_BUILDER_CONFIG_DIR")

            # 3rd: home directory ~/.agent_profile_builder
            if not config_dir:
                try:
                    config_dir = os.path.expanduser("~/.agent_profile_builder")
                except Exception:
                    config_dir = None

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except OSError as e:
                    print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # Fallback: system temp dir
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "agent_profile_builder"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical Error in init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "agent_profile_builder_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls, instance: "ConfigManager | None" = None):
        """Replace (or drop) the singleton instance"""
        cls._instance = instance

    @property
    def config_dir(self) -> Path:
        return self._config_file.parent

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling missing sections from defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file, encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            return config

        for key, value in stored.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "storage": {
                "namespace": "apb:",
                "file": "storage.json",
            },
            "history": {
                "maxVersions": 5,
                "autosaveCooldownSeconds": 25,
            },
            "compare": {
                "ignoreWhitespace": False,
                "onlyChanged": False,
            },
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        # Ensure config directory exists
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def get_section(self, key: str) -> dict[str, Any]:
        """Get a config section merged over its defaults"""
        defaults = self._default_config().get(key, {})
        return {**defaults, **(self._config.get(key) or {})}

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)
