"""Configuration management module."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .defaults import DEFAULT_CONFIG, LOG_LEVELS
from .merge import merge_config
from mp3info.core.env import resolve_config_path


@dataclass
class SettingsManager:
    """YAML configuration with default values."""

    config_path: Path = Path("config/settings.yaml")

    def __post_init__(self) -> None:
        self.config_path = resolve_config_path(Path(self.config_path))
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as file:
                user_config = yaml.safe_load(file) or {}
            if not isinstance(user_config, dict):
                user_config = {}
            self._data = merge_config(DEFAULT_CONFIG, user_config)
        else:
            self._data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=False, sort_keys=True)

    def get_raw(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def _get_positive_int(self, section: str, key: str) -> int:
        value = self._data.get(section, {}).get(key, DEFAULT_CONFIG[section][key])
        try:
            return max(1, int(value))
        except (TypeError, ValueError):
            return DEFAULT_CONFIG[section][key]

    def get_header_seek_limit(self) -> int:
        return self._get_positive_int("scan", "header_seek_limit")

    def set_header_seek_limit(self, value: int) -> None:
        scan = self._data.setdefault("scan", {})
        scan["header_seek_limit"] = max(1, int(value))

    def get_frames_to_read(self) -> int:
        return self._get_positive_int("scan", "frames_to_read")

    def set_frames_to_read(self, value: int) -> None:
        scan = self._data.setdefault("scan", {})
        scan["frames_to_read"] = max(1, int(value))

    def get_remote_block_size(self) -> int:
        return self._get_positive_int("remote", "block_size")

    def get_remote_timeout(self) -> float:
        remote = self._data.get("remote", {})
        value = remote.get("timeout_seconds", DEFAULT_CONFIG["remote"]["timeout_seconds"])
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            return DEFAULT_CONFIG["remote"]["timeout_seconds"]
        return timeout if timeout > 0 else DEFAULT_CONFIG["remote"]["timeout_seconds"]

    def get_remote_user_agent(self) -> str:
        remote = self._data.get("remote", {})
        value = remote.get("user_agent")
        return str(value) if value else DEFAULT_CONFIG["remote"]["user_agent"]

    def get_diagnostics_log_level(self) -> str:
        diagnostics = self._data.get("diagnostics", {})
        level = str(diagnostics.get("log_level", DEFAULT_CONFIG["diagnostics"]["log_level"])).upper()
        return level if level in LOG_LEVELS else DEFAULT_CONFIG["diagnostics"]["log_level"]

    def set_diagnostics_log_level(self, level: str) -> None:
        diagnostics = self._data.setdefault("diagnostics", {})
        diagnostics["log_level"] = str(level).upper()
