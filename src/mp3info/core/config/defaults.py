"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

from mp3info.core.mpeg.constants import DEFAULT_FRAMES_TO_READ, DEFAULT_HEADER_SEEK_LIMIT
from mp3info.core.sources.remote import DEFAULT_BLOCK_SIZE, DEFAULT_TIMEOUT

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: Dict[str, Any] = {
    "scan": {
        "header_seek_limit": DEFAULT_HEADER_SEEK_LIMIT,
        "frames_to_read": DEFAULT_FRAMES_TO_READ,
    },
    "remote": {
        "block_size": DEFAULT_BLOCK_SIZE,
        "timeout_seconds": DEFAULT_TIMEOUT,
        "user_agent": "mp3info",
    },
    "diagnostics": {
        "log_level": "WARNING",
    },
}
