"""Byte sources the decoders read from.

`open_source` picks the implementation from the location string.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from mp3info.core.sources.base import ByteSource
from mp3info.core.sources.local import LocalFileSource
from mp3info.core.sources.memory import MemorySource
from mp3info.core.sources.remote import RemoteFileSource

if TYPE_CHECKING:
    from mp3info.core.config import SettingsManager


def is_remote_location(location: Path | str) -> bool:
    return "://" in str(location)


def open_source(location: Path | str, settings: Optional["SettingsManager"] = None) -> ByteSource:
    if is_remote_location(location):
        if settings is None:
            return RemoteFileSource(str(location))
        return RemoteFileSource(
            str(location),
            block_size=settings.get_remote_block_size(),
            timeout=settings.get_remote_timeout(),
            user_agent=settings.get_remote_user_agent(),
        )
    return LocalFileSource(location)


__all__ = [
    "ByteSource",
    "LocalFileSource",
    "MemorySource",
    "RemoteFileSource",
    "is_remote_location",
    "open_source",
]
