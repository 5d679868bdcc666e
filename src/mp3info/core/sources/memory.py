"""In-memory byte source."""

from __future__ import annotations

from mp3info.core.sources.base import ByteSource


class MemorySource(ByteSource):
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        super().__init__(len(self._data))

    def _read_at(self, offset: int, count: int) -> bytes:
        return self._data[offset : offset + count]
