"""Random-access byte source used by the decoders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mp3info.core.errors import UnexpectedEndOfData


class ByteSource(ABC):
    """Seekable view over a byte stream of known length.

    Implementations only have to provide ``_read_at``; position bookkeeping and
    bounds checks live here so every source behaves the same way.
    """

    def __init__(self, file_size: int) -> None:
        self._file_size = int(file_size)
        self._pos = 0

    @property
    def file_size(self) -> int:
        return self._file_size

    def tell(self) -> int:
        return self._pos

    def seek_to(self, pos: int) -> bool:
        if pos < 0 or pos > self._file_size:
            return False
        self._pos = pos
        return True

    def seek_forward(self, delta: int) -> bool:
        return self.seek_to(self._pos + delta)

    def read(self, count: int) -> bytes:
        """Return exactly ``count`` bytes and advance the position."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return b""
        if self._pos + count > self._file_size:
            raise UnexpectedEndOfData(
                f"Cannot read {count} bytes at offset {self._pos}: source has {self._file_size} bytes"
            )
        data = self._read_at(self._pos, count)
        if len(data) != count:
            raise UnexpectedEndOfData(f"Short read at offset {self._pos}: got {len(data)} of {count} bytes")
        self._pos += count
        return data

    def peek(self, count: int) -> bytes:
        """Return up to ``count`` bytes from the current position without moving."""
        count = max(0, min(count, self._file_size - self._pos))
        if count == 0:
            return b""
        return self._read_at(self._pos, count)

    @abstractmethod
    def _read_at(self, offset: int, count: int) -> bytes:
        """Return ``count`` bytes starting at ``offset`` (already bounds-checked)."""

    def close(self) -> None:
        pass

    def __enter__(self) -> "ByteSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
