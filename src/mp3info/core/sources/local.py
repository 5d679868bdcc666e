"""Byte source over a local file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from mp3info.core.sources.base import ByteSource


logger = logging.getLogger(__name__)


class LocalFileSource(ByteSource):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._handle = self.path.open("rb")
        try:
            size = os.fstat(self._handle.fileno()).st_size
        except OSError:
            self._handle.close()
            raise
        super().__init__(size)
        logger.debug("Opened %s (%d bytes)", self.path, size)

    def _read_at(self, offset: int, count: int) -> bytes:
        if self._handle.tell() != offset:
            self._handle.seek(offset)
        return self._handle.read(count)

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()
