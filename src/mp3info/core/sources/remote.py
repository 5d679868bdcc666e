"""Byte source over HTTP using range requests.

The file is split into fixed-size blocks; each block is downloaded at most
once and kept for the lifetime of the source. Servers that ignore the
``Range`` header answer with the whole body, which is then split into blocks
in one go.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from mp3info.core.errors import RemoteSourceError
from mp3info.core.sources.base import ByteSource


logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 4096
DEFAULT_TIMEOUT = 10.0


class RemoteFileSource(ByteSource):
    def __init__(
        self,
        url: str,
        *,
        block_size: int = DEFAULT_BLOCK_SIZE,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.url = url
        self.block_size = int(block_size)
        self.timeout = float(timeout)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        if user_agent and self._owns_session:
            self._session.headers.update({"User-Agent": user_agent})
        self._blocks: Dict[int, bytes] = {}
        super().__init__(self._request_size())

    def _request_size(self) -> int:
        try:
            response = self._session.head(self.url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            raise RemoteSourceError(f"HEAD {self.url} failed: {exc}") from exc
        if response.status_code != 200:
            raise RemoteSourceError(f"HEAD {self.url} returned HTTP {response.status_code}")
        length = response.headers.get("Content-Length")
        try:
            return int(length)
        except (TypeError, ValueError):
            raise RemoteSourceError(f"{self.url} did not report a Content-Length") from None

    def _read_at(self, offset: int, count: int) -> bytes:
        chunks = []
        block_id, block_pos = divmod(offset, self.block_size)
        remaining = count
        while remaining > 0:
            block = self._get_block(block_id)
            piece = block[block_pos : block_pos + remaining]
            if not piece:
                break
            chunks.append(piece)
            remaining -= len(piece)
            block_id += 1
            block_pos = 0
        return b"".join(chunks)

    def _get_block(self, block_id: int) -> bytes:
        cached = self._blocks.get(block_id)
        if cached is not None:
            return cached
        start = block_id * self.block_size
        end = min(start + self.block_size, self.file_size) - 1
        headers = {"Range": f"bytes={start}-{end}"}
        try:
            response = self._session.get(self.url, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RemoteSourceError(f"GET {self.url} ({headers['Range']}) failed: {exc}") from exc

        if response.status_code == 206:
            self._blocks[block_id] = response.content
        elif response.status_code == 200:
            logger.info("Server for %s ignores range requests, caching whole body", self.url)
            body = response.content
            for index in range(0, len(body), self.block_size):
                self._blocks.setdefault(index // self.block_size, body[index : index + self.block_size])
        else:
            raise RemoteSourceError(f"GET {self.url} ({headers['Range']}) returned HTTP {response.status_code}")
        logger.debug("Fetched block %d of %s", block_id, self.url)
        return self._blocks.get(block_id, b"")

    @property
    def cached_blocks(self) -> int:
        return len(self._blocks)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
