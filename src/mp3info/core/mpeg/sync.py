"""Frame sync scanning."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from mp3info.core.mpeg.constants import DEFAULT_HEADER_SEEK_LIMIT, FRAME_SYNC
from mp3info.core.sources.base import ByteSource


logger = logging.getLogger(__name__)

HEADER_SIZE = 4


def is_frame_sync(first: int, second: int) -> bool:
    return ((first << 8) | second) & FRAME_SYNC == FRAME_SYNC


def find_sync(
    source: ByteSource,
    start_pos: int,
    limit: int = DEFAULT_HEADER_SEEK_LIMIT,
) -> Optional[Tuple[bytes, int]]:
    """Look for the next frame header at or after ``start_pos``.

    Candidate positions run from ``start_pos`` to ``start_pos + limit``
    inclusive and need four readable bytes. Returns the header bytes and their
    position, or None. The source position is left just after the header on a
    match and unchanged otherwise.
    """
    if start_pos < 0 or start_pos > source.file_size:
        return None
    saved = source.tell()
    source.seek_to(start_pos)
    window = source.peek(limit + HEADER_SIZE)
    source.seek_to(saved)

    last_candidate = min(limit, len(window) - HEADER_SIZE)
    index = window.find(b"\xff")
    while 0 <= index <= last_candidate:
        if is_frame_sync(window[index], window[index + 1]):
            pos = start_pos + index
            source.seek_to(pos + HEADER_SIZE)
            logger.debug("Frame sync at %d", pos)
            return window[index : index + HEADER_SIZE], pos
        index = window.find(b"\xff", index + 1)
    return None
