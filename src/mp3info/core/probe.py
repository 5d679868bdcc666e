"""Cheap structural check for MPEG audio files."""

from __future__ import annotations

from mp3info.core.id3.constants import ID3V1_MARKER, ID3V1_SIZE, ID3V2_MARKER
from mp3info.core.mpeg.sync import is_frame_sync
from mp3info.core.sources.base import ByteSource


def is_valid_audio(source: ByteSource) -> bool:
    """Return True when the source starts with an ID3v2 tag or a frame sync,
    or ends with an ID3v1 tag.

    Nothing is decoded and at most six bytes are read. The source position is
    restored afterwards.
    """
    saved = source.tell()
    try:
        source.seek_to(0)
        head = source.peek(3)
        if head == ID3V2_MARKER:
            return True
        if len(head) >= 2 and is_frame_sync(head[0], head[1]):
            return True
        if source.file_size > ID3V1_SIZE:
            source.seek_to(source.file_size - ID3V1_SIZE)
            if source.peek(3) == ID3V1_MARKER:
                return True
        return False
    finally:
        source.seek_to(saved)
