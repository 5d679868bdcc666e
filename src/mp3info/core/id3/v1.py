"""ID3v1 / ID3v1.1 tag stored in the last 128 bytes of the file.

Layout after the "TAG" marker: song (30), artist (30), album (30), year (4),
comment (30), genre (1). ID3v1.1 stores the track number in the last
comment byte when the byte before it is zero.
"""

from __future__ import annotations

import logging
from typing import Optional

from mp3info.core.id3.constants import ID3V1_MARKER, ID3V1_SIZE
from mp3info.core.models import Id3v1Tag
from mp3info.core.sources.base import ByteSource


logger = logging.getLogger(__name__)

_PADDING = " \t\r\n\x0b\x00"


def _field(raw: bytes) -> str:
    return raw.decode("latin-1").strip(_PADDING)


def tag_offset(source: ByteSource) -> Optional[int]:
    """Offset of the ID3v1 tag, or None when the file has none."""
    if source.file_size <= ID3V1_SIZE:
        return None
    offset = source.file_size - ID3V1_SIZE
    saved = source.tell()
    source.seek_to(offset)
    marker = source.peek(len(ID3V1_MARKER))
    source.seek_to(saved)
    return offset if marker == ID3V1_MARKER else None


def decode_comment_block(block: bytes) -> tuple[str, Optional[int]]:
    """Return (comment, track) for the 30-byte comment field."""
    if block[28] == 0 and block[29] != 0:
        return _field(block[:28]), block[29]
    return _field(block), None


def read_id3v1(source: ByteSource, offset: int) -> Id3v1Tag:
    source.seek_to(offset)
    raw = source.read(ID3V1_SIZE)
    if raw[:3] != ID3V1_MARKER:
        raise ValueError(f"No ID3v1 tag at offset {offset}")
    comment, track = decode_comment_block(raw[97:127])
    tag = Id3v1Tag(
        song=_field(raw[3:33]),
        artist=_field(raw[33:63]),
        album=_field(raw[63:93]),
        year=_field(raw[93:97]),
        comment=comment,
        track=track,
        genre=raw[127],
    )
    logger.debug("ID3v1%s tag at %d", ".1" if track is not None else "", offset)
    return tag
