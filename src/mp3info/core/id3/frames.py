"""Payload decoders for ID3v2.3/2.4 frames.

Frame ids map onto a small closed set of decoder kinds; ids that are not
listed (and are not text frames) are skipped.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Mapping, Optional

from mp3info.core.errors import UnexpectedEndOfData
from mp3info.core.id3.text import decode_text, split_terminated, terminator_width
from mp3info.core.models import CommentText, CoverArt, FrameValue
from mp3info.core.sources.base import ByteSource


logger = logging.getLogger(__name__)


class FrameKind(Enum):
    TEXT = "text"
    TXXX = "txxx"
    COMMENT = "comment"
    PICTURE = "picture"
    PLAY_COUNT = "play_count"
    SKIP = "skip"


FRAME_KINDS: Dict[str, FrameKind] = {
    "TXXX": FrameKind.TXXX,
    "COMM": FrameKind.COMMENT,
    "APIC": FrameKind.PICTURE,
    "PCNT": FrameKind.PLAY_COUNT,
}


# TXXX is only split into description and value in ID3v2.4 tags
USER_TEXT_VERSIONS = (4,)


def frame_kind(frame_id: str, version: int = 4) -> FrameKind:
    kind = FRAME_KINDS.get(frame_id)
    if kind is FrameKind.TXXX and version not in USER_TEXT_VERSIONS:
        return FrameKind.TEXT
    if kind is not None:
        return kind
    if frame_id.startswith("T"):
        return FrameKind.TEXT
    return FrameKind.SKIP


class FrameCollector:
    """Accumulates decoded frame values while a tag body is walked."""

    def __init__(self) -> None:
        self.frames: Dict[str, FrameValue] = {}
        self.cover: Optional[CoverArt] = None

    def add_user_text(self, key: str, value: str) -> None:
        existing = self.frames.get(key)
        if existing is None:
            self.frames[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            self.frames[key] = [existing, value]  # type: ignore[list-item]


def _decode_text_frame(collector: FrameCollector, source: ByteSource, frame_id: str, size: int) -> None:
    payload = source.read(size)
    collector.frames[frame_id] = decode_text(payload[0], payload[1:]) if payload else ""


def _decode_txxx(collector: FrameCollector, source: ByteSource, frame_id: str, size: int) -> None:
    payload = source.read(size)
    if not payload:
        return
    encoding = payload[0]
    description, value = split_terminated(encoding, payload[1:])
    key = f"{frame_id}:{decode_text(encoding, description)}"
    collector.add_user_text(key, decode_text(encoding, value))


def _decode_comment(collector: FrameCollector, source: ByteSource, frame_id: str, size: int) -> None:
    payload = source.read(size)
    if len(payload) < 4:
        logger.warning("%s frame of %d bytes is too short, ignored", frame_id, size)
        return
    encoding = payload[0]
    language = payload[1:4].decode("latin-1")
    short, actual = split_terminated(encoding, payload[4:])
    comments = collector.frames.setdefault(frame_id, {})
    comments[language] = CommentText(  # type: ignore[index]
        short=decode_text(encoding, short),
        actual=decode_text(encoding, actual),
    )


def _read_until_null(source: ByteSource, end: int, width: int) -> bytes:
    terminator = b"\x00" * width
    chunks = []
    while source.tell() + width <= end:
        unit = source.read(width)
        if unit == terminator:
            break
        chunks.append(unit)
    return b"".join(chunks)


def _decode_picture(collector: FrameCollector, source: ByteSource, frame_id: str, size: int) -> None:
    end = source.tell() + size
    if size < 1:
        return
    encoding = source.read(1)[0]
    width = terminator_width(encoding)
    mime_type = _read_until_null(source, end, 1).decode("latin-1")
    picture_type = source.read(1)[0] if source.tell() < end else 0
    description = decode_text(encoding, _read_until_null(source, end, width))
    offset = source.tell()
    collector.cover = CoverArt(
        mime_type=mime_type,
        picture_type=picture_type,
        description=description,
        offset=offset,
        size=end - offset,
    )
    logger.debug("%s picture %s of %d bytes at %d", frame_id, mime_type, end - offset, offset)
    source.seek_to(end)


def _decode_play_count(collector: FrameCollector, source: ByteSource, frame_id: str, size: int) -> None:
    # counters wider than 32 bits are truncated to their first four bytes
    payload = source.read(size)
    collector.frames[frame_id] = int.from_bytes(payload[:4], "big")


def _skip(collector: FrameCollector, source: ByteSource, frame_id: str, size: int) -> None:
    if not source.seek_forward(size):
        raise UnexpectedEndOfData(f"{frame_id} frame at {source.tell()} runs past the end of the source")


FrameDecoder = Callable[[FrameCollector, ByteSource, str, int], None]

FRAME_DECODERS: Mapping[FrameKind, FrameDecoder] = {
    FrameKind.TEXT: _decode_text_frame,
    FrameKind.TXXX: _decode_txxx,
    FrameKind.COMMENT: _decode_comment,
    FrameKind.PICTURE: _decode_picture,
    FrameKind.PLAY_COUNT: _decode_play_count,
    FrameKind.SKIP: _skip,
}


def decode_frame(collector: FrameCollector, source: ByteSource, frame_id: str, size: int, version: int) -> None:
    FRAME_DECODERS[frame_kind(frame_id, version)](collector, source, frame_id, size)
