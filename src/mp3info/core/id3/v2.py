"""ID3v2 tag reader.

Overall tag header structure (10 bytes):
    "ID3"                      3 bytes
    version, revision          2 bytes
    flags                      1 byte
    size (syncsafe)            4 bytes, excludes header and footer

Frame header structure (10 bytes, v2.3 and v2.4):
    frame id                   4 ASCII bytes
    size                       4 bytes, big-endian in v2.3, syncsafe in v2.4
    flags                      2 bytes

Extended headers are rejected and ID3v2.2 bodies are never decoded.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass

from mp3info.core.errors import UnsupportedFeature
from mp3info.core.id3.constants import (
    ID3V2_FOOTER_SIZE,
    ID3V2_FRAME_HEADER_SIZE,
    ID3V2_HEADER_SIZE,
    ID3V2_MARKER,
    ID3V2_PADDING_ID,
)
from mp3info.core.id3.flags import decode_frame_flags, decode_header_flags
from mp3info.core.id3.frames import FrameCollector, decode_frame
from mp3info.core.id3.syncsafe import decode_syncsafe
from mp3info.core.models import FrameFlags, Id3v2Flags, Id3v2Tag
from mp3info.core.sources.base import ByteSource


logger = logging.getLogger(__name__)

SUPPORTED_FRAME_VERSIONS = (3, 4)


@dataclass(frozen=True, slots=True)
class Id3v2Header:
    offset: int
    version: int
    revision: int
    flags: Id3v2Flags
    body_size: int

    @property
    def body_end(self) -> int:
        return self.offset + ID3V2_HEADER_SIZE + self.body_size

    @property
    def total_size(self) -> int:
        footer = ID3V2_FOOTER_SIZE if self.flags.footer_present else 0
        return ID3V2_HEADER_SIZE + self.body_size + footer


def has_id3v2(source: ByteSource, offset: int = 0) -> bool:
    saved = source.tell()
    source.seek_to(offset)
    marker = source.peek(len(ID3V2_MARKER))
    source.seek_to(saved)
    return marker == ID3V2_MARKER


def read_header(source: ByteSource, offset: int = 0) -> Id3v2Header:
    source.seek_to(offset)
    raw = source.read(ID3V2_HEADER_SIZE)
    if raw[:3] != ID3V2_MARKER:
        raise ValueError(f"No ID3v2 tag at offset {offset}")
    version, revision = raw[3], raw[4]
    return Id3v2Header(
        offset=offset,
        version=version,
        revision=revision,
        flags=decode_header_flags(version, raw[5]),
        body_size=decode_syncsafe(raw[6:10]),
    )


def measure_id3v2(source: ByteSource, offset: int = 0) -> int:
    """Total on-disk size of the tag at ``offset`` without decoding it."""
    return read_header(source, offset).total_size


def read_id3v2(source: ByteSource, offset: int = 0) -> Id3v2Tag:
    """Decode the tag at ``offset`` and leave the source after it."""
    header = read_header(source, offset)
    if header.flags.extended_header:
        raise UnsupportedFeature(f"ID3v2.{header.version} extended header at {offset} is not supported")

    collector = FrameCollector()
    frame_flags: dict[str, FrameFlags] = {}
    if header.version == 2:
        logger.warning("ID3v2.2 tag at %d: frames are not decoded", offset)
    elif header.version in SUPPORTED_FRAME_VERSIONS:
        read_frames(source, header, collector, frame_flags)
    else:
        raise UnsupportedFeature(f"ID3v2.{header.version} tags are not supported")

    source.seek_to(min(offset + header.total_size, source.file_size))
    logger.debug(
        "ID3v2.%d.%d tag at %d: %d bytes, %d frames",
        header.version,
        header.revision,
        offset,
        header.total_size,
        len(frame_flags),
    )
    return Id3v2Tag(
        version=header.version,
        revision=header.revision,
        flags=header.flags,
        size=header.total_size,
        frames=collector.frames,
        frame_flags=frame_flags,
        cover=collector.cover,
    )


def _frame_size(version: int, raw: bytes) -> int:
    if version == 4:
        return decode_syncsafe(raw)
    return struct.unpack(">I", raw)[0]


def read_frames(
    source: ByteSource,
    header: Id3v2Header,
    collector: FrameCollector,
    frame_flags: dict[str, FrameFlags],
) -> None:
    if header.version not in SUPPORTED_FRAME_VERSIONS:
        raise UnsupportedFeature(f"ID3v2.{header.version} frames are not supported")
    tag_end = header.body_end
    source.seek_to(header.offset + ID3V2_HEADER_SIZE)

    while source.tell() < tag_end:
        frame_pos = source.tell()
        if tag_end - frame_pos < ID3V2_FRAME_HEADER_SIZE:
            break
        raw = source.read(ID3V2_FRAME_HEADER_SIZE)
        raw_id = raw[:4]
        if raw_id == ID3V2_PADDING_ID:
            break
        frame_id = raw_id.decode("latin-1")
        if not frame_id.isalnum():
            logger.warning("Invalid frame id %r at %d, stopping frame scan", frame_id, frame_pos)
            break
        size = _frame_size(header.version, raw[4:8])
        payload_start = source.tell()
        if payload_start + size > tag_end:
            logger.warning(
                "Frame %s at %d (%d bytes) overruns the tag end at %d, stopping frame scan",
                frame_id,
                frame_pos,
                size,
                tag_end,
            )
            break
        frame_flags[frame_id] = decode_frame_flags(header.version, raw[8:10], size)
        decode_frame(collector, source, frame_id, size, header.version)
        source.seek_to(payload_start + size)

    source.seek_to(tag_end)
