"""Parse an MPEG audio stream into a ParseResult.

mpeg audio file structure:
    ID3v2 tag        optional, at offset 0
    audio frames     the first one may carry a Xing/Info block
    ID3v1 tag        optional, last 128 bytes
"""

from __future__ import annotations

import logging
from typing import Optional

from mp3info.core.errors import MissingFrameSync, ReservedFieldValue, UnexpectedEndOfData
from mp3info.core.id3 import has_id3v2, id3v1_offset, measure_id3v2, read_id3v1, read_id3v2
from mp3info.core.id3.constants import ID3V1_SIZE
from mp3info.core.models import AudioStreamDescriptor, Id3v1Tag, Id3v2Tag, ParseResult, VbrSideInfo
from mp3info.core.mpeg import decode_header, estimate, find_sync, read_side_info
from mp3info.core.mpeg.constants import DEFAULT_FRAMES_TO_READ, DEFAULT_HEADER_SEEK_LIMIT
from mp3info.core.probe import is_valid_audio
from mp3info.core.sources.base import ByteSource
from mp3info.core.tags import unify_tags


logger = logging.getLogger(__name__)


def _read_stream(
    source: ByteSource,
    start: int,
    seek_limit: int,
    frames_to_read: int,
) -> tuple[AudioStreamDescriptor, Optional[VbrSideInfo]]:
    """Decode the first ``frames_to_read`` frame headers after ``start``.

    The last decoded frame fixes the stream parameters; a Xing/Info block is
    taken from the first frame carrying one. Reserved header values are only
    fatal on the last frame.
    """
    stream: Optional[AudioStreamDescriptor] = None
    vbr: Optional[VbrSideInfo] = None
    pos = start
    for attempt in range(frames_to_read):
        found = find_sync(source, pos, seek_limit)
        if found is None:
            raise MissingFrameSync(f"No frame sync between offsets {pos} and {pos + seek_limit}")
        header, frame_pos = found
        try:
            descriptor = decode_header(header)
        except ReservedFieldValue as exc:
            if attempt == frames_to_read - 1:
                raise ReservedFieldValue(f"Frame header at {frame_pos}: {exc}") from exc
            logger.debug("Skipping frame at %d: %s", frame_pos, exc)
            pos = frame_pos + 1
            continue

        stream = descriptor
        side_info = read_side_info(source, frame_pos, descriptor)
        if vbr is None and side_info is not None:
            vbr = side_info
        pos = min(frame_pos + descriptor.frame_size_bytes, source.file_size)

    if stream is None:
        raise MissingFrameSync(f"No decodable frame header after offset {start}")
    return stream, vbr


def parse(
    source: ByteSource,
    include_tags: bool = False,
    *,
    seek_limit: int = DEFAULT_HEADER_SEEK_LIMIT,
    frames_to_read: int = DEFAULT_FRAMES_TO_READ,
) -> ParseResult:
    """Read stream parameters and, with ``include_tags``, the ID3 tags.

    Without ``include_tags`` the tags are only measured so the audio size is
    still exact. Any failure raises a ParseError subclass.
    """
    if frames_to_read < 1:
        raise ValueError("frames_to_read must be at least 1")
    if not is_valid_audio(source):
        raise MissingFrameSync("Source has no ID3 tag and does not start with a frame sync")

    file_size = source.file_size
    audio_size = file_size

    id3v2: Optional[Id3v2Tag] = None
    id3v2_size = 0
    if has_id3v2(source):
        if include_tags:
            id3v2 = read_id3v2(source)
            id3v2_size = id3v2.size
        else:
            id3v2_size = measure_id3v2(source)
        audio_size -= id3v2_size

    id3v1: Optional[Id3v1Tag] = None
    v1_offset = id3v1_offset(source)
    if v1_offset is not None:
        if include_tags:
            id3v1 = read_id3v1(source, v1_offset)
        audio_size -= ID3V1_SIZE

    if id3v2_size > file_size:
        raise UnexpectedEndOfData(f"ID3v2 tag of {id3v2_size} bytes is larger than the source ({file_size} bytes)")
    audio_size = max(audio_size, 0)

    stream, vbr = _read_stream(source, id3v2_size, seek_limit, frames_to_read)
    estimated = estimate(audio_size, stream, vbr)
    logger.debug(
        "Parsed %d audio bytes: %d frames, %.3f s, %d bps",
        audio_size,
        estimated.frame_count,
        estimated.duration,
        estimated.bit_rate_bps,
    )

    return ParseResult(
        file_size=file_size,
        audio_size_bytes=audio_size,
        id3v2_size=id3v2_size,
        duration=estimated.duration,
        bit_rate_bps=estimated.bit_rate_bps,
        stream=stream,
        frame_count=estimated.frame_count,
        vbr=vbr,
        id3v1=id3v1,
        id3v2=id3v2,
        unified_tags=unify_tags(id3v1, id3v2) if include_tags else {},
        cover=id3v2.cover if id3v2 is not None else None,
    )


def get_cover(result: ParseResult, source: ByteSource) -> Optional[bytes]:
    """Read the attached picture recorded in ``result`` from ``source``.

    The source position is restored afterwards.
    """
    cover = result.cover
    if cover is None:
        return None
    saved = source.tell()
    try:
        if not source.seek_to(cover.offset):
            raise UnexpectedEndOfData(f"Cover offset {cover.offset} is outside the source")
        return source.read(cover.size)
    finally:
        source.seek_to(saved)
