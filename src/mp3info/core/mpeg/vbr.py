"""Xing/Info side information stored in the first audio frame.

Layout after the 4-byte marker: a 4-byte flag word (only the low byte is
used), then the optional fields in fixed order: frame count, byte count,
100-byte seek TOC and quality indicator.
"""

from __future__ import annotations

import logging
import struct
from typing import Optional

from mp3info.core.errors import UnexpectedEndOfData
from mp3info.core.models import AudioStreamDescriptor, VbrSideInfo
from mp3info.core.mpeg.constants import (
    CBR_MARKER,
    VBR_MARKER,
    VBR_OFFSETS,
    XING_FLAG_BYTES,
    XING_FLAG_FRAMES,
    XING_FLAG_QUALITY,
    XING_FLAG_TOC,
    XING_TOC_SIZE,
)
from mp3info.core.sources.base import ByteSource


logger = logging.getLogger(__name__)


def side_info_offset(stream: AudioStreamDescriptor) -> int:
    mono, other = VBR_OFFSETS[stream.codec_version]
    return mono if stream.is_mono else other


def _read_u32(source: ByteSource) -> int:
    return struct.unpack(">I", source.read(4))[0]


def read_side_info(source: ByteSource, frame_pos: int, stream: AudioStreamDescriptor) -> Optional[VbrSideInfo]:
    """Return the Xing/Info block of the frame at ``frame_pos``, if any.

    The source is left positioned after the last field read.
    """
    marker_pos = frame_pos + side_info_offset(stream)
    if marker_pos + 4 > source.file_size:
        return None
    source.seek_to(marker_pos)
    marker = source.read(4)
    if marker not in (VBR_MARKER, CBR_MARKER):
        return None

    flags = source.read(4)[3]
    frames = _read_u32(source) if flags & XING_FLAG_FRAMES else None
    stream_bytes = _read_u32(source) if flags & XING_FLAG_BYTES else None
    has_toc = bool(flags & XING_FLAG_TOC)
    if has_toc and not source.seek_forward(XING_TOC_SIZE):
        raise UnexpectedEndOfData(f"Xing TOC at {source.tell()} runs past the end of the source")
    quality = _read_u32(source) if flags & XING_FLAG_QUALITY else None

    info = VbrSideInfo(
        marker=marker.decode("ascii"),
        frames_declared=frames,
        stream_bytes_declared=stream_bytes,
        quality_indicator=quality,
        has_toc=has_toc,
    )
    logger.debug("%s block at %d: %s", info.marker, marker_pos, info)
    return info
