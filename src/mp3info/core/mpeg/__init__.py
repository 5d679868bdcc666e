"""MPEG audio frame decoding: sync scanning, headers, Xing/Info blocks, duration."""

from __future__ import annotations

from mp3info.core.mpeg.duration import DurationEstimate, estimate, samples_per_frame
from mp3info.core.mpeg.header import decode_header, frame_length
from mp3info.core.mpeg.sync import find_sync, is_frame_sync
from mp3info.core.mpeg.vbr import read_side_info

__all__ = [
    "DurationEstimate",
    "decode_header",
    "estimate",
    "find_sync",
    "frame_length",
    "is_frame_sync",
    "read_side_info",
    "samples_per_frame",
]
