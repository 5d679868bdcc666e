"""ID3v1 and ID3v2 tag decoding."""

from __future__ import annotations

from mp3info.core.id3.syncsafe import decode_syncsafe, encode_syncsafe
from mp3info.core.id3.text import decode_text, split_terminated, terminator_width
from mp3info.core.id3.v1 import read_id3v1, tag_offset as id3v1_offset
from mp3info.core.id3.v2 import has_id3v2, measure_id3v2, read_header, read_id3v2

__all__ = [
    "decode_syncsafe",
    "decode_text",
    "encode_syncsafe",
    "has_id3v2",
    "id3v1_offset",
    "measure_id3v2",
    "read_header",
    "read_id3v1",
    "read_id3v2",
    "split_terminated",
    "terminator_width",
]
