"""Byte-level builders for synthetic MPEG audio files used across tests."""

from __future__ import annotations

import struct
from typing import Optional, Sequence, Tuple, Union

# MPEG-1 Layer 3, 128 kbps, 44100 Hz, joint stereo, no padding
HEADER_128K = bytes([0xFF, 0xFB, 0x90, 0x44])
FRAME_SIZE_128K = 417  # floor(144 * 128000 / 44100)


def syncsafe(value: int) -> bytes:
    return bytes([(value >> 21) & 0x7F, (value >> 14) & 0x7F, (value >> 7) & 0x7F, value & 0x7F])


def cbr_frame(header: bytes = HEADER_128K, size: int = FRAME_SIZE_128K) -> bytes:
    return header + b"\x00" * (size - len(header))


def cbr_frames(count: int) -> bytes:
    return cbr_frame() * count


def xing_frame(
    *,
    marker: bytes = b"Xing",
    frames: Optional[int] = None,
    stream_bytes: Optional[int] = None,
    toc: bool = False,
    quality: Optional[int] = None,
    header: bytes = HEADER_128K,
    offset: int = 36,
    size: int = FRAME_SIZE_128K,
) -> bytes:
    flags = 0
    fields = b""
    if frames is not None:
        flags |= 0x02
        fields += struct.pack(">I", frames)
    if stream_bytes is not None:
        flags |= 0x04
        fields += struct.pack(">I", stream_bytes)
    if toc:
        flags |= 0x01
        fields += bytes(range(100))
    if quality is not None:
        flags |= 0x08
        fields += struct.pack(">I", quality)
    body = header + b"\x00" * (offset - len(header)) + marker + bytes([0, 0, 0, flags]) + fields
    return body + b"\x00" * (size - len(body))


Frame = Union[Tuple[str, bytes], Tuple[str, bytes, bytes]]


def id3v2_frame(version: int, frame_id: str, payload: bytes, flags: bytes = b"\x00\x00") -> bytes:
    size = syncsafe(len(payload)) if version == 4 else struct.pack(">I", len(payload))
    return frame_id.encode("latin-1") + size + flags + payload


def id3v2_tag(
    version: int,
    frames: Sequence[Frame] = (),
    *,
    padding: int = 0,
    flags: int = 0,
    revision: int = 0,
    body: Optional[bytes] = None,
) -> bytes:
    if body is None:
        body = b"".join(id3v2_frame(version, *frame) for frame in frames)
    body += b"\x00" * padding
    header = bytes([version, revision, flags]) + syncsafe(len(body))
    tag = b"ID3" + header + body
    if version == 4 and flags & 0x10:
        tag += b"3DI" + header
    return tag


def text_payload(text: str, encoding: int = 0) -> bytes:
    codec = {0: "latin-1", 1: "utf-16", 2: "utf-16-be", 3: "utf-8"}[encoding]
    return bytes([encoding]) + text.encode(codec)


def _v1_field(text: str, size: int) -> bytes:
    return text.encode("latin-1")[:size].ljust(size, b"\x00")


def id3v1_tag(
    song: str = "",
    artist: str = "",
    album: str = "",
    year: str = "",
    comment: bytes = b"",
    genre: int = 255,
) -> bytes:
    tag = (
        b"TAG"
        + _v1_field(song, 30)
        + _v1_field(artist, 30)
        + _v1_field(album, 30)
        + _v1_field(year, 4)
        + comment[:30].ljust(30, b"\x00")
        + bytes([genre])
    )
    assert len(tag) == 128
    return tag
