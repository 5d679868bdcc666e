"""ID3v2 text encodings."""

from __future__ import annotations

from typing import Tuple

from mp3info.core.errors import UnsupportedEncoding
from mp3info.core.id3.constants import ENCODING_LATIN1, ENCODING_UTF16, ENCODING_UTF16BE, ENCODING_UTF8

_CODECS = {
    ENCODING_LATIN1: "latin-1",
    ENCODING_UTF16: "utf-16",
    ENCODING_UTF16BE: "utf-16-be",
    ENCODING_UTF8: "utf-8",
}


def _codec(encoding: int) -> str:
    try:
        return _CODECS[encoding]
    except KeyError:
        raise UnsupportedEncoding(f"Unknown ID3v2 text encoding 0x{encoding:02x}") from None


def terminator_width(encoding: int) -> int:
    _codec(encoding)
    return 2 if encoding in (ENCODING_UTF16, ENCODING_UTF16BE) else 1


def decode_text(encoding: int, raw: bytes) -> str:
    """Decode ``raw`` and drop trailing terminators."""
    text = raw.decode(_codec(encoding), errors="replace")
    return text.rstrip("\x00")


def split_terminated(encoding: int, raw: bytes) -> Tuple[bytes, bytes]:
    """Split ``raw`` at the first null terminator of the encoding's width.

    UTF-16 terminators are only recognised on even offsets. When no
    terminator is present the whole input is the first part.
    """
    width = terminator_width(encoding)
    terminator = b"\x00" * width
    index = 0
    while index + width <= len(raw):
        if raw[index : index + width] == terminator:
            return raw[:index], raw[index + width :]
        index += width
    return raw, b""
