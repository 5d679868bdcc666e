"""Syncsafe integers: 28-bit values spread over four 7-bit bytes."""

from __future__ import annotations

from mp3info.core.errors import MalformedSyncsafeInteger

SYNCSAFE_MAX = (1 << 28) - 1


def decode_syncsafe(raw: bytes) -> int:
    if len(raw) != 4:
        raise ValueError("syncsafe integers are 4 bytes long")
    value = 0
    for byte in raw:
        if byte & 0x80:
            raise MalformedSyncsafeInteger(f"Syncsafe byte 0x{byte:02x} has its top bit set")
        value = (value << 7) | byte
    return value


def encode_syncsafe(value: int) -> bytes:
    if not 0 <= value <= SYNCSAFE_MAX:
        raise ValueError(f"{value} does not fit in a syncsafe integer")
    return bytes(((value >> shift) & 0x7F) for shift in (21, 14, 7, 0))
