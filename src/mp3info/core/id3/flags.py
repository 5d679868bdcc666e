"""ID3v2 header and per-frame flag decoding."""

from __future__ import annotations

from mp3info.core.models import FrameFlags, Id3v2Flags


def _bit(value: int, bit: int) -> bool:
    return bool((value >> bit) & 1)


def decode_header_flags(version: int, flags: int) -> Id3v2Flags:
    """Flags byte of the tag header.

    v2.2: %ab000000 (unsynchronisation, compression)
    v2.3: %abc00000 (unsynchronisation, extended header, experimental)
    v2.4: %abcd0000 (v2.3 flags plus footer present)
    """
    if version <= 2:
        return Id3v2Flags(unsynchronisation=_bit(flags, 7), compression=_bit(flags, 6))
    return Id3v2Flags(
        unsynchronisation=_bit(flags, 7),
        extended_header=_bit(flags, 6),
        experimental_indicator=_bit(flags, 5),
        footer_present=version >= 4 and _bit(flags, 4),
    )


def decode_frame_flags(version: int, raw: bytes, size: int) -> FrameFlags:
    """Two flag bytes of a frame header.

    v2.3: %abc00000 %ijk00000
    v2.4: %0abc0000 %0h00kmnp
    """
    status, fmt = raw[0], raw[1]
    if version == 3:
        return FrameFlags(
            size=size,
            tag_alter_preservation=_bit(status, 7),
            file_alter_preservation=_bit(status, 6),
            read_only=_bit(status, 5),
            compression=_bit(fmt, 7),
            encryption=_bit(fmt, 6),
            grouping_identity=_bit(fmt, 5),
        )
    return FrameFlags(
        size=size,
        tag_alter_preservation=_bit(status, 6),
        file_alter_preservation=_bit(status, 5),
        read_only=_bit(status, 4),
        grouping_identity=_bit(fmt, 6),
        compression=_bit(fmt, 3),
        encryption=_bit(fmt, 2),
        unsynchronisation=_bit(fmt, 1),
        data_length_indicator=_bit(fmt, 0),
    )
