"""MPEG audio frame header decoding."""

from __future__ import annotations

from mp3info.core.errors import ReservedFieldValue
from mp3info.core.models import AudioStreamDescriptor, ChannelMode
from mp3info.core.mpeg.constants import BIT_RATE_TABLE, LAYER_BITS, SAMPLE_RATE_TABLE, VERSION_BITS
from mp3info.core.mpeg.sync import HEADER_SIZE, is_frame_sync

CHANNEL_MODE_BITS = (
    ChannelMode.STEREO,
    ChannelMode.JOINT_STEREO,
    ChannelMode.DUAL_MONO,
    ChannelMode.MONO,
)


def frame_length(layer: int, bit_rate_bps: int, sample_rate_hz: int, padding: int) -> int:
    """Byte length of a frame assuming a constant bit rate."""
    if layer == 1:
        return int((12 * bit_rate_bps / sample_rate_hz + padding) * 4)
    return int(144 * bit_rate_bps / sample_rate_hz + padding)


def decode_header(header: bytes) -> AudioStreamDescriptor:
    """Decode the four header bytes returned by ``find_sync``.

    Raises ReservedFieldValue when the version, layer, bit rate or sample
    rate field holds a reserved or unmapped value.
    """
    if len(header) != HEADER_SIZE or not is_frame_sync(header[0], header[1]):
        raise ValueError("header must be 4 bytes starting with a frame sync")
    b1, b2, b3 = header[1], header[2], header[3]

    version_bits = (b1 >> 3) & 0b11
    codec_version = VERSION_BITS.get(version_bits)
    if codec_version is None:
        raise ReservedFieldValue(f"Reserved MPEG version bits {version_bits:02b}")

    layer_bits = (b1 >> 1) & 0b11
    layer = LAYER_BITS.get(layer_bits)
    if layer is None:
        raise ReservedFieldValue(f"Reserved layer bits {layer_bits:02b}")

    bit_rate_index = b2 >> 4
    bit_rate = BIT_RATE_TABLE[codec_version][layer].get(bit_rate_index)
    if bit_rate is None:
        raise ReservedFieldValue(
            f"Unsupported bit rate index {bit_rate_index} for {codec_version.value} layer {layer}"
        )

    sample_rate_index = (b2 >> 2) & 0b11
    sample_rate = SAMPLE_RATE_TABLE[codec_version].get(sample_rate_index)
    if sample_rate is None:
        raise ReservedFieldValue(f"Reserved sample rate index {sample_rate_index:02b}")

    padding = (b2 >> 1) & 0b1
    return AudioStreamDescriptor(
        codec_version=codec_version,
        layer=layer,
        bit_rate_bps=bit_rate,
        sample_rate_hz=sample_rate,
        channel_mode=CHANNEL_MODE_BITS[b3 >> 6],
        # the bit is cleared when a CRC follows the header
        is_protected=not (b1 & 0b1),
        is_padded=bool(padding),
        is_private=bool(b2 & 0b1),
        is_copyright=bool((b3 >> 3) & 0b1),
        is_original=bool((b3 >> 2) & 0b1),
        frame_size_bytes=frame_length(layer, bit_rate, sample_rate, padding),
    )
