import pytest

from mp3info.core.errors import ReservedFieldValue
from mp3info.core.models import ChannelMode, CodecVersion
from mp3info.core.mpeg import decode_header, frame_length
from mp3info.core.mpeg.constants import BIT_RATE_TABLE, SAMPLE_RATE_TABLE


def test_decode_mpeg1_layer3_joint_stereo_header() -> None:
    stream = decode_header(bytes([0xFF, 0xFB, 0x90, 0x44]))

    assert stream.codec_version is CodecVersion.MPEG_1
    assert stream.layer == 3
    assert stream.channel_mode is ChannelMode.JOINT_STEREO
    assert stream.bit_rate_bps == 128000
    assert stream.sample_rate_hz == 44100
    assert stream.frame_size_bytes == (144 * 128000) // 44100
    assert not stream.is_protected
    assert not stream.is_padded
    assert not stream.is_private
    assert not stream.is_copyright
    assert stream.is_original


def test_decoding_is_deterministic() -> None:
    header = bytes([0xFF, 0xF3, 0x58, 0xC4])
    assert decode_header(header) == decode_header(header)


def test_mpeg2_mono_crc_protected_header() -> None:
    # MPEG-2 layer 3, CRC, 64 kbps, 24000 Hz, padded, private, mono, copyright
    stream = decode_header(bytes([0xFF, 0xF2, 0x87, 0xC8]))

    assert stream.codec_version is CodecVersion.MPEG_2
    assert stream.layer == 3
    assert stream.is_protected
    assert stream.bit_rate_bps == 64000
    assert stream.sample_rate_hz == 24000
    assert stream.is_padded
    assert stream.is_private
    assert stream.channel_mode is ChannelMode.MONO
    assert stream.is_copyright
    assert not stream.is_original
    assert stream.frame_size_bytes == int(144 * 64000 / 24000 + 1)


def test_mpeg25_and_layer1_lookups() -> None:
    stream = decode_header(bytes([0xFF, 0xE7, 0x18, 0x80]))

    assert stream.codec_version is CodecVersion.MPEG_25
    assert stream.layer == 1
    assert stream.bit_rate_bps == 32000
    assert stream.sample_rate_hz == 8000
    assert stream.channel_mode is ChannelMode.DUAL_MONO
    assert stream.frame_size_bytes == int((12 * 32000 / 8000) * 4)


def test_layer1_frame_length_counts_padding_as_a_slot() -> None:
    assert frame_length(1, 384000, 48000, 0) == 384
    assert frame_length(1, 384000, 48000, 1) == 388
    assert frame_length(2, 192000, 48000, 1) == 577


@pytest.mark.parametrize(
    "header",
    [
        bytes([0xFF, 0xEB, 0x90, 0x44]),  # version bits 01
        bytes([0xFF, 0xF9, 0x90, 0x44]),  # layer bits 00
        bytes([0xFF, 0xFB, 0xF0, 0x44]),  # bit rate index 15
        bytes([0xFF, 0xFB, 0x00, 0x44]),  # free format bit rate
        bytes([0xFF, 0xFB, 0x9C, 0x44]),  # sample rate index 11
    ],
)
def test_reserved_fields_are_rejected(header: bytes) -> None:
    with pytest.raises(ReservedFieldValue):
        decode_header(header)


def test_lookup_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        SAMPLE_RATE_TABLE[CodecVersion.MPEG_1][3] = 96000  # type: ignore[index]
    with pytest.raises(TypeError):
        BIT_RATE_TABLE[CodecVersion.MPEG_1][3][15] = 1  # type: ignore[index]
