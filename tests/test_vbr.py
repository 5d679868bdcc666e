import pytest

from mp3info.core.errors import UnexpectedEndOfData
from mp3info.core.mpeg import decode_header, read_side_info
from mp3info.core.parser import parse
from mp3info.core.sources import MemorySource
from mpeg_builders import HEADER_128K, cbr_frame, cbr_frames, xing_frame


def _side_info(frame: bytes):
    source = MemorySource(frame)
    return read_side_info(source, 0, decode_header(frame[:4]))


def test_xing_block_with_all_fields() -> None:
    info = _side_info(xing_frame(frames=1000, stream_bytes=417000, toc=True, quality=57))

    assert info is not None
    assert info.is_vbr
    assert info.marker == "Xing"
    assert info.frames_declared == 1000
    assert info.stream_bytes_declared == 417000
    assert info.has_toc
    assert info.quality_indicator == 57


def test_fields_follow_stream_order_not_flag_order() -> None:
    info = _side_info(xing_frame(frames=12, quality=99))

    assert info is not None
    assert info.frames_declared == 12
    assert info.stream_bytes_declared is None
    assert not info.has_toc
    assert info.quality_indicator == 99


def test_toc_is_skipped_before_quality() -> None:
    info = _side_info(xing_frame(toc=True, quality=3))

    assert info is not None
    assert info.frames_declared is None
    assert info.quality_indicator == 3


def test_info_marker_is_not_vbr() -> None:
    info = _side_info(xing_frame(marker=b"Info", frames=20))

    assert info is not None
    assert not info.is_vbr
    assert info.frames_declared == 20


def test_plain_frame_has_no_side_info() -> None:
    assert _side_info(cbr_frame()) is None


def test_mono_mpeg1_uses_short_offset() -> None:
    mono_header = bytes([0xFF, 0xFB, 0x90, 0xC4])
    info = _side_info(xing_frame(header=mono_header, offset=21, frames=5))

    assert info is not None
    assert info.frames_declared == 5


def test_mpeg2_stereo_offset() -> None:
    # MPEG-2 layer 3, 64 kbps, 22050 Hz, stereo
    header = bytes([0xFF, 0xF3, 0x80, 0x00])
    frame_size = decode_header(header).frame_size_bytes
    info = _side_info(xing_frame(header=header, offset=21, frames=7, size=frame_size))

    assert info is not None
    assert info.frames_declared == 7


def test_truncated_xing_block_raises() -> None:
    frame = HEADER_128K + b"\x00" * 32 + b"Xing" + bytes([0, 0, 0, 0x02]) + b"\x00\x01"
    with pytest.raises(UnexpectedEndOfData):
        _side_info(frame)


def test_declared_frame_count_wins_over_cbr_estimate() -> None:
    data = xing_frame(frames=100, stream_bytes=4170, toc=True, quality=80) + cbr_frames(9)

    result = parse(MemorySource(data))

    assert result.is_vbr
    assert result.frame_count == 100
    assert result.duration == pytest.approx(99 * 1152 / 44100)
    assert result.bit_rate_bps == round(4170 / 100 * 44100 / 144)
    assert result.stream.bit_rate_bps == 128000
    assert result.vbr is not None and result.vbr.quality_indicator == 80


def test_info_frame_count_is_used_without_bit_rate_recalculation() -> None:
    data = xing_frame(marker=b"Info", frames=50) + cbr_frames(9)

    result = parse(MemorySource(data))

    assert not result.is_vbr
    assert result.frame_count == 50
    assert result.bit_rate_bps == 128000


def test_zero_declared_frames_falls_back_to_estimate() -> None:
    data = xing_frame(frames=0) + cbr_frames(9)

    result = parse(MemorySource(data))

    assert result.frame_count == 10
