from mp3info.core.id3 import id3v1_offset, read_id3v1
from mp3info.core.id3.v1 import decode_comment_block
from mp3info.core.sources import MemorySource
from mpeg_builders import cbr_frames, id3v1_tag


def _read(tag: bytes):
    source = MemorySource(cbr_frames(2) + tag)
    offset = id3v1_offset(source)
    assert offset == len(cbr_frames(2))
    return read_id3v1(source, offset)


def test_id3v11_track_number() -> None:
    comment = b"Nice one".ljust(28, b"\x00") + b"\x00\x41"
    tag = _read(id3v1_tag("Song", "Artist", "Album", "1999", comment, genre=17))

    assert tag.song == "Song"
    assert tag.artist == "Artist"
    assert tag.album == "Album"
    assert tag.year == "1999"
    assert tag.comment == "Nice one"
    assert tag.track == 0x41
    assert tag.genre == 17


def test_id3v10_comment_uses_all_thirty_bytes() -> None:
    comment = b"A" * 29 + b"Z"
    tag = _read(id3v1_tag("Song", comment=comment))

    assert tag.track is None
    assert tag.comment == "A" * 29 + "Z"


def test_zero_track_byte_means_id3v10() -> None:
    comment, track = decode_comment_block(b"short".ljust(30, b"\x00"))

    assert comment == "short"
    assert track is None


def test_nonzero_byte28_means_id3v10() -> None:
    block = b"x" * 28 + b"\x01\x41"
    comment, track = decode_comment_block(block)

    assert track is None
    assert comment == "x" * 28 + "\x01A"


def test_fields_are_trimmed_and_latin1_decoded() -> None:
    tag = _read(id3v1_tag("  Caf\xe9  ", "Artist   "))

    assert tag.song == "Caf\xe9"
    assert tag.artist == "Artist"


def test_no_tag_marker() -> None:
    source = MemorySource(cbr_frames(1))

    assert id3v1_offset(source) is None


def test_file_of_exactly_one_tag_is_not_treated_as_tagged() -> None:
    source = MemorySource(id3v1_tag("Song"))

    assert id3v1_offset(source) is None
