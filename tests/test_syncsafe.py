import pytest

from mp3info.core.errors import MalformedSyncsafeInteger
from mp3info.core.id3 import decode_syncsafe, encode_syncsafe
from mp3info.core.id3.syncsafe import SYNCSAFE_MAX


@pytest.mark.parametrize("value", [0, 1, 127, 128, 200, 16383, 16384, 2_097_151, 2_097_152, SYNCSAFE_MAX])
def test_syncsafe_round_trip(value: int) -> None:
    encoded = encode_syncsafe(value)

    assert all(byte < 0x80 for byte in encoded)
    assert decode_syncsafe(encoded) == value


def test_known_encoding() -> None:
    assert decode_syncsafe(b"\x00\x00\x02\x01") == 257
    assert encode_syncsafe(257) == b"\x00\x00\x02\x01"


def test_top_bit_is_rejected() -> None:
    with pytest.raises(MalformedSyncsafeInteger):
        decode_syncsafe(b"\x00\x00\x80\x00")


def test_out_of_range_values_cannot_be_encoded() -> None:
    with pytest.raises(ValueError):
        encode_syncsafe(SYNCSAFE_MAX + 1)
    with pytest.raises(ValueError):
        encode_syncsafe(-1)
