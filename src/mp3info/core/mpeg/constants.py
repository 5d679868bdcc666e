"""Lookup tables for MPEG audio frame headers (ISO/IEC 11172-3, 13818-3)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from mp3info.core.models import CodecVersion

FRAME_SYNC = 0xFFE0
DEFAULT_HEADER_SEEK_LIMIT = 2048
DEFAULT_FRAMES_TO_READ = 2

LAYER_1_SAMPLES_PER_FRAME = 384
LAYERS_23_SAMPLES_PER_FRAME = 1152

# Header bit patterns (index 0b01 of version and 0b00 of layer are reserved)
VERSION_BITS: Mapping[int, CodecVersion] = MappingProxyType(
    {
        0b00: CodecVersion.MPEG_25,
        0b10: CodecVersion.MPEG_2,
        0b11: CodecVersion.MPEG_1,
    }
)
LAYER_BITS: Mapping[int, int] = MappingProxyType({0b01: 3, 0b10: 2, 0b11: 1})

_MPEG1_RATES: Mapping[int, Tuple[int, ...]] = {
    1: (32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448),
    2: (32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384),
    3: (32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320),
}
_MPEG2_RATES: Mapping[int, Tuple[int, ...]] = {
    1: (32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256),
    2: (8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
    3: (8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
}


def _index_table(rates: Tuple[int, ...]) -> Mapping[int, int]:
    # index 0 is "free format" and 15 is forbidden; neither is mapped
    return MappingProxyType({index: kbps * 1000 for index, kbps in enumerate(rates, start=1)})


# bit rate in bps by codec version, layer and 4-bit index
BIT_RATE_TABLE: Mapping[CodecVersion, Mapping[int, Mapping[int, int]]] = MappingProxyType(
    {
        CodecVersion.MPEG_1: MappingProxyType({layer: _index_table(r) for layer, r in _MPEG1_RATES.items()}),
        CodecVersion.MPEG_2: MappingProxyType({layer: _index_table(r) for layer, r in _MPEG2_RATES.items()}),
        CodecVersion.MPEG_25: MappingProxyType({layer: _index_table(r) for layer, r in _MPEG2_RATES.items()}),
    }
)

# sample rate in Hz by codec version and 2-bit index (0b11 is reserved)
SAMPLE_RATE_TABLE: Mapping[CodecVersion, Mapping[int, int]] = MappingProxyType(
    {
        CodecVersion.MPEG_1: MappingProxyType({0b00: 44100, 0b01: 48000, 0b10: 32000}),
        CodecVersion.MPEG_2: MappingProxyType({0b00: 22050, 0b01: 24000, 0b10: 16000}),
        CodecVersion.MPEG_25: MappingProxyType({0b00: 11025, 0b01: 12000, 0b10: 8000}),
    }
)

# offset of the Xing/Info block from the frame start: (mono, not mono)
VBR_OFFSETS: Mapping[CodecVersion, Tuple[int, int]] = MappingProxyType(
    {
        CodecVersion.MPEG_1: (21, 36),
        CodecVersion.MPEG_2: (13, 21),
        CodecVersion.MPEG_25: (13, 21),
    }
)

VBR_MARKER = b"Xing"
CBR_MARKER = b"Info"
XING_TOC_SIZE = 100

XING_FLAG_TOC = 0x01
XING_FLAG_FRAMES = 0x02
XING_FLAG_BYTES = 0x04
XING_FLAG_QUALITY = 0x08
