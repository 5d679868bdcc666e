"""Shared data structures for parse results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class CodecVersion(Enum):
    MPEG_1 = "MPEG1"
    MPEG_2 = "MPEG2"
    MPEG_25 = "MPEG2.5"


class ChannelMode(Enum):
    STEREO = "stereo"
    JOINT_STEREO = "joint_stereo"
    DUAL_MONO = "dual_mono"
    MONO = "mono"


@dataclass(frozen=True, slots=True)
class AudioStreamDescriptor:
    """Stream parameters decoded from a single MPEG frame header."""

    codec_version: CodecVersion
    layer: int
    bit_rate_bps: int
    sample_rate_hz: int
    channel_mode: ChannelMode
    is_protected: bool
    is_padded: bool
    is_private: bool
    is_copyright: bool
    is_original: bool
    frame_size_bytes: int

    @property
    def is_mono(self) -> bool:
        return self.channel_mode is ChannelMode.MONO


@dataclass(frozen=True, slots=True)
class VbrSideInfo:
    marker: str
    frames_declared: Optional[int] = None
    stream_bytes_declared: Optional[int] = None
    quality_indicator: Optional[int] = None
    has_toc: bool = False

    @property
    def is_vbr(self) -> bool:
        # "Info" blocks are written by encoders for CBR streams
        return self.marker == "Xing"


@dataclass(frozen=True, slots=True)
class Id3v1Tag:
    song: str
    artist: str
    album: str
    year: str
    comment: str
    track: Optional[int]
    genre: int


@dataclass(frozen=True, slots=True)
class CommentText:
    short: str
    actual: str


@dataclass(frozen=True, slots=True)
class CoverArt:
    """Location of an attached picture inside the byte source.

    Only the position is kept; the image bytes are fetched by ``get_cover``.
    """

    mime_type: str
    picture_type: int
    description: str
    offset: int
    size: int


@dataclass(frozen=True, slots=True)
class Id3v2Flags:
    unsynchronisation: bool = False
    compression: bool = False
    extended_header: bool = False
    experimental_indicator: bool = False
    footer_present: bool = False


@dataclass(frozen=True, slots=True)
class FrameFlags:
    size: int
    tag_alter_preservation: bool = False
    file_alter_preservation: bool = False
    read_only: bool = False
    grouping_identity: bool = False
    compression: bool = False
    encryption: bool = False
    unsynchronisation: bool = False
    data_length_indicator: bool = False


FrameValue = Union[str, List[str], Dict[str, CommentText], int]


@dataclass(frozen=True, slots=True)
class Id3v2Tag:
    version: int
    revision: int
    flags: Id3v2Flags
    size: int
    frames: Dict[str, FrameValue] = field(default_factory=dict)
    frame_flags: Dict[str, FrameFlags] = field(default_factory=dict)
    cover: Optional[CoverArt] = None


@dataclass(frozen=True, slots=True)
class ParseResult:
    file_size: int
    audio_size_bytes: int
    id3v2_size: int
    duration: float
    bit_rate_bps: int
    stream: AudioStreamDescriptor
    frame_count: int
    vbr: Optional[VbrSideInfo] = None
    id3v1: Optional[Id3v1Tag] = None
    id3v2: Optional[Id3v2Tag] = None
    unified_tags: Dict[str, str] = field(default_factory=dict)
    cover: Optional[CoverArt] = None

    @property
    def is_vbr(self) -> bool:
        return self.vbr is not None and self.vbr.is_vbr

    @property
    def has_cover(self) -> bool:
        return self.cover is not None
