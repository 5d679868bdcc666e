"""Read stream parameters and ID3 tags from MPEG audio files."""

from __future__ import annotations

from mp3info.core.errors import (
    MalformedSyncsafeInteger,
    MissingFrameSync,
    ParseError,
    RemoteSourceError,
    ReservedFieldValue,
    UnexpectedEndOfData,
    UnsupportedEncoding,
    UnsupportedFeature,
)
from mp3info.core.info import Mp3Info
from mp3info.core.models import (
    AudioStreamDescriptor,
    ChannelMode,
    CodecVersion,
    CommentText,
    CoverArt,
    FrameFlags,
    Id3v1Tag,
    Id3v2Flags,
    Id3v2Tag,
    ParseResult,
    VbrSideInfo,
)
from mp3info.core.parser import get_cover, parse
from mp3info.core.probe import is_valid_audio
from mp3info.core.sources import ByteSource, LocalFileSource, MemorySource, RemoteFileSource, open_source

__version__ = "0.1.0"

__all__ = [
    "AudioStreamDescriptor",
    "ByteSource",
    "ChannelMode",
    "CodecVersion",
    "CommentText",
    "CoverArt",
    "FrameFlags",
    "Id3v1Tag",
    "Id3v2Flags",
    "Id3v2Tag",
    "LocalFileSource",
    "MalformedSyncsafeInteger",
    "MemorySource",
    "MissingFrameSync",
    "Mp3Info",
    "ParseError",
    "ParseResult",
    "RemoteFileSource",
    "RemoteSourceError",
    "ReservedFieldValue",
    "UnexpectedEndOfData",
    "UnsupportedEncoding",
    "UnsupportedFeature",
    "VbrSideInfo",
    "get_cover",
    "is_valid_audio",
    "open_source",
    "parse",
]
