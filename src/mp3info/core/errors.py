"""Errors raised while reading MPEG audio metadata."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for every failure of a single parse call."""


class MissingFrameSync(ParseError):
    """No frame sync pattern was found inside the seek window."""


class ReservedFieldValue(ParseError):
    """A frame header uses a reserved or unmapped bit pattern."""


class UnsupportedFeature(ParseError):
    """The stream uses a tag feature this reader rejects (extended header, ID3v2.2 bodies)."""


class UnexpectedEndOfData(ParseError):
    """A read ran past the end of the source or a seek was out of range."""


class UnsupportedEncoding(ParseError):
    """An ID3v2 text encoding byte is not one of 0x00-0x03."""


class MalformedSyncsafeInteger(ParseError):
    """A syncsafe integer byte has its top bit set."""


class RemoteSourceError(Exception):
    """The HTTP server could not provide the requested bytes."""
