"""Merge ID3v1 and ID3v2 values into one tag view."""

from __future__ import annotations

from typing import Dict, Optional

from mp3info.core.id3.constants import ID3V1_UNDEFINED_GENRE
from mp3info.core.models import Id3v1Tag, Id3v2Tag

UNIFIED_TAG_FRAMES = {
    "song": "TIT2",
    "artist": "TPE1",
    "album": "TALB",
    "year": "TYER",
    "comment": "COMM",
    "track": "TRCK",
    "genre": "TCON",
}

# ID3v2.4 replaced TYER with the recording time frame
_FALLBACK_FRAMES = {"TYER": "TDRC"}


def _v2_value(tag: Id3v2Tag, frame_id: str) -> Optional[str]:
    value = tag.frames.get(frame_id)
    if value is None and frame_id in _FALLBACK_FRAMES:
        value = tag.frames.get(_FALLBACK_FRAMES[frame_id])
    if value is None:
        return None
    if isinstance(value, dict):
        # first inserted language wins
        first = next(iter(value.values()), None)
        return first.actual if first is not None else None
    if isinstance(value, list):
        return value[0] if value else None
    return str(value)


def _v1_value(tag: Id3v1Tag, key: str) -> Optional[str]:
    if key == "track":
        return str(tag.track) if tag.track is not None else None
    if key == "genre":
        return str(tag.genre) if tag.genre != ID3V1_UNDEFINED_GENRE else None
    return getattr(tag, key)


def unify_tags(id3v1: Optional[Id3v1Tag], id3v2: Optional[Id3v2Tag]) -> Dict[str, str]:
    """Return the canonical tag mapping, preferring ID3v2 values."""
    unified: Dict[str, str] = {}
    for key, frame_id in UNIFIED_TAG_FRAMES.items():
        candidates = (
            _v2_value(id3v2, frame_id) if id3v2 is not None else None,
            _v1_value(id3v1, key) if id3v1 is not None else None,
        )
        for value in candidates:
            if value:
                unified[key] = value
                break
    return unified
