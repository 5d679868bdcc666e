"""Plain-data and text renderings of a ParseResult."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Dict, List

from mp3info.core.models import ParseResult


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: _plain(getattr(value, field.name)) for field in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def result_to_dict(result: ParseResult) -> Dict[str, Any]:
    data = _plain(result)
    data["is_vbr"] = result.is_vbr
    return data


def _format_duration(seconds: float) -> str:
    minutes, secs = divmod(seconds, 60.0)
    hours, minutes = divmod(int(minutes), 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:06.3f}"
    return f"{minutes}:{secs:06.3f}"


def format_result(result: ParseResult) -> List[str]:
    stream = result.stream
    lines = [
        f"duration:    {_format_duration(result.duration)} ({result.duration:.3f} s, {result.frame_count} frames)",
        f"bit rate:    {result.bit_rate_bps // 1000} kbps{' (VBR average)' if result.is_vbr else ''}",
        f"sample rate: {stream.sample_rate_hz} Hz",
        f"channels:    {stream.channel_mode.value}",
        f"codec:       {stream.codec_version.value} layer {stream.layer}",
        f"audio size:  {result.audio_size_bytes} bytes",
    ]
    if result.id3v2 is not None:
        lines.append(f"id3v2:       2.{result.id3v2.version}.{result.id3v2.revision} ({result.id3v2_size} bytes)")
    if result.id3v1 is not None:
        lines.append(f"id3v1:       {'1.1' if result.id3v1.track is not None else '1.0'}")
    for key, value in result.unified_tags.items():
        lines.append(f"{key + ':':<12} {value}")
    if result.cover is not None:
        lines.append(f"cover:       {result.cover.mime_type}, {result.cover.size} bytes")
    return lines
