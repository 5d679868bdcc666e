"""Helpers for file support checks."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

SUPPORTED_AUDIO_EXTENSIONS = {
    ".mp3",
    ".mp2",
    ".mp1",
    ".mpa",
    ".mpga",
}


def is_supported_audio_file(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_AUDIO_EXTENSIONS


def iter_audio_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield files as given and supported audio files found below directories."""
    for path in paths:
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if candidate.is_file() and is_supported_audio_file(candidate):
                    yield candidate
        else:
            yield path
