"""Convenience wrapper that owns the byte source of one parse."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from mp3info.core.config import SettingsManager
from mp3info.core.models import ParseResult
from mp3info.core.parser import get_cover, parse
from mp3info.core.probe import is_valid_audio
from mp3info.core.sources import ByteSource, open_source


logger = logging.getLogger(__name__)


class Mp3Info:
    """Parse ``location`` (a path or an http(s) URL) on construction.

    The source stays open so the cover can be fetched later; use the object
    as a context manager or call ``close``.
    """

    def __init__(
        self,
        location: Path | str,
        parse_tags: bool = False,
        *,
        settings: Optional[SettingsManager] = None,
    ) -> None:
        self.location = location
        self._source: ByteSource = open_source(location, settings)
        started = time.perf_counter()
        try:
            if settings is None:
                self.result: ParseResult = parse(self._source, parse_tags)
            else:
                self.result = parse(
                    self._source,
                    parse_tags,
                    seek_limit=settings.get_header_seek_limit(),
                    frames_to_read=settings.get_frames_to_read(),
                )
        except Exception:
            self._source.close()
            raise
        self.parsing_time = time.perf_counter() - started
        logger.debug("Parsed %s in %.4f s", location, self.parsing_time)

    @property
    def source(self) -> ByteSource:
        return self._source

    def get_cover(self) -> Optional[bytes]:
        return get_cover(self.result, self._source)

    def close(self) -> None:
        self._source.close()

    def __enter__(self) -> "Mp3Info":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def is_valid_audio(location: Path | str, settings: Optional[SettingsManager] = None) -> bool:
        with open_source(location, settings) as source:
            return is_valid_audio(source)
