"""Command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from mp3info.core.config import LOG_LEVELS, SettingsManager
from mp3info.core.env import log_level_override
from mp3info.core.errors import ParseError, RemoteSourceError
from mp3info.core.info import Mp3Info
from mp3info.core.report import format_result, result_to_dict
from mp3info.core.sources import is_remote_location
from mp3info.core.support import iter_audio_files


logger = logging.getLogger(__name__)

_MIME_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/bmp": ".bmp",
    "image/webp": ".webp",
}


def _configure_logging(level_override: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    level_name = (log_level_override() or level_override or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    handlers: List[logging.Handler] = []
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            print(f"Cannot write log file {log_file}: {exc}", file=sys.stderr)
        else:
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
    logging.basicConfig(level=level, handlers=handlers, force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mp3info",
        description="Show stream parameters and ID3 tags of MPEG audio files.",
    )
    parser.add_argument("locations", nargs="+", help="files, directories or http(s) URLs")
    parser.add_argument("--tags", action="store_true", help="decode ID3v1/ID3v2 tags")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument("--check", action="store_true", help="only run the quick validity check")
    parser.add_argument("--cover-dir", type=Path, help="write attached pictures into this directory")
    parser.add_argument("--config", type=Path, help="path to settings.yaml")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="logging level")
    parser.add_argument("--log-file", type=Path, help="also write log messages to this file")
    return parser


def _expand_locations(locations: Sequence[str]) -> List[str]:
    local = [Path(location) for location in locations if not is_remote_location(location)]
    expanded = [str(path) for path in iter_audio_files(local)]
    expanded.extend(location for location in locations if is_remote_location(location))
    return expanded


def _cover_name(location: str, mime_type: str) -> str:
    stem = Path(location.rstrip("/").rsplit("/", 1)[-1]).stem or "cover"
    return stem + _MIME_EXTENSIONS.get(mime_type.lower(), ".bin")


def _write_cover(info: Mp3Info, location: str, cover_dir: Path) -> Optional[Path]:
    data = info.get_cover()
    if data is None or info.result.cover is None:
        return None
    cover_dir.mkdir(parents=True, exist_ok=True)
    target = cover_dir / _cover_name(location, info.result.cover.mime_type)
    target.write_bytes(data)
    logger.info("Wrote cover of %s to %s", location, target)
    return target


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = SettingsManager(config_path=args.config) if args.config else SettingsManager()
    _configure_logging(args.log_level or settings.get_diagnostics_log_level(), args.log_file)

    failures = 0
    documents = []
    for location in _expand_locations(args.locations):
        try:
            if args.check:
                valid = Mp3Info.is_valid_audio(location, settings)
                documents.append({"location": location, "valid": valid})
                if not args.json:
                    print(f"{location}: {'valid' if valid else 'not MPEG audio'}")
                failures += 0 if valid else 1
                continue

            with Mp3Info(location, parse_tags=args.tags or args.cover_dir is not None, settings=settings) as info:
                document = {"location": location, **result_to_dict(info.result)}
                if args.cover_dir is not None:
                    target = _write_cover(info, location, args.cover_dir)
                    document["cover_file"] = str(target) if target else None
            documents.append(document)
            if not args.json:
                print(location)
                for line in format_result(info.result):
                    print(f"  {line}")
        except (ParseError, RemoteSourceError, OSError) as exc:
            failures += 1
            logger.debug("Failed to read %s", location, exc_info=True)
            print(f"{location}: {exc.__class__.__name__}: {exc}", file=sys.stderr)
            documents.append({"location": location, "error": f"{exc.__class__.__name__}: {exc}"})

    if args.json:
        json.dump(documents, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    return 1 if failures else 0


def main() -> None:
    sys.exit(run())
