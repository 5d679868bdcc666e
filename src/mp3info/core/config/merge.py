"""Merge helpers for configuration dictionaries."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict


logger = logging.getLogger(__name__)


def merge_config(defaults: Dict[str, Any], override: Dict[str, Any], section: str = "") -> Dict[str, Any]:
    """Overlay ``override`` on a copy of ``defaults``.

    A section that is a mapping in ``defaults`` only accepts a mapping; any
    other value for it is ignored so getters keep reading the defaults.
    """
    merged: Dict[str, Any] = copy.deepcopy(defaults)
    for key, value in override.items():
        path = f"{section}.{key}" if section else str(key)
        current = merged.get(key)
        if isinstance(current, dict):
            if isinstance(value, dict):
                merged[key] = merge_config(current, value, path)
            else:
                logger.warning("Ignoring config section %s: expected a mapping, got %r", path, value)
        else:
            merged[key] = value
    return merged
