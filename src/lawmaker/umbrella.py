"""Detect whether a target directory sits inside an umbrella's apps folder."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

__all__ = ["is_nested_in_umbrella"]


LOGGER = logging.getLogger(__name__)

_APPS_PATH_PATTERN = re.compile(r"apps_path:\s*\"(?P<path>[^\"]+)\"")


def is_nested_in_umbrella(target: str | Path) -> bool:
    """Return ``True`` when ``target`` lives in the apps directory of an umbrella.

    The manifest two levels above ``target`` is inspected for an
    ``apps_path`` setting that points at ``target``'s parent. Any problem
    reading or parsing it answers ``False``.
    """

    target_path = Path(os.path.abspath(os.path.expanduser(os.fspath(target))))
    apps_dir = target_path.parent
    manifest = apps_dir.parent / "mix.exs"

    try:
        source = manifest.read_text(encoding="utf-8")
        match = _APPS_PATH_PATTERN.search(source)
        if match is None:
            return False
        configured = (manifest.parent / match.group("path")).resolve()
        return configured == apps_dir.resolve()
    except (OSError, ValueError):
        LOGGER.debug("umbrella detection failed for %s", target_path, exc_info=True)
        return False
