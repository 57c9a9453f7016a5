"""Derive default application and module names from a target path."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["derive_app_name", "derive_module_name"]


def derive_app_name(path: str | os.PathLike[str]) -> str:
    """Return the last segment of ``path`` once ``.`` and ``..`` are resolved.

    The segment is returned verbatim. It may still contain characters that are
    not allowed in an application name, so callers must validate it.
    """

    expanded = os.path.abspath(os.path.expanduser(os.fspath(path)))
    return Path(expanded).name


def derive_module_name(app_name: str) -> str:
    """Convert a snake_case application name into a CamelCase module name.

    >>> derive_module_name("hello_world")
    'HelloWorld'
    """

    return "".join(_capitalize_ascii(segment) for segment in app_name.split("_"))


def _capitalize_ascii(segment: str) -> str:
    if not segment:
        return ""
    head = segment[0]
    if "a" <= head <= "z":
        head = chr(ord(head) - 32)
    return head + segment[1:]
