"""Checks applied to application and module names before generation."""

from __future__ import annotations

import re
from typing import Callable

from .errors import InvalidAppName, InvalidModuleName, ModuleNameTaken

__all__ = [
    "APP_NAME_PATTERN",
    "MODULE_NAME_PATTERN",
    "NamespaceLookup",
    "check_module_available",
    "validate_app_name",
    "validate_module_name",
]


NamespaceLookup = Callable[[str], bool]

APP_NAME_PATTERN = re.compile(r"[a-z][a-z0-9_]*")
MODULE_NAME_PATTERN = re.compile(r"[A-Z][A-Za-z0-9_]*(?:\.[A-Z][A-Za-z0-9_]*)*")


def validate_app_name(name: str, was_inferred: bool) -> None:
    """Raise :class:`InvalidAppName` unless ``name`` is lowercase snake case."""

    if APP_NAME_PATTERN.fullmatch(name):
        return

    message = (
        "Application name must start with a letter and have only lowercase "
        f"letters, numbers and underscore, got: {name!r}"
    )
    if was_inferred:
        message += (
            ". The application name is inferred from the path, if you'd like to "
            'explicitly name the application then use the "--app APP" option'
        )
    raise InvalidAppName(message)


def validate_module_name(name: str) -> None:
    """Raise :class:`InvalidModuleName` unless ``name`` is a dotted alias."""

    if not MODULE_NAME_PATTERN.fullmatch(name):
        raise InvalidModuleName(
            f"Module name must be a valid Elixir alias (for example: Foo.Bar), got: {name!r}"
        )


def check_module_available(name: str, namespace_lookup: NamespaceLookup) -> None:
    """Raise :class:`ModuleNameTaken` when ``namespace_lookup`` knows ``name``."""

    if namespace_lookup(name):
        raise ModuleNameTaken(
            f"Module name {name} is already taken, please choose another name"
        )
