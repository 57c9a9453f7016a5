"""Exception types raised by the lawmaker generator."""

from __future__ import annotations

from typing import Sequence


class GeneratorError(RuntimeError):
    """Base class for user-facing generator failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidAppName(GeneratorError):
    """Raised when an application name is not lowercase snake case."""


class InvalidModuleName(GeneratorError):
    """Raised when a module name is not a valid dotted alias."""


class ModuleNameTaken(GeneratorError):
    """Raised when the module name is already bound in the target namespace."""


class DirectoryConflict(GeneratorError):
    """Raised when the caller declines to reuse an existing directory."""


class WriteFailure(GeneratorError):
    """Raised when materializing the tree fails part way through.

    Files written before the failure stay on disk; :attr:`files_created` lists
    them so the caller can report what needs cleaning up.
    """

    def __init__(self, message: str, files_created: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.files_created = tuple(files_created)


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a template."""


class MissingVariable(TemplateRenderingError):
    """Raised when a template references a key absent from the context."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing value for '{name}'")
        self.name = name


__all__ = [
    "DirectoryConflict",
    "GeneratorError",
    "InvalidAppName",
    "InvalidModuleName",
    "MissingVariable",
    "ModuleNameTaken",
    "TemplateRenderingError",
    "WriteFailure",
]
