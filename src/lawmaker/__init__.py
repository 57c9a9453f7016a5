"""Generate Elixir Mix projects that come with a strict quality toolchain.

The package validates and derives application and module names, renders a
small set of built-in templates, and writes either a standalone project or an
umbrella root. It can also link a project's pre-commit script into git. The
same pipeline is available programmatically and via the command line
interface.
"""

from __future__ import annotations

from .config import GenerationResult, GeneratorOptions, ProjectSpec
from .errors import (
    DirectoryConflict,
    GeneratorError,
    InvalidAppName,
    InvalidModuleName,
    MissingVariable,
    ModuleNameTaken,
    TemplateRenderingError,
    WriteFailure,
)
from .generator import ProjectGenerator, success_message
from .hooks import HookInstallError, install_pre_commit_hook
from .materialize import Materializer
from .naming import derive_app_name, derive_module_name
from .plan import ActionKind, FileAction, plan
from .template import TemplateRenderer
from .templates import TemplateId
from .validation import check_module_available, validate_app_name, validate_module_name

__all__ = [
    "ActionKind",
    "DirectoryConflict",
    "FileAction",
    "GenerationResult",
    "GeneratorError",
    "GeneratorOptions",
    "HookInstallError",
    "InvalidAppName",
    "InvalidModuleName",
    "Materializer",
    "MissingVariable",
    "ModuleNameTaken",
    "ProjectGenerator",
    "ProjectSpec",
    "TemplateId",
    "TemplateRenderer",
    "TemplateRenderingError",
    "WriteFailure",
    "check_module_available",
    "derive_app_name",
    "derive_module_name",
    "install_pre_commit_hook",
    "plan",
    "success_message",
    "validate_app_name",
    "validate_module_name",
]

__version__ = "0.1.0"
