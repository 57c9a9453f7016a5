"""Records passed between the stages of the generator."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .toolchain import ToolVersion

__all__ = ["GenerationResult", "GeneratorOptions", "ProjectSpec", "supervisor_fragment"]


class GeneratorOptions(BaseModel):
    """Parsed options for a single ``new`` invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., min_length=1, description="Target directory, as typed by the user.")
    app: str | None = Field(None, description="Explicit application name.")
    module: str | None = Field(None, description="Explicit module name.")
    sup: bool = Field(False, description="Generate a supervision tree skeleton.")
    umbrella: bool = Field(False, description="Generate an umbrella project.")


class GenerationResult(BaseModel):
    """Outcome of materializing a project tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    files_created: List[str] = Field(default_factory=list, description="Relative paths of written files, in order.")
    warnings: List[str] = Field(default_factory=list, description="Non-fatal issues noticed during generation.")
    test_command: str = Field("mix test", description="Command to run the generated test-suite.")


def supervisor_fragment(module_name: str, supervised: bool) -> str:
    """Return the ``mod:`` entry registering the application callback."""

    if not supervised:
        return ""
    return f",\n      mod: {{{module_name}.Application, []}}"


@dataclass(frozen=True, slots=True)
class ProjectSpec:
    """Validated names and flags describing the project to generate.

    Attributes
    ----------
    path:
        The target directory exactly as supplied by the caller.
    app_name:
        Lowercase snake case OTP application name. Every app specific file
        path is derived from it.
    module_name:
        Dotted CamelCase alias used inside the generated sources.
    supervised:
        Whether an application callback with a supervision tree is generated.
    umbrella:
        Whether an umbrella root is generated instead of a single project.
    """

    path: str
    app_name: str
    module_name: str
    supervised: bool = False
    umbrella: bool = False

    def context(self, version: ToolVersion) -> Mapping[str, Any]:
        """Return the read-only render context for this project."""

        return MappingProxyType(
            {
                "app": self.app_name,
                "mod": self.module_name,
                "has_app": not self.umbrella,
                "sup_app": supervisor_fragment(self.module_name, self.supervised),
                "version": version.requirement,
            }
        )
