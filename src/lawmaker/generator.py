"""Compose validation, planning and materialization into one command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .config import GenerationResult, GeneratorOptions, ProjectSpec
from .materialize import ConfirmOverwrite, Materializer
from .naming import derive_app_name, derive_module_name
from .namespace import ElixirNamespace
from .plan import plan
from .template import TemplateRenderer
from .toolchain import ToolVersion, detect_elixir_version
from .umbrella import is_nested_in_umbrella
from .validation import (
    NamespaceLookup,
    check_module_available,
    validate_app_name,
    validate_module_name,
)

__all__ = ["ProjectGenerator", "success_message"]


LOGGER = logging.getLogger(__name__)

VersionSource = Callable[[], tuple[ToolVersion, list[str]]]


def _decline(prompt: str) -> bool:
    return False


def _cd_prefix(path: str) -> str:
    if path == ".":
        return ""
    return f"cd {path}\n    "


def success_message(spec: ProjectSpec, result: GenerationResult) -> str:
    """Return the message shown once the project has been generated."""

    if spec.umbrella:
        return (
            "Your umbrella project was created successfully.\n"
            "Inside your project, you will find an apps/ directory\n"
            "where you can create and host many apps:\n"
            "\n"
            f"    {_cd_prefix(spec.path)}cd apps\n"
            "    mix new my_app\n"
            "\n"
            'Commands like "mix compile" and "mix test" when executed\n'
            "in the umbrella project root will automatically run\n"
            "for each application in the apps/ directory."
        )
    return (
        "Your Mix project was created successfully.\n"
        'You can use "mix" to compile it, test it, and more:\n'
        "\n"
        f"    {_cd_prefix(spec.path)}{result.test_command}\n"
        "\n"
        'Run "mix help" for more commands.'
    )


class ProjectGenerator:
    """Create Mix projects from :class:`~lawmaker.config.GeneratorOptions`.

    Every external collaborator is injectable so the pipeline can run against
    fakes: the module namespace lookup, the overwrite confirmation, umbrella
    detection and the toolchain version source.
    """

    def __init__(
        self,
        *,
        namespace_lookup: NamespaceLookup | None = None,
        confirm: ConfirmOverwrite | None = None,
        nested_in_umbrella: Callable[[Path], bool] | None = None,
        version_source: VersionSource | None = None,
        renderer: TemplateRenderer | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.namespace_lookup = namespace_lookup or ElixirNamespace()
        self.confirm = confirm or _decline
        self.nested_in_umbrella = nested_in_umbrella or is_nested_in_umbrella
        self.version_source = version_source or detect_elixir_version
        self.renderer = renderer or TemplateRenderer()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def _target(self, path: str) -> Path:
        return self.cwd / Path(path).expanduser()

    def resolve(self, options: GeneratorOptions) -> ProjectSpec:
        """Derive missing names and validate them, in that order."""

        app_name = options.app or derive_app_name(self._target(options.path))
        validate_app_name(app_name, was_inferred=not options.app)

        module_name = options.module or derive_module_name(app_name)
        validate_module_name(module_name)
        check_module_available(module_name, self.namespace_lookup)

        return ProjectSpec(
            path=options.path,
            app_name=app_name,
            module_name=module_name,
            supervised=options.sup,
            umbrella=options.umbrella,
        )

    def generate(self, options: GeneratorOptions) -> tuple[ProjectSpec, GenerationResult]:
        """Validate ``options`` and write the project tree."""

        spec = self.resolve(options)
        target = self._target(spec.path)

        version, version_warnings = self.version_source()
        context = spec.context(version)
        nested = not spec.umbrella and self.nested_in_umbrella(target)
        if nested:
            LOGGER.debug("%s is inside an umbrella apps directory", target)

        actions = plan(spec, context, nested=nested, renderer=self.renderer)
        materializer = Materializer(target, cwd=self.cwd)
        result = materializer.materialize(actions, self.confirm)

        if version_warnings:
            result = result.model_copy(
                update={"warnings": [*version_warnings, *result.warnings]}
            )
        return spec, result
