"""Decide which directories and files make up a generated project."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .config import ProjectSpec
from .template import TemplateRenderer
from .templates import TemplateId

__all__ = ["ActionKind", "FileAction", "plan"]


class ActionKind(str, Enum):
    CREATE_DIR = "create_dir"
    CREATE_FILE = "create_file"


@dataclass(frozen=True, slots=True)
class FileAction:
    """A single step of the materialization plan."""

    relative_path: str
    kind: ActionKind
    template: TemplateId | None = None
    rendered_content: str | None = None


def _umbrella_layout() -> list[tuple[str, TemplateId | None]]:
    return [
        (".gitignore", TemplateId.GITIGNORE),
        ("README.md", TemplateId.README),
        ("mix.exs", TemplateId.MIXFILE_UMBRELLA),
        (".credo.exs", TemplateId.CREDO),
        (".coverex_ignore.exs", TemplateId.COVEREX_IGNORE),
        (".dialyzer_ignore", TemplateId.DIALYZER_IGNORE),
        ("apps", None),
        ("config", None),
        ("config/config.exs", TemplateId.CONFIG_UMBRELLA),
    ]


def _project_layout(spec: ProjectSpec, nested: bool) -> list[tuple[str, TemplateId | None]]:
    app = spec.app_name
    layout: list[tuple[str, TemplateId | None]] = [
        ("README.md", TemplateId.README),
        (".gitignore", TemplateId.GITIGNORE),
    ]

    if nested:
        # Lint, coverage and dialyzer settings live at the umbrella root.
        layout.append(("mix.exs", TemplateId.MIXFILE_APPS))
    else:
        layout.extend(
            [
                ("mix.exs", TemplateId.MIXFILE),
                (".credo.exs", TemplateId.CREDO),
                (".coverex_ignore.exs", TemplateId.COVEREX_IGNORE),
                (".dialyzer_ignore", TemplateId.DIALYZER_IGNORE),
            ]
        )

    layout.extend(
        [
            ("config", None),
            ("config/config.exs", TemplateId.CONFIG),
            ("lib", None),
            (f"lib/{app}.ex", TemplateId.LIB),
        ]
    )

    if spec.supervised:
        layout.extend(
            [
                (f"lib/{app}", None),
                (f"lib/{app}/application.ex", TemplateId.LIB_APP),
            ]
        )

    layout.extend(
        [
            ("test", None),
            ("test/test_helper.exs", TemplateId.TEST_HELPER),
            (f"test/{app}_test.exs", TemplateId.TEST),
        ]
    )
    return layout


def plan(
    spec: ProjectSpec,
    context: Mapping[str, Any],
    *,
    nested: bool = False,
    renderer: TemplateRenderer | None = None,
) -> list[FileAction]:
    """Return the ordered actions needed to generate ``spec``.

    ``nested`` tells the planner that the project is being created inside the
    ``apps/`` directory of an umbrella project; it is ignored for umbrella
    roots. Directories always come before the files they contain.
    """

    renderer = renderer or TemplateRenderer()
    layout = _umbrella_layout() if spec.umbrella else _project_layout(spec, nested)

    actions: list[FileAction] = []
    for relative_path, template_id in layout:
        if template_id is None:
            actions.append(FileAction(relative_path, ActionKind.CREATE_DIR))
            continue
        actions.append(
            FileAction(
                relative_path,
                ActionKind.CREATE_FILE,
                template=template_id,
                rendered_content=renderer.render(template_id, context),
            )
        )
    return actions
