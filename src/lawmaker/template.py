"""Lightweight string templating used to render the project files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import MissingVariable, TemplateRenderingError
from .templates import TEMPLATES, TemplateId

__all__ = [
    "MissingVariable",
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

# A conditional whose tags each sit alone on a line. The tag lines are removed
# together with their line breaks.
_STANDALONE_BLOCK_PATTERN = re.compile(
    r"^[ \t]*{%\s*if\s+(?P<flag>\w+)\s*%}[ \t]*\n"
    r"(?P<body>.*?)"
    r"^[ \t]*{%\s*endif\s*%}[ \t]*(?:\n|\Z)",
    re.MULTILINE | re.DOTALL,
)
_INLINE_BLOCK_PATTERN = re.compile(
    r"{%\s*if\s+(?P<flag>\w+)\s*%}(?P<body>.*?){%\s*endif\s*%}",
    re.DOTALL,
)
_STRAY_TAG_PATTERN = re.compile(r"{%.*?%}", re.DOTALL)


def _lookup(context: Mapping[str, Any], name: str) -> Any:
    try:
        return context[name]
    except KeyError as exc:
        raise MissingVariable(name) from exc


@dataclass(slots=True)
class TemplateRenderer:
    """Render ``{{ name }}`` placeholders and ``{% if flag %}`` blocks.

    Templates are looked up by :class:`~lawmaker.templates.TemplateId` in
    ``templates``, which defaults to the bodies shipped with the package.
    Rendering is pure: the same template and context always give the same
    text.
    """

    templates: Mapping[TemplateId, str] = field(default_factory=lambda: TEMPLATES)

    def render(self, template_id: TemplateId, context: Mapping[str, Any]) -> str:
        """Render the template registered under ``template_id``."""

        try:
            body = self.templates[template_id]
        except KeyError as exc:
            raise TemplateRenderingError(f"unknown template '{template_id}'") from exc
        return self.render_string(body, context)

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Conditional blocks are resolved first, so placeholders inside a block
        that is dropped do not need a value. Any placeholder or flag missing
        from ``context`` raises :class:`MissingVariable`. The result always
        ends with a single newline.
        """

        def resolve_block(match: re.Match[str]) -> str:
            if _lookup(context, match.group("flag")):
                return match.group("body")
            return ""

        text = _STANDALONE_BLOCK_PATTERN.sub(resolve_block, template)
        text = _INLINE_BLOCK_PATTERN.sub(resolve_block, text)

        stray = _STRAY_TAG_PATTERN.search(text)
        if stray is not None:
            raise TemplateRenderingError(f"unbalanced template tag {stray.group(0)!r}")

        def substitute(match: re.Match[str]) -> str:
            return str(_lookup(context, match.group("expression")))

        rendered = _PLACEHOLDER_PATTERN.sub(substitute, text)
        return rendered.rstrip("\n") + "\n"
