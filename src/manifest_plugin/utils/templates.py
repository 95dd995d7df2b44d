"""Component template rendering."""

import logging
import re
from typing import Any, Dict, List

import jinja2
from jinja2 import Environment, StrictUndefined

from manifest_plugin.errors import TemplateError
from manifest_plugin.models.manifest import ComponentRenderContext


logger = logging.getLogger(__name__)

_ACTION_RE = re.compile(r"\{\{\s*(.*?)\s*\}\}", re.DOTALL)
_FIELD_RE = re.compile(r"^\.?([A-Za-z_][A-Za-z0-9_]*)$")
_IF_RE = re.compile(r"^if\s+(.+)$")

FIELDS = frozenset(ComponentRenderContext.model_fields)


def _literal(text: str) -> str:
    """Emit literal text so Jinja2 copies it unchanged."""
    if not text:
        return ""
    if "{" in text:
        return "{% raw %}" + text + "{% endraw %}"
    return text


def _field(expr: str, source: str) -> str:
    match = _FIELD_RE.match(expr)
    if not match:
        raise TemplateError(f"unsupported template field '{expr}' in {source!r}")
    name = match.group(1)
    if name not in FIELDS:
        raise TemplateError(f"unknown template field '{name}' in {source!r}")
    return name


def translate(source: str) -> str:
    """Translate ``{{Field}}``/``{{if Field}}``/``{{end}}`` syntax to Jinja2."""
    out: List[str] = []
    depth = 0
    pos = 0

    for match in _ACTION_RE.finditer(source):
        literal = source[pos:match.start()]
        if "{{" in literal:
            raise TemplateError(f"unterminated action in template {source!r}")
        out.append(_literal(literal))
        pos = match.end()

        action = match.group(1)
        if_match = _IF_RE.match(action)
        if if_match:
            out.append("{% if " + _field(if_match.group(1), source) + " %}")
            depth += 1
        elif action == "else":
            if depth == 0:
                raise TemplateError(f"unexpected {{{{else}}}} in template {source!r}")
            out.append("{% else %}")
        elif action == "end":
            if depth == 0:
                raise TemplateError(f"unexpected {{{{end}}}} in template {source!r}")
            out.append("{% endif %}")
            depth -= 1
        else:
            out.append("{{ " + _field(action, source) + " }}")

    rest = source[pos:]
    if "{{" in rest:
        raise TemplateError(f"unterminated action in template {source!r}")
    out.append(_literal(rest))

    if depth != 0:
        raise TemplateError(f"unclosed {{{{if}}}} in template {source!r}")

    return "".join(out)


class ComponentTemplate:
    """A parsed component naming template, reusable across renders."""

    def __init__(self, source: str, template: jinja2.Template):
        self.source = source
        self._template = template

    @classmethod
    def parse(cls, source: str) -> "ComponentTemplate":
        """Parse template source, raising TemplateError on bad syntax."""
        env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        env.globals.clear()
        try:
            template = env.from_string(translate(source))
        except jinja2.TemplateError as e:
            logger.error(f"Template parsing error: {e}")
            raise TemplateError(f"invalid component template {source!r}: {e}") from e
        return cls(source, template)

    def render(self, context: Dict[str, Any]) -> str:
        """Render the template with the given fields."""
        try:
            return self._template.render(**context)
        except jinja2.TemplateError as e:
            logger.error(f"Template rendering error: {e}")
            raise TemplateError(f"failed to render component template {self.source!r}: {e}") from e
