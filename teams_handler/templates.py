"""Description templates.

Templates use Sensu's field-reference syntax: ``{{ .Check.Output }}``,
``{{ .Entity.Name }}``, ``{{ .Check.Labels.team }}``. Lowercase model
paths such as ``{{ check.output }}`` work as well. Segments match model
fields case-insensitively, ignoring underscores, and ``Name``-style
segments fall through to the object's metadata.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel

from teams_handler.errors import TemplateEvaluationError
from teams_handler.models.event import Event

logger = logging.getLogger(__name__)

_ACTION_RE = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_PATH_RE = re.compile(r"^\.?[A-Za-z_][\w-]*(?:\.[A-Za-z_0-9][\w-]*)*$")


class Renderer(Protocol):
    def render(self, template: str, event: Event) -> str:
        """Render ``template`` against ``event``.

        Raises TemplateEvaluationError if the template cannot be evaluated.
        """
        ...


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


def _lookup(value: Any, segment: str, path: str) -> Any:
    if isinstance(value, Mapping):
        if segment in value:
            return value[segment]
        for key, item in value.items():
            if _normalize(str(key)) == _normalize(segment):
                return item
        return None

    if isinstance(value, BaseModel):
        wanted = _normalize(segment)
        for field_name in type(value).model_fields:
            if _normalize(field_name) == wanted:
                return getattr(value, field_name)
        metadata = getattr(value, "metadata", None)
        if isinstance(metadata, BaseModel):
            return _lookup(metadata, segment, path)

    raise TemplateEvaluationError(
        f"can't evaluate field {segment} in {path!r} on {type(value).__name__}"
    )


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    return str(value)


class FieldTemplateRenderer:
    """Substitutes ``{{ path }}`` actions with event field values."""

    def resolve(self, path: str, event: Event) -> Any:
        if not _PATH_RE.match(path):
            raise TemplateEvaluationError(f"unsupported template action {{{{ {path} }}}}")
        value: Any = event
        for segment in path.lstrip(".").split("."):
            value = _lookup(value, segment, path)
        return value

    def render(self, template: str, event: Event) -> str:
        parts: list[str] = []
        position = 0
        for match in _ACTION_RE.finditer(template):
            parts.append(template[position:match.start()])
            path = match.group(1).strip()
            if path == ".":
                parts.append(event.model_dump_json())
            else:
                parts.append(_to_text(self.resolve(path, event)))
            position = match.end()

        rest = template[position:]
        if "{{" in rest:
            raise TemplateEvaluationError("unclosed action in template")
        parts.append(rest)
        return "".join(parts)


default_renderer = FieldTemplateRenderer()


def render_description(template: str, event: Event, renderer: Renderer | None = None) -> str:
    """Render the card description.

    Evaluation errors are logged and produce an empty description. Literal
    ``\\n`` sequences in the result are turned into newlines.
    """
    renderer = renderer or default_renderer
    try:
        description = renderer.render(template, event)
    except TemplateEvaluationError as e:
        logger.error(f"Error processing template: {e}")
        description = ""
    return description.replace("\\n", "\n")
