"""Prompt templates for AI enrichment."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from jitcli.ai.provider import AIError, EnrichmentContext


class TemplateError(AIError):
    """Raised when a template cannot be read, parsed or executed."""


_ACTION = re.compile(r"\{\{(?:(-)\s)?\s*(.*?)\s*(?:\s(-))?\}\}", re.S)
_FIELD = re.compile(r"^\.(?:\w+(?:\.\w+)*)?$")
_MISSING = object()


@dataclass
class _Field:
    path: tuple[str, ...]


@dataclass
class _If:
    path: tuple[str, ...]
    then: list = field(default_factory=list)
    otherwise: list = field(default_factory=list)


_Node = Union[str, _Field, _If]


@dataclass
class _Action:
    body: str


def _tokenize(source: str) -> list:
    tokens: list = []
    pos = 0
    trim_next = False
    for match in _ACTION.finditer(source):
        text = source[pos:match.start()]
        if trim_next:
            text = text.lstrip()
        if match.group(1):
            text = text.rstrip()
        if text:
            tokens.append(text)
        tokens.append(_Action(match.group(2)))
        trim_next = bool(match.group(3))
        pos = match.end()
    tail = source[pos:]
    if trim_next:
        tail = tail.lstrip()
    if tail:
        tokens.append(tail)
    return tokens


def _field_path(expr: str) -> tuple[str, ...]:
    if not _FIELD.match(expr):
        raise TemplateError(f"unsupported expression: {expr!r}")
    return tuple(part for part in expr.split(".") if part)


def _parse_block(tokens: list, pos: int) -> tuple[list, str | None, int]:
    nodes: list = []
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1
        if isinstance(token, str):
            nodes.append(token)
            continue
        body = token.body
        if body.startswith("/*") and body.endswith("*/"):
            continue
        if body in ("end", "else"):
            return nodes, body, pos
        if body.startswith("if ") or body.startswith("if\t"):
            node = _If(_field_path(body[2:].strip()))
            node.then, stop, pos = _parse_block(tokens, pos)
            if stop == "else":
                node.otherwise, stop, pos = _parse_block(tokens, pos)
            if stop != "end":
                raise TemplateError("unexpected EOF: missing {{end}}")
            nodes.append(node)
            continue
        nodes.append(_Field(_field_path(body)))
    return nodes, None, pos


def _parse(source: str) -> list:
    nodes, stop, _ = _parse_block(_tokenize(source), 0)
    if stop is not None:
        raise TemplateError(f"unexpected {{{{{stop}}}}}")
    return nodes


def _lookup(data: Any, path: tuple[str, ...]) -> Any:
    value = data
    for name in path:
        if value is _MISSING or value is None:
            raise TemplateError(f"nil pointer evaluating .{name}")
        if isinstance(value, Mapping):
            value = value.get(name, _MISSING)
        elif hasattr(value, name):
            value = getattr(value, name)
        else:
            raise TemplateError(f"can't evaluate field {name}")
    return value


def _format(value: Any) -> str:
    if value is _MISSING:
        return "<no value>"
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _execute(nodes: list, data: Any, out: list[str]) -> None:
    for node in nodes:
        if isinstance(node, str):
            out.append(node)
        elif isinstance(node, _Field):
            out.append(_format(_lookup(data, node.path)))
        else:
            value = _lookup(data, node.path)
            truthy = value is not _MISSING and bool(value)
            _execute(node.then if truthy else node.otherwise, data, out)


class _Template:
    def __init__(self, name: str, source: str) -> None:
        self.name = name
        self._nodes = _parse(source)

    def render(self, data: Any) -> str:
        out: list[str] = []
        _execute(self._nodes, data, out)
        return "".join(out)


def render_template(source: str, data: Any) -> str:
    """Render a template using {{.Field}} and {{if .Field}}...{{else}}...{{end}}."""
    return _Template("inline", source).render(data)


_DEFAULT_TEMPLATES = {
    "enrich_generic.txt": """You are an expert software development assistant. Your task is to enhance the following {{.TicketType}} description for a {{.Project}} project.

Original content:
{{.Content}}

Please enhance this description by:
1. Adding more technical details and context
2. Improving clarity and structure
3. Adding acceptance criteria if missing
4. Including relevant technical considerations
5. Making it more professional and comprehensive

Enhanced description:""",
    "enrich_epic.txt": """You are an expert software development assistant. Your task is to enhance the following EPIC description for a {{.Project}} project.

Original content:
{{.Content}}

Please enhance this EPIC description by:
1. Adding strategic context and business value
2. Defining clear objectives and success metrics
3. Outlining major milestones and deliverables
4. Identifying key stakeholders and dependencies
5. Adding risk considerations and mitigation strategies
6. Making it comprehensive for project planning

Enhanced EPIC description:""",
    "enrich_task.txt": """You are an expert software development assistant. Your task is to enhance the following TASK description for a {{.Project}} project.

Original content:
{{.Content}}

{{if .CurrentEpic}}This task belongs to epic: {{.CurrentEpic}}{{end}}

Please enhance this TASK description by:
1. Adding detailed technical requirements
2. Defining clear acceptance criteria
3. Including implementation considerations
4. Adding testing requirements
5. Specifying dependencies and prerequisites
6. Making it actionable for developers

Enhanced TASK description:""",
    "enrich_subtask.txt": """You are an expert software development assistant. Your task is to enhance the following SUBTASK description for a {{.Project}} project.

Original content:
{{.Content}}

{{if .CurrentTask}}This subtask belongs to task: {{.CurrentTask}}{{end}}
{{if .CurrentEpic}}This is part of epic: {{.CurrentEpic}}{{end}}

Please enhance this SUBTASK description by:
1. Adding specific implementation details
2. Defining precise acceptance criteria
3. Including code-level considerations
4. Adding unit testing requirements
5. Specifying any configuration needed
6. Making it ready for immediate development

Enhanced SUBTASK description:""",
    "enrich_comment.txt": """You are an expert software development assistant. Your task is to enhance the following comment for a {{.TicketType}} in the {{.Project}} project.

Original comment:
{{.Comment}}

{{if .CurrentEpic}}This is for a ticket in epic: {{.CurrentEpic}}{{end}}
{{if .CurrentTask}}This is for a subtask in task: {{.CurrentTask}}{{end}}

Please enhance this comment by:
1. Making it more professional and clear
2. Adding relevant technical context
3. Including actionable insights
4. Maintaining the original intent
5. Making it helpful for other team members

Enhanced comment:""",
}


def _context_data(context: EnrichmentContext) -> dict[str, Any]:
    return {
        "TicketType": context.ticket_type,
        "Project": context.project,
        "CurrentEpic": context.current_epic,
        "CurrentTask": context.current_task,
        "UserEmail": context.user_email,
        "CustomFields": context.custom_fields,
    }


class TemplateManager:
    """Loads, caches and renders prompt templates from a directory."""

    def __init__(self, template_dir) -> None:
        self.template_dir = Path(template_dir)
        self._cache: dict[str, _Template] = {}

    def load_template(self, name: str) -> _Template:
        """Return the parsed template <name>.txt, reading it once."""
        cached = self._cache.get(name)
        if cached is not None:
            return cached
        path = self.template_dir / f"{name}.txt"
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as err:
            raise TemplateError(f"failed to read template {name}: {err}") from err
        try:
            template = _Template(name, source)
        except TemplateError as err:
            raise TemplateError(f"failed to parse template {name}: {err}") from err
        self._cache[name] = template
        return template

    def process_template(self, name: str, data: Any) -> str:
        """Render the named template with data."""
        template = self.load_template(name)
        try:
            return template.render(data)
        except TemplateError as err:
            raise TemplateError(f"failed to execute template {name}: {err}") from err

    def get_enrichment_prompt(self, content: str, context: EnrichmentContext) -> str:
        """Build the prompt for enriching a ticket description."""
        data = {"Content": content, **_context_data(context)}
        name = f"enrich_{context.ticket_type.lower()}"
        try:
            self.load_template(name)
        except TemplateError:
            name = "enrich_generic"
        return self.process_template(name, data)

    def get_comment_prompt(self, comment: str, context: EnrichmentContext) -> str:
        """Build the prompt for enriching a comment."""
        data = {"Comment": comment, **_context_data(context)}
        return self.process_template("enrich_comment", data)

    def create_default_templates(self) -> None:
        """Write the built-in templates, leaving existing files untouched."""
        try:
            self.template_dir.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise TemplateError(f"failed to create template directory: {err}") from err
        for name, content in _DEFAULT_TEMPLATES.items():
            path = self.template_dir / name
            if path.exists():
                continue
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as err:
                raise TemplateError(f"failed to create template {name}: {err}") from err