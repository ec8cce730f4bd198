"""Parser for agent definition files (Markdown with YAML frontmatter).

An agent file starts with a ``---`` line, followed by YAML frontmatter, a
closing ``---`` line and the Markdown body::

    ---
    name: reviewer
    description: Reviews pull requests
    version: 1.2.0
    dependencies:
      - linter
      - test-runner
    ---

    Review instructions...

``name`` and ``description`` are required. ``version`` keeps the text as
written, so an unquoted ``1.10`` stays ``"1.10"``; it is never validated.
``dependencies`` may be a list of names or a single name.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from agentgraph.discovery.models import AgentRecord
from agentgraph.exceptions import ParseError

# Match YAML frontmatter: ---\n...\n---
_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.DOTALL | re.MULTILINE
)


def split_frontmatter(text: str) -> tuple[str, str]:
    """Split file content into (frontmatter, body).

    Raises:
        ParseError: If the content does not open with a terminated
            frontmatter block.
    """
    match = _FRONTMATTER_PATTERN.match(text)
    if not match:
        raise ParseError("no YAML frontmatter found")
    return match.group(1), text[match.end():]


def _as_name_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return [v.strip() for v in value if v.strip()]
    raise ParseError(f"field {field_name!r} must be a list of strings")


def _raw_scalar(raw_yaml: str, key: str) -> str | None:
    """Return the source text of a top-level scalar, before YAML typing."""
    root = yaml.compose(raw_yaml, Loader=yaml.SafeLoader)
    if not isinstance(root, yaml.MappingNode):
        return None
    for key_node, value_node in root.value:
        if key_node.value == key and isinstance(value_node, yaml.ScalarNode):
            return value_node.value
    return None


def parse_agent_text(text: str, source_path: Path | None = None) -> AgentRecord:
    """Parse agent definition content.

    Args:
        text: Full file content.
        source_path: Where the content came from, recorded on the result.

    Returns:
        The parsed ``AgentRecord``.

    Raises:
        ParseError: On missing frontmatter, invalid YAML or missing
            required fields.
    """
    raw_yaml, body = split_frontmatter(text)
    try:
        data = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML syntax: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError("frontmatter must be a mapping")

    name = str(data.get("name") or "").strip()
    if not name:
        raise ParseError("missing required field: name")
    description = str(data.get("description") or "").strip()
    if not description:
        raise ParseError("missing required field: description")

    version = data.get("version")
    if version is not None and not isinstance(version, str):
        # Floats and ints lose their spelling (1.10 loads as 1.1).
        raw = _raw_scalar(raw_yaml, "version")
        version = raw if raw is not None else version
    return AgentRecord(
        name=name,
        description=description,
        version="" if version is None else str(version),
        dependencies=_as_name_list(data.get("dependencies"), "dependencies"),
        author=str(data.get("author") or ""),
        tags=_as_name_list(data.get("tags"), "tags"),
        source_path=source_path,
        content=body.lstrip("\n"),
    )


def parse_agent_file(path: Path) -> AgentRecord:
    """Read and parse a single agent definition file.

    Raises:
        ParseError: If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"cannot read file: {exc}") from exc
    return parse_agent_text(text, source_path=path)
