"""Shared fixtures for agentgraph tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


def agent_markdown(
    name: str,
    description: str = "Test agent",
    version: str | None = None,
    dependencies: list[str] | None = None,
    body: str = "Agent instructions.\n",
) -> str:
    """Build the text of an agent definition file."""
    lines = ["---", f"name: {name}", f"description: {description}"]
    if version is not None:
        lines.append(f"version: {version!r}")
    if dependencies:
        lines.append("dependencies:")
        lines.extend(f"  - {dep}" for dep in dependencies)
    lines.append("---")
    return "\n".join(lines) + "\n\n" + body


@pytest.fixture
def write_agent() -> Callable[..., Path]:
    """Return a helper that writes an agent file into a directory."""

    def _write(
        directory: Path,
        name: str,
        version: str | None = None,
        dependencies: list[str] | None = None,
        filename: str | None = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / (filename or f"{name}.md")
        path.write_text(
            agent_markdown(name, version=version, dependencies=dependencies),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def agents_dir(tmp_path: Path) -> Path:
    """Return the project-level agent directory (not yet created)."""
    return tmp_path / ".adk" / "agents"
