"""Shared fixtures for CLI tests.

Each project fixture creates a temporary project with agent files under
``.adk/agents``. The runner limits discovery to the project source so the
user-level agent directory of the machine running the tests is never read.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner restricted to project-level discovery."""
    return CliRunner(env={"ADK_AGENT_SEARCH_ORDER": "project"})


@pytest.fixture
def chain_project(
    tmp_path: Path, agents_dir: Path, write_agent: Callable[..., Path]
) -> Path:
    """Create a project with a -> b -> c, c versioned, plus isolated d."""
    write_agent(agents_dir, "a", dependencies=["b"])
    write_agent(agents_dir, "b", dependencies=["c"])
    write_agent(agents_dir, "c", version="1.0")
    write_agent(agents_dir, "d")
    return tmp_path


@pytest.fixture
def cyclic_project(
    tmp_path: Path, agents_dir: Path, write_agent: Callable[..., Path]
) -> Path:
    """Create a project where a and b depend on each other."""
    write_agent(agents_dir, "a", dependencies=["b"])
    write_agent(agents_dir, "b", dependencies=["a"])
    return tmp_path


@pytest.fixture
def dangling_project(
    tmp_path: Path, agents_dir: Path, write_agent: Callable[..., Path]
) -> Path:
    """Create a project where b depends on an agent that does not exist."""
    write_agent(agents_dir, "a", dependencies=["b"])
    write_agent(agents_dir, "b", dependencies=["ghost"])
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty directory with no agents."""
    return tmp_path
