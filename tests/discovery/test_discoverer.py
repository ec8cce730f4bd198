"""Tests for multi-path agent discovery."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from agentgraph.config import DiscoveryConfig
from agentgraph.core.dependency import build_graph_from_discovery
from agentgraph.discovery import AgentDiscoverer, DiscoveryResult


def _project_only(**overrides) -> DiscoveryConfig:
    cfg = DiscoveryConfig(search_order=["project"])
    for key, value in overrides.items():
        setattr(cfg, key, value)
    return cfg


class TestDiscoverPath:
    """Tests for scanning a single directory."""

    def test_finds_nested_files_sorted(
        self, tmp_path: Path, write_agent: Callable[..., Path]
    ) -> None:
        write_agent(tmp_path / "sub", "zeta")
        write_agent(tmp_path, "alpha")
        agents, errors = AgentDiscoverer(tmp_path, _project_only()).discover_path(tmp_path)
        assert [a.name for a in agents] == ["alpha", "zeta"]
        assert errors == []

    def test_ignores_non_markdown(
        self, tmp_path: Path, write_agent: Callable[..., Path]
    ) -> None:
        write_agent(tmp_path, "a")
        (tmp_path / "notes.txt").write_text("---\nname: x\n---\n")
        agents, _ = AgentDiscoverer(tmp_path, _project_only()).discover_path(tmp_path)
        assert [a.name for a in agents] == ["a"]

    def test_parse_failure_recorded_and_logged(
        self,
        tmp_path: Path,
        write_agent: Callable[..., Path],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A broken file is reported but does not stop the scan."""
        write_agent(tmp_path, "good")
        bad = tmp_path / "bad.md"
        bad.write_text("no frontmatter here\n")
        with caplog.at_level(logging.WARNING, logger="agentgraph.discovery.discoverer"):
            agents, errors = AgentDiscoverer(tmp_path, _project_only()).discover_path(tmp_path)
        assert [a.name for a in agents] == ["good"]
        assert len(errors) == 1
        assert errors[0].path == bad
        assert "no YAML frontmatter" in errors[0].message
        assert "Failed to parse agent file" in caplog.text


class TestDiscoverAll:
    """Tests for discovery across configured sources."""

    def test_project_agents(
        self, tmp_path: Path, agents_dir: Path, write_agent: Callable[..., Path]
    ) -> None:
        write_agent(agents_dir, "a", version="1.0", dependencies=["b"])
        write_agent(agents_dir, "b")
        result = AgentDiscoverer(tmp_path, _project_only()).discover_all()
        assert isinstance(result, DiscoveryResult)
        assert result.total == 2
        assert not result.has_errors
        a = next(r for r in result.agents if r.name == "a")
        assert a.version == "1.0"
        assert a.dependencies == ["b"]
        assert a.source == "project"

    def test_first_found_name_wins(
        self, tmp_path: Path, agents_dir: Path, write_agent: Callable[..., Path]
    ) -> None:
        """An agent in an earlier source shadows the same name later on."""
        plugin_dir = tmp_path / "plugins"
        write_agent(agents_dir, "shared", version="1.0")
        write_agent(plugin_dir, "shared", version="9.9")
        write_agent(plugin_dir, "extra")
        cfg = _project_only(
            plugin_paths=[str(plugin_dir)], search_order=["project", "plugin"],
        )
        result = AgentDiscoverer(tmp_path, cfg).discover_all()
        by_name = {a.name: a for a in result.agents}
        assert by_name["shared"].version == "1.0"
        assert by_name["shared"].source == "project"
        assert by_name["extra"].source == "plugin"

    def test_search_order_respected(
        self, tmp_path: Path, agents_dir: Path, write_agent: Callable[..., Path]
    ) -> None:
        plugin_dir = tmp_path / "plugins"
        write_agent(agents_dir, "shared", version="1.0")
        write_agent(plugin_dir, "shared", version="9.9")
        cfg = _project_only(
            plugin_paths=[str(plugin_dir)], search_order=["plugin", "project"],
        )
        result = AgentDiscoverer(tmp_path, cfg).discover_all()
        assert [a.version for a in result.agents] == ["9.9"]

    def test_relative_plugin_path_resolved_against_root(
        self, tmp_path: Path, write_agent: Callable[..., Path]
    ) -> None:
        write_agent(tmp_path / "ext", "plugged")
        cfg = _project_only(plugin_paths=["ext"], search_order=["plugin"])
        result = AgentDiscoverer(tmp_path, cfg).discover_all()
        assert [a.name for a in result.agents] == ["plugged"]

    def test_missing_path_skipped_by_default(self, tmp_path: Path) -> None:
        result = AgentDiscoverer(tmp_path, _project_only()).discover_all()
        assert result.is_empty
        assert not result.has_errors

    def test_missing_path_reported_when_not_skipped(self, tmp_path: Path) -> None:
        result = AgentDiscoverer(tmp_path, _project_only(skip_missing=False)).discover_all()
        assert result.error_count == 1
        assert "does not exist" in result.errors[0].message

    def test_partial_results_build_graph(
        self, tmp_path: Path, agents_dir: Path, write_agent: Callable[..., Path]
    ) -> None:
        """Parse failures still leave a usable graph of the valid agents."""
        write_agent(agents_dir, "a", dependencies=["b"])
        write_agent(agents_dir, "b")
        (agents_dir / "broken.md").write_text("---\nname: [\n---\n")
        result = AgentDiscoverer(tmp_path, _project_only()).discover_all()
        assert result.error_count == 1
        graph = build_graph_from_discovery(result)
        assert graph.names() == ["a", "b"]
        assert graph.edges["a"] == ["b"]

    def test_config_loaded_from_environment(
        self,
        tmp_path: Path,
        write_agent: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Without an explicit config the project settings are loaded."""
        write_agent(tmp_path / "custom", "envagent")
        monkeypatch.setenv("ADK_AGENT_PROJECT_PATH", "custom")
        monkeypatch.setenv("ADK_AGENT_SEARCH_ORDER", "project")
        result = AgentDiscoverer(tmp_path).discover_all()
        assert [a.name for a in result.agents] == ["envagent"]
