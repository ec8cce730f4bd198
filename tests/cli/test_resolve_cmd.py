"""Tests for ``agentgraph resolve`` command.

Verifies:
    - Execution order in list, tree and JSON formats.
    - Transitive dependency listing.
    - Exit code 1 for unknown agents, dangling dependencies and cycles.
"""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from agentgraph.cli.main import cli


class TestResolveSuccess:
    """Tests for agents whose dependencies resolve."""

    def test_list_format(self, runner: CliRunner, chain_project: Path) -> None:
        result = runner.invoke(cli, ["resolve", "a", str(chain_project)])
        assert result.exit_code == 0
        assert "Dependencies for a (execution order):" in result.output
        assert "1. c v1.0\n2. b\n" in result.output
        assert "3. a" not in result.output

    def test_tree_format(self, runner: CliRunner, chain_project: Path) -> None:
        result = runner.invoke(
            cli, ["resolve", "a", str(chain_project), "--format", "tree"],
        )
        assert result.exit_code == 0
        assert "  └─ c (v1.0)\n  └─ b\n" in result.output

    def test_json_format(self, runner: CliRunner, chain_project: Path) -> None:
        result = runner.invoke(cli, ["resolve", "a", str(chain_project), "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "agent_name": "a",
            "dependencies": [
                {"name": "c", "order": 1, "version": "1.0"},
                {"name": "b", "order": 2},
                {"name": "a", "order": 3},
            ],
        }

    def test_transitive(self, runner: CliRunner, chain_project: Path) -> None:
        result = runner.invoke(
            cli, ["resolve", "a", str(chain_project), "-f", "json", "--transitive"],
        )
        data = json.loads(result.output)
        assert data["transitive_dependencies"] == ["b", "c"]

    def test_transitive_text(self, runner: CliRunner, chain_project: Path) -> None:
        result = runner.invoke(cli, ["resolve", "a", str(chain_project), "--transitive"])
        assert "Transitive dependencies: b, c" in result.output

    def test_leaf_agent(self, runner: CliRunner, chain_project: Path) -> None:
        result = runner.invoke(cli, ["resolve", "d", str(chain_project), "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["dependencies"] == [{"name": "d", "order": 1}]


class TestResolveFailure:
    """Tests for resolution errors."""

    def test_unknown_agent(self, runner: CliRunner, chain_project: Path) -> None:
        result = runner.invoke(cli, ["resolve", "nope", str(chain_project)])
        assert result.exit_code == 1
        assert "dependency resolution failed" in result.output
        assert "'nope' not found" in result.output

    def test_dangling_dependency(
        self, runner: CliRunner, dangling_project: Path
    ) -> None:
        result = runner.invoke(cli, ["resolve", "a", str(dangling_project)])
        assert result.exit_code == 1
        assert "'ghost' not found" in result.output

    def test_cycle(self, runner: CliRunner, cyclic_project: Path) -> None:
        result = runner.invoke(cli, ["resolve", "a", str(cyclic_project)])
        assert result.exit_code == 1
        assert "circular dependency" in result.output

    def test_cycle_json(self, runner: CliRunner, cyclic_project: Path) -> None:
        result = runner.invoke(cli, ["resolve", "a", str(cyclic_project), "-f", "json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["agent_name"] == "a"
        assert "circular dependency" in data["error"]

    def test_empty_dir(self, runner: CliRunner, empty_dir: Path) -> None:
        result = runner.invoke(cli, ["resolve", "a", str(empty_dir)])
        assert result.exit_code == 2
