"""Discovery configuration: where agent definition files are searched.

Configuration is layered:

1. Built-in defaults (``.adk/agents`` in the project, ``~/.adk/agents`` for
   the user, no plugin paths).
2. ``<project>/.adk/config.yaml``, under an ``agent:`` mapping.
3. ``ADK_AGENT_*`` environment variables, which take precedence.

Example ``config.yaml``::

    agent:
      project_path: .adk/agents
      user_path: ~/.adk/agents
      plugin_paths: [plugins/agents]
      search_order: [project, plugin]
      skip_missing: true
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from agentgraph.exceptions import ConfigError

CONFIG_RELATIVE_PATH = Path(".adk") / "config.yaml"

VALID_SOURCES: tuple[str, ...] = ("project", "user", "plugin")


@dataclass
class DiscoveryConfig:
    """Agent discovery settings.

    Attributes:
        project_path: Project-level agent directory, relative to the project
            root unless absolute.
        user_path: User-level agent directory.
        plugin_paths: Additional plugin agent directories.
        search_order: Source names in priority order. The first agent found
            for a name wins.
        skip_missing: Silently skip search paths that do not exist.
    """

    project_path: str = ".adk/agents"
    user_path: str = "~/.adk/agents"
    plugin_paths: list[str] = field(default_factory=list)
    search_order: list[str] = field(
        default_factory=lambda: list(VALID_SOURCES)
    )
    skip_missing: bool = True

    def expand_paths(self) -> None:
        """Expand a leading ``~`` in every configured path."""
        self.project_path = os.path.expanduser(self.project_path)
        self.user_path = os.path.expanduser(self.user_path)
        self.plugin_paths = [os.path.expanduser(p) for p in self.plugin_paths]

    def validate(self) -> None:
        """Check the search order names.

        Raises:
            ConfigError: If ``search_order`` is empty or names an unknown
                source.
        """
        if not self.search_order:
            raise ConfigError("search_order must not be empty")
        for source in self.search_order:
            if source not in VALID_SOURCES:
                raise ConfigError(
                    f"invalid search_order entry {source!r} "
                    f"(expected one of: {', '.join(VALID_SOURCES)})"
                )

    def all_paths(self) -> list[tuple[str, str]]:
        """Return ``(source, path)`` pairs in search order."""
        paths: list[tuple[str, str]] = []
        for source in self.search_order:
            if source == "project":
                paths.append((source, self.project_path))
            elif source == "user":
                paths.append((source, self.user_path))
            else:
                paths.extend((source, p) for p in self.plugin_paths)
        return paths

    def source_for(self, path: Path, project_root: Path | None = None) -> str:
        """Return the source whose directory contains ``path``.

        Relative configured paths are resolved against ``project_root``
        (the current directory when omitted). Paths outside every configured
        directory count as ``project``.
        """
        base = Path(project_root) if project_root is not None else Path.cwd()
        target = (base / path).resolve()
        candidates = [("project", self.project_path), ("user", self.user_path)]
        candidates.extend(("plugin", p) for p in self.plugin_paths)
        for source, raw in candidates:
            if target.is_relative_to((base / raw).resolve()):
                return source
        return "project"


def _as_str_list(value: Any, key: str) -> list[str]:
    """A scalar is a one-element list; anything but a list of scalars is rejected."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and not any(isinstance(v, (dict, list)) for v in value):
        return [str(v) for v in value]
    raise ConfigError(f"'{key}' must be a string or a list of strings")


def _apply_file(cfg: DiscoveryConfig, data: Any) -> None:
    if data is None:
        return
    if not isinstance(data, dict):
        raise ConfigError("config file must contain a mapping")
    agent = data.get("agent") or {}
    if not isinstance(agent, dict):
        raise ConfigError("'agent' section must be a mapping")

    if agent.get("project_path"):
        cfg.project_path = str(agent["project_path"])
    if agent.get("user_path"):
        cfg.user_path = str(agent["user_path"])
    if agent.get("plugin_paths"):
        cfg.plugin_paths = _as_str_list(agent["plugin_paths"], "plugin_paths")
    if agent.get("search_order"):
        cfg.search_order = _as_str_list(agent["search_order"], "search_order")
    if agent.get("skip_missing") is not None:
        cfg.skip_missing = bool(agent["skip_missing"])


def _apply_env(cfg: DiscoveryConfig, environ: Mapping[str, str]) -> None:
    if environ.get("ADK_AGENT_PROJECT_PATH"):
        cfg.project_path = environ["ADK_AGENT_PROJECT_PATH"]
    if environ.get("ADK_AGENT_USER_PATH"):
        cfg.user_path = environ["ADK_AGENT_USER_PATH"]
    if environ.get("ADK_AGENT_PLUGIN_PATHS"):
        cfg.plugin_paths = [
            p for p in environ["ADK_AGENT_PLUGIN_PATHS"].split(":") if p
        ]
    if environ.get("ADK_AGENT_SEARCH_ORDER"):
        cfg.search_order = [
            s.strip() for s in environ["ADK_AGENT_SEARCH_ORDER"].split(",") if s.strip()
        ]
    if environ.get("ADK_AGENT_SKIP_MISSING"):
        cfg.skip_missing = environ["ADK_AGENT_SKIP_MISSING"].lower() in ("true", "1")


def load_config(
    project_root: Path,
    environ: Mapping[str, str] | None = None,
) -> DiscoveryConfig:
    """Load discovery configuration for a project.

    Args:
        project_root: Project directory that may hold ``.adk/config.yaml``.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        A validated ``DiscoveryConfig`` with ``~`` expanded.

    Raises:
        ConfigError: If the config file cannot be read or parsed, or the
            resulting configuration is invalid.
    """
    cfg = DiscoveryConfig()

    config_path = Path(project_root) / CONFIG_RELATIVE_PATH
    if config_path.is_file():
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"failed to read config file {config_path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"failed to parse config file {config_path}: {exc}") from exc
        _apply_file(cfg, data)

    _apply_env(cfg, os.environ if environ is None else environ)
    cfg.expand_paths()
    cfg.validate()
    return cfg
