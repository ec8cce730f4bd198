"""Multi-path discovery of agent definition files.

Walks each configured search path in priority order, parses every ``*.md``
file below it and keeps the first agent found for each name. Files that
fail to parse are recorded in the result and logged; they never stop the
pass.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from agentgraph.config import DiscoveryConfig, load_config
from agentgraph.discovery.models import AgentRecord, DiscoveryError, DiscoveryResult
from agentgraph.discovery.parser import parse_agent_file
from agentgraph.exceptions import ParseError

logger = logging.getLogger(__name__)


class AgentDiscoverer:
    """Finds agent definitions for a project.

    Usage::

        discoverer = AgentDiscoverer(Path("."))
        result = discoverer.discover_all()
        graph = build_graph_from_discovery(result)

    Args:
        project_root: Directory relative search paths are resolved against.
        config: Discovery settings. Loaded from the project (config file and
            environment) when omitted.
    """

    def __init__(
        self, project_root: Path, config: DiscoveryConfig | None = None
    ) -> None:
        self.project_root = Path(project_root)
        self._config = config

    @property
    def config(self) -> DiscoveryConfig:
        if self._config is None:
            self._config = load_config(self.project_root)
        return self._config

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.project_root / candidate

    def discover_all(self) -> DiscoveryResult:
        """Discover agents from every configured path.

        Returns:
            A ``DiscoveryResult`` with parsed agents and per-file errors.
        """
        start = time.perf_counter()
        result = DiscoveryResult()
        seen: set[str] = set()

        for source, raw_path in self.config.all_paths():
            full_path = self._resolve(raw_path)
            if not full_path.is_dir():
                if not self.config.skip_missing:
                    result.errors.append(
                        DiscoveryError(full_path, "agent path does not exist")
                    )
                continue

            agents, errors = self.discover_path(full_path)
            result.errors.extend(errors)
            for agent in agents:
                if agent.name in seen:
                    logger.debug(
                        "Skipping duplicate agent %r from %s",
                        agent.name, agent.source_path,
                    )
                    continue
                seen.add(agent.name)
                agent.source = source
                result.agents.append(agent)

        result.time_taken = time.perf_counter() - start
        logger.debug(
            "Discovered %d agents (%d errors) in %.3fs",
            result.total, result.error_count, result.time_taken,
        )
        return result

    def discover_path(
        self, path: Path
    ) -> tuple[list[AgentRecord], list[DiscoveryError]]:
        """Parse every ``*.md`` file below ``path`` in sorted order."""
        agents: list[AgentRecord] = []
        errors: list[DiscoveryError] = []
        try:
            files = sorted(path.rglob("*.md"))
        except OSError as exc:
            logger.warning("Error scanning: %s", path, exc_info=True)
            return agents, [DiscoveryError(path, str(exc))]

        for md_file in files:
            if not md_file.is_file():
                continue
            try:
                agents.append(parse_agent_file(md_file))
            except ParseError as exc:
                logger.warning("Failed to parse agent file %s: %s", md_file, exc)
                errors.append(DiscoveryError(md_file, str(exc)))
        return agents, errors
