"""Stage-based runner for contribution agents."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .contracts import Agent, AgentContext
    from .registry import AgentRegistry

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AgentPipeline:
    """Run the registry's stages in order against one context.

    Stages never overlap. Agents of a stage run in registry order, or on a
    thread pool when ``max_workers`` is above one. The first agent error is
    re-raised once the stage's other agents have finished.
    """

    registry: AgentRegistry
    max_workers: int = 1

    def run(self, context: AgentContext) -> AgentContext:
        for stage, agents in self.registry.stages:
            log.info("Running stage %s (%d agents) for %s", stage, len(agents), context.metamodel)
            self._run_stage(agents, context)
        return context

    def _run_stage(self, agents: tuple[Agent, ...], context: AgentContext) -> None:
        if self.max_workers <= 1 or len(agents) <= 1:
            for agent in agents:
                agent.run(context)
            return

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(agent.run, context) for agent in agents]
        for future in futures:
            future.result()
