"""Helper functions for logging agent and self-play metrics."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from .base import BaseLogger
from ..common import Side
from ..config import AgentConfig
from ..search import SearchResult, SearchStats

if TYPE_CHECKING:
    from ..selfplay import SelfPlayStats


def log_agent_config(logger: BaseLogger, side: Side, config: AgentConfig) -> None:
    """Log an agent's configuration as ``<side>_<field>`` parameters."""
    prefix = side.value
    for key, value in asdict(config).items():
        if hasattr(value, "value"):
            value = value.value
        logger.log_param(f"{prefix}_{key}", value)


def log_search(
    logger: BaseLogger,
    side: Side,
    result: SearchResult,
    stats: SearchStats,
    elapsed_sec: float,
    ms_left: int,
    step: int,
) -> None:
    """Log the outcome of one move decision.

    Args:
        logger: Logger instance
        side: Side that searched
        result: Search result
        stats: Counters collected during the search
        elapsed_sec: Wall time spent searching
        ms_left: Remaining game time reported by the driver
        step: Turn number of this agent
    """
    prefix = f"{side.value}/search"
    logger.log_metric(f"{prefix}/score", float(result.score), step=step)
    logger.log_metric(f"{prefix}/nodes", float(stats.nodes), step=step)
    logger.log_metric(f"{prefix}/leaves", float(stats.leaves), step=step)
    logger.log_metric(f"{prefix}/cutoffs", float(stats.cutoffs), step=step)
    logger.log_metric(f"{prefix}/elapsed_sec", elapsed_sec, step=step)
    if ms_left >= 0:
        logger.log_metric(f"{prefix}/ms_left", float(ms_left), step=step)

    played = "pass" if result.move is None else str(result.move)
    logger.log_event(f"{side.value} plays {played} (score {result.score})")


def log_selfplay_stats(logger: BaseLogger, stats: SelfPlayStats, step: int) -> None:
    """Log every numeric field of a self-play report under ``selfplay/``."""
    for name, value in asdict(stats).items():
        logger.log_metric(f"selfplay/{name}", float(value), step=step)
