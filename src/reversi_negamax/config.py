"""Agent configuration."""

from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    """How an agent picks its move."""

    NEGAMAX = "negamax"
    MINIMAX = "minimax"
    GREEDY = "greedy"
    RANDOM = "random"


@dataclass
class AgentConfig:
    """Configuration for an :class:`~reversi_negamax.agent.Agent`.

    Args:
        depth: Plies searched by NEGAMAX and MINIMAX
        strategy: Move selection strategy
        simple_eval: Score leaves by piece difference instead of the
            positional weights
        seed: Seed for the RANDOM strategy
    """

    depth: int = 4
    strategy: Strategy | str = Strategy.NEGAMAX
    simple_eval: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        self.strategy = Strategy(self.strategy)
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")
