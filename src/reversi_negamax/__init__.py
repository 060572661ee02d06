"""Reversi agent built on a fixed-depth negamax search with alpha-beta pruning.

Example:
    >>> from reversi_negamax import Agent, AgentConfig, Side
    >>> agent = Agent(Side.BLACK, AgentConfig(depth=3))
    >>> agent.do_move(None)
    Move(x=3, y=2)
"""

from reversi_negamax.agent import Agent
from reversi_negamax.board import Board
from reversi_negamax.common import (
    BOARD_SIZE,
    POSITION_WEIGHTS,
    Move,
    Position,
    Side,
    opposite,
    square_position,
)
from reversi_negamax.config import AgentConfig, Strategy
from reversi_negamax.search import (
    ALPHA_MIN,
    BETA_MAX,
    SearchResult,
    SearchStats,
    minimax,
    negamax,
)

__all__ = [
    "Agent",
    "AgentConfig",
    "Strategy",
    "Board",
    "BOARD_SIZE",
    "POSITION_WEIGHTS",
    "Move",
    "Position",
    "Side",
    "opposite",
    "square_position",
    "ALPHA_MIN",
    "BETA_MAX",
    "SearchResult",
    "SearchStats",
    "minimax",
    "negamax",
]
