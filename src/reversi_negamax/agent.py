"""Game-long agent that tracks its own board and picks moves."""

from __future__ import annotations

import random
import time

from .board import Board
from .common import Move, Side
from .config import AgentConfig, Strategy
from .logging import BaseLogger, NullLogger
from .logging.helpers import log_search
from .search import (
    ALPHA_MIN,
    BETA_MAX,
    SearchResult,
    SearchStats,
    greedy,
    minimax,
    negamax,
    random_legal,
)


class Agent:
    """Plays one side of one game.

    The agent keeps its own board starting from the standard opening. Each
    turn the driver reports the opponent's last move (None for a pass or
    for the first move of the game) and the agent answers with its own
    move, or None when it has to pass.
    """

    def __init__(
        self,
        side: Side,
        config: AgentConfig | None = None,
        logger: BaseLogger | None = None,
    ) -> None:
        self.side = side
        self.config = config or AgentConfig()
        self.logger = logger or NullLogger()
        self.board = Board()
        self.stats = SearchStats()
        self.last_result: SearchResult | None = None
        self.turn = 0
        self._rng = random.Random(self.config.seed)

    def set_board(self, board: Board) -> None:
        self.board = board

    def sync(self, board_str: str) -> None:
        """Replace the tracked board with the given board string."""
        self.board.set_board(board_str)

    def apply_opponent_move(self, move: Move | None) -> None:
        if move is not None:
            self.board.apply_move(move, self.side.opposite())

    def choose_move(self, ms_left: int = -1) -> Move | None:
        """Pick a move, play it on the tracked board and return it.

        Args:
            ms_left: Remaining game time in milliseconds, -1 for unlimited.
                Only logged; the search always runs to its configured depth.

        Returns:
            The chosen move, or None if the agent must pass
        """
        self.stats.reset()
        started = time.perf_counter()
        result = self._search()
        elapsed = time.perf_counter() - started

        self.last_result = result
        log_search(
            self.logger,
            self.side,
            result,
            self.stats,
            elapsed,
            ms_left,
            step=self.turn,
        )
        self.turn += 1

        if result.move is not None:
            self.board.apply_move(result.move, self.side)
        return result.move

    def do_move(self, opponents_move: Move | None, ms_left: int = -1) -> Move | None:
        """Absorb the opponent's move, then choose and play our own."""
        self.apply_opponent_move(opponents_move)
        return self.choose_move(ms_left)

    def _search(self) -> SearchResult:
        cfg = self.config
        if cfg.strategy is Strategy.NEGAMAX:
            return negamax(
                self.board,
                self.side,
                cfg.depth,
                ALPHA_MIN,
                BETA_MAX,
                simple=cfg.simple_eval,
                stats=self.stats,
            )
        if cfg.strategy is Strategy.MINIMAX:
            return minimax(
                self.board,
                self.side,
                cfg.depth,
                simple=cfg.simple_eval,
                stats=self.stats,
            )
        if cfg.strategy is Strategy.GREEDY:
            return greedy(self.board, self.side, simple=cfg.simple_eval)

        move = random_legal(self.board, self.side, self._rng)
        return SearchResult(self.board.score(self.side, cfg.simple_eval), move)
