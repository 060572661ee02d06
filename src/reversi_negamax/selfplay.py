"""
Self-play between two agents.

`play_game` referees a single game: it hands each agent the opponent's last
move, checks the reply on its own board and stops after two consecutive
passes. `SelfPlayRunner` plays many games and yields aggregate stats after
every batch, optionally saving the visited positions and their outcomes as
numpy arrays.
"""

from __future__ import annotations

import argparse
import dataclasses
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

import numpy as np

from .agent import Agent
from .board import Board
from .common import Move, Side
from .config import AgentConfig, Strategy
from .encoding import board_to_planes, outcome_value
from .logging import BaseLogger, ConsoleConfig, LoggerKind, LoggingConfig, create_logger
from .logging.helpers import log_agent_config, log_selfplay_stats


class IllegalMoveError(ValueError):
    """An agent answered with a move that is not legal on the referee board."""


@dataclass
class GameResult:
    """Outcome of one game."""

    black: int
    white: int
    moves: list[Move | None] = field(default_factory=list)
    # One entry per position where the mover had a legal placement;
    # positions stays empty unless play_game was asked to record them
    positions: list[np.ndarray] = field(default_factory=list)
    movers: list[Side] = field(default_factory=list)

    @property
    def winner(self) -> Side | None:
        if self.black > self.white:
            return Side.BLACK
        if self.white > self.black:
            return Side.WHITE
        return None

    @property
    def length(self) -> int:
        """Number of placements (passes excluded)."""
        return sum(1 for move in self.moves if move is not None)

    def values(self) -> list[float]:
        return [outcome_value(self.winner, mover) for mover in self.movers]


def play_game(
    black_agent: Agent,
    white_agent: Agent,
    ms_left: int = -1,
    logger: BaseLogger | None = None,
    record_positions: bool = False,
) -> GameResult:
    """Play a full game between two agents, BLACK moving first.

    With ``record_positions`` the mover-perspective planes of every
    position with a legal placement are kept in ``GameResult.positions``.

    Raises:
        IllegalMoveError: If an agent plays off the board, plays an illegal
            move, or passes while it has a legal placement
    """
    agents = {Side.BLACK: black_agent, Side.WHITE: white_agent}
    board = Board()
    result = GameResult(black=0, white=0)

    side = Side.BLACK
    last_move: Move | None = None
    passes = 0
    while passes < 2:
        if board.has_moves(side):
            if record_positions:
                result.positions.append(board_to_planes(board, side))
            result.movers.append(side)

        move = agents[side].do_move(last_move, ms_left)
        if move is not None and not Board.on_board(move.x, move.y):
            raise IllegalMoveError(f"{side.value} played off-board move {move}")
        if not board.is_legal_move(move, side):
            raise IllegalMoveError(f"{side.value} played illegal move {move}")
        board.apply_move(move, side)
        result.moves.append(move)

        if logger is not None:
            logger.log_event(
                f"{side.value}: {'pass' if move is None else move} "
                f"(black {board.count_black()} / white {board.count_white()})"
            )

        passes = passes + 1 if move is None else 0
        last_move = move
        side = side.opposite()

    result.black = board.count_black()
    result.white = board.count_white()
    return result


@dataclass
class SelfPlayStats:
    """Statistics for one reporting batch of self-play games."""

    # Counts (this batch only)
    games: int
    black_wins: int
    white_wins: int
    draws: int

    # Rates (this batch only)
    black_win_rate: float
    white_win_rate: float
    draw_rate: float

    # Game quality
    avg_game_length: float
    positions_generated: int

    # Time
    step_duration_sec: float
    games_per_sec: float
    elapsed_time_sec: float

    @classmethod
    def from_results(
        cls, results: list[GameResult], step_duration_sec: float, elapsed_time_sec: float
    ) -> "SelfPlayStats":
        games = len(results)
        black_wins = sum(1 for r in results if r.winner is Side.BLACK)
        white_wins = sum(1 for r in results if r.winner is Side.WHITE)
        draws = games - black_wins - white_wins
        return cls(
            games=games,
            black_wins=black_wins,
            white_wins=white_wins,
            draws=draws,
            black_win_rate=black_wins / games,
            white_win_rate=white_wins / games,
            draw_rate=draws / games,
            avg_game_length=sum(r.length for r in results) / games,
            positions_generated=sum(len(r.movers) for r in results),
            step_duration_sec=step_duration_sec,
            games_per_sec=games / step_duration_sec if step_duration_sec > 0 else 0.0,
            elapsed_time_sec=elapsed_time_sec,
        )


class SelfPlayRunner:
    """Play ``total_games`` games and yield stats every ``report_interval`` games.

    With ``save_dir`` set, all positions seen so far are written after each
    batch to ``states.npy`` (N, 3, 8, 8) and ``values.npy`` (N,).
    """

    def __init__(
        self,
        total_games: int,
        report_interval: int,
        black_config: AgentConfig | None = None,
        white_config: AgentConfig | None = None,
        save_dir: Path | str | None = None,
        logger: BaseLogger | None = None,
    ) -> None:
        """
        Raises:
            ValueError: If total_games or report_interval is not positive
        """
        if total_games <= 0:
            raise ValueError(f"total_games must be positive, got {total_games}")
        if report_interval <= 0:
            raise ValueError(f"report_interval must be positive, got {report_interval}")

        self.total_games = total_games
        self.report_interval = report_interval
        self.black_config = black_config or AgentConfig()
        self.white_config = white_config or AgentConfig()
        self.save_dir = Path(save_dir) if save_dir is not None else None
        self.logger = logger

        self.states: list[np.ndarray] = []
        self.values: list[float] = []
        self.games_played = 0

    def _agent_config(self, config: AgentConfig) -> AgentConfig:
        # Vary the seed per game so seeded random agents do not replay one game
        if config.seed is None:
            return config
        return dataclasses.replace(config, seed=config.seed + self.games_played)

    def play_one(self) -> GameResult:
        black = Agent(Side.BLACK, self._agent_config(self.black_config))
        white = Agent(Side.WHITE, self._agent_config(self.white_config))
        recording = self.save_dir is not None
        result = play_game(black, white, record_positions=recording)
        self.games_played += 1

        if recording:
            self.states.extend(result.positions)
            self.values.extend(result.values())
        return result

    def save(self) -> tuple[Path, Path]:
        """Write all recorded positions to ``save_dir``."""
        if self.save_dir is None:
            raise RuntimeError("save() requires a save_dir")
        self.save_dir.mkdir(parents=True, exist_ok=True)

        states_path = self.save_dir / "states.npy"
        values_path = self.save_dir / "values.npy"
        states = (
            np.stack(self.states)
            if self.states
            else np.zeros((0, 3, 8, 8), dtype=np.float32)
        )
        np.save(states_path, states)
        np.save(values_path, np.asarray(self.values, dtype=np.float32))
        return states_path, values_path

    def __iter__(self) -> Iterator[SelfPlayStats]:
        started = time.perf_counter()
        while self.games_played < self.total_games:
            batch_size = min(self.report_interval, self.total_games - self.games_played)
            batch_started = time.perf_counter()
            results = [self.play_one() for _ in range(batch_size)]
            now = time.perf_counter()

            if self.save_dir is not None:
                states_path, values_path = self.save()
                if self.logger is not None:
                    self.logger.log_artifact("states", str(states_path))
                    self.logger.log_artifact("values", str(values_path))

            yield SelfPlayStats.from_results(results, now - batch_started, now - started)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Self-play between two agents")
    parser.add_argument("--games", type=int, default=4, help="Number of games")
    parser.add_argument(
        "--report-interval", type=int, default=2, help="Report stats every N games"
    )
    for color in ("black", "white"):
        parser.add_argument(
            f"--{color}-strategy",
            choices=[s.value for s in Strategy],
            default=Strategy.NEGAMAX.value,
        )
        parser.add_argument(f"--{color}-depth", type=int, default=3)
    parser.add_argument(
        "--simple-eval", action="store_true", help="Score by piece difference"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random agents")
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=None,
        help="Directory for states.npy / values.npy",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run a self-play session and log stats to the console."""
    args = parse_args(argv)

    black_config = AgentConfig(
        depth=args.black_depth,
        strategy=args.black_strategy,
        simple_eval=args.simple_eval,
        seed=args.seed,
    )
    white_config = AgentConfig(
        depth=args.white_depth,
        strategy=args.white_strategy,
        simple_eval=args.simple_eval,
        seed=args.seed,
    )

    logging_cfg = LoggingConfig(
        backends={
            LoggerKind.CONSOLE: ConsoleConfig(
                verbose=True,
                show_params_table=True,
                show_timestamp=True,
            ),
        }
    )

    with create_logger(logging_cfg) as logger:
        logger.log_param("games", args.games)
        logger.log_param("report_interval", args.report_interval)
        logger.log_param("save_dir", args.save_dir)
        log_agent_config(logger, Side.BLACK, black_config)
        log_agent_config(logger, Side.WHITE, white_config)

        runner = SelfPlayRunner(
            total_games=args.games,
            report_interval=args.report_interval,
            black_config=black_config,
            white_config=white_config,
            save_dir=args.save_dir,
            logger=logger,
        )
        for step, stats in enumerate(runner):
            log_selfplay_stats(logger, stats, step=step)


if __name__ == "__main__":
    main()
