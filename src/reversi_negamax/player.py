"""Arena-compatible player script backed by :class:`~reversi_negamax.agent.Agent`.

Usage:
    reversi-negamax-player BLACK [--depth 4] [--strategy negamax] [--simple-eval] [--seed N] [--verbose]

Protocol:
- argv[1]: "BLACK" or "WHITE" (the side to play)
- stdin: one line per position (64-character board string, 'X' black,
  'O' white, '-' empty, square index x + 8 * y) or "ping"
- stdout: chosen square index (0-63) or "pass"; responds "pong" to ping;
  prints the error to stderr and exits with status 1 on failure
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .agent import Agent
from .common import Side
from .config import AgentConfig, Strategy
from .logging import ConsoleConfig, LoggerKind, LoggingConfig, create_logger
from .logging.helpers import log_agent_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Arena-compatible reversi player")
    parser.add_argument("color", choices=["BLACK", "WHITE", "black", "white"])
    parser.add_argument("--depth", type=int, default=4, help="Search depth in plies")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=Strategy.NEGAMAX.value,
        help="Move selection strategy",
    )
    parser.add_argument(
        "--simple-eval",
        action="store_true",
        help="Score positions by piece difference instead of square weights",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --strategy random")
    parser.add_argument(
        "--verbose", action="store_true", help="Log search metrics to stderr"
    )
    return parser.parse_args(argv)


def serve(agent: Agent, stdin: TextIO, stdout: TextIO) -> None:
    """Answer protocol lines from ``stdin`` until EOF."""
    for line in stdin:
        board_str = line.strip()
        if not board_str:
            continue
        if board_str.lower() == "ping":
            print("pong", file=stdout, flush=True)
            continue

        agent.sync(board_str)
        move = agent.choose_move()
        print("pass" if move is None else move.index, file=stdout, flush=True)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    side = Side.parse(args.color)
    config = AgentConfig(
        depth=args.depth,
        strategy=args.strategy,
        simple_eval=args.simple_eval,
        seed=args.seed,
    )
    logging_cfg = (
        LoggingConfig(
            backends={
                LoggerKind.CONSOLE: ConsoleConfig(
                    verbose=True, show_params_table=False, stderr=True
                ),
            }
        )
        if args.verbose
        else LoggingConfig.quiet()
    )

    with create_logger(logging_cfg) as logger:
        log_agent_config(logger, side, config)
        agent = Agent(side, config, logger=logger)
        try:
            serve(agent, sys.stdin, sys.stdout)
        except Exception as exc:  # pragma: no cover - fail fast in Arena
            print(exc, file=sys.stderr, flush=True)
            sys.exit(1)


if __name__ == "__main__":
    main()
