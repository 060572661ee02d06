"""
Tests for the stdin/stdout player protocol.
"""

import io

import pytest

from reversi_negamax.agent import Agent
from reversi_negamax.board import Board
from reversi_negamax.common import Side
from reversi_negamax.config import AgentConfig
from reversi_negamax.player import main, parse_args, serve

OPENING = Board().to_string()


def run_serve(lines, side=Side.BLACK, depth=2):
    agent = Agent(side, AgentConfig(depth=depth))
    stdout = io.StringIO()
    serve(agent, io.StringIO("".join(f"{line}\n" for line in lines)), stdout)
    return stdout.getvalue().splitlines()


def test_ping_pong():
    """Test the keep-alive handshake."""
    assert run_serve(["ping", "PING"]) == ["pong", "pong"]


def test_blank_lines_are_ignored():
    """Test that empty lines produce no output."""
    assert run_serve(["", "   ", "ping"]) == ["pong"]


def test_answers_square_index():
    """Test that a board line is answered with a square index."""
    assert run_serve([OPENING]) == ["19"]  # (3, 2)


def test_white_answers_legal_index():
    """Test a white reply after black's opening move."""
    board = Board()
    board.set_board(OPENING)
    board.apply_move(board.legal_moves(Side.BLACK)[0], Side.BLACK)

    (answer,) = run_serve([board.to_string()], side=Side.WHITE)
    legal = {move.index for move in board.legal_moves(Side.WHITE)}
    assert int(answer) in legal


def test_answers_pass():
    """Test the reply when the agent has no legal move."""
    assert run_serve(["X" + "-" * 63], side=Side.WHITE) == ["pass"]


def test_each_line_resyncs_board():
    """Test that every line is searched from the given board alone."""
    assert run_serve([OPENING, OPENING]) == ["19", "19"]


def test_parse_args():
    """Test command line parsing."""
    args = parse_args(["white", "--depth", "3", "--strategy", "greedy", "--simple-eval"])
    assert args.color == "white"
    assert args.depth == 3
    assert args.strategy == "greedy"
    assert args.simple_eval is True
    assert args.verbose is False


def test_main_serves_stdin(monkeypatch, capsys):
    """Test the script entry point on a short session."""
    monkeypatch.setattr("sys.stdin", io.StringIO(f"ping\n{OPENING}\n"))
    main(["BLACK", "--depth", "1"])
    assert capsys.readouterr().out.splitlines() == ["pong", "19"]


def test_main_verbose_logs_to_stderr(monkeypatch, capsys):
    """Test that verbose logging stays off the protocol channel."""
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{OPENING}\n"))
    main(["BLACK", "--depth", "1", "--verbose"])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["19"]
    assert "black/search/nodes" in captured.err


def test_main_exits_on_bad_board(monkeypatch, capsys):
    """Test that a malformed line ends the process with status 1."""
    monkeypatch.setattr("sys.stdin", io.StringIO("not-a-board\n"))
    with pytest.raises(SystemExit) as excinfo:
        main(["BLACK"])
    assert excinfo.value.code == 1
    assert "64 characters" in capsys.readouterr().err
