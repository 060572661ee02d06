"""Game-tree search over :class:`~reversi_negamax.board.Board`.

The main entry point is :func:`negamax`, a fixed-depth negamax search with
alpha-beta pruning. :func:`minimax` is the plain unpruned search kept as a
reference, and :func:`greedy` / :func:`first_legal` / :func:`random_legal`
are cheap one-ply strategies.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from .board import Board
from .common import Move, Side

# 32-bit bounds; the lower one is MIN + 1 so that negating it cannot overflow.
ALPHA_MIN = -(2**31) + 1
BETA_MAX = 2**31 - 1


@dataclass(frozen=True)
class SearchResult:
    """Score and best move of a search. ``move`` is None when no move exists."""

    score: int
    move: Move | None


@dataclass
class SearchStats:
    """Counters collected while searching."""

    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0

    def reset(self) -> None:
        self.nodes = 0
        self.leaves = 0
        self.cutoffs = 0


def negamax(
    board: Board,
    side: Side,
    depth: int,
    alpha: int = ALPHA_MIN,
    beta: int = BETA_MAX,
    simple: bool = False,
    stats: SearchStats | None = None,
) -> SearchResult:
    """Search ``depth`` plies ahead for ``side`` to move.

    Scores are from the point of view of ``side``, which at the top-level
    call is the side the caller is choosing a move for. Leaves (depth
    exhausted, or ``side`` has nothing to play) are scored statically;
    passes are never explored inside the tree.

    On a fail-high (a child score above ``beta``) the remaining siblings
    are skipped and ``(beta, cutoff move)`` is returned.

    Args:
        board: Position to search; it is never modified
        side: Side to move
        depth: Remaining plies
        alpha: Lower bound of the window
        beta: Upper bound of the window
        simple: Score leaves by piece difference instead of position
        stats: Optional counters updated in place

    Returns:
        SearchResult with the best score and move (None if no move)
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0 or not board.has_moves(side):
        if stats is not None:
            stats.leaves += 1
        return SearchResult(board.score(side, simple), None)

    best_move = None
    # square index order; strict comparisons keep the first of equal moves
    for move in board.legal_moves(side):
        child = board.copy()
        child.apply_move(move, side)
        result = negamax(
            child, side.opposite(), depth - 1, -beta, -alpha, simple, stats
        )
        score = -result.score

        if score > alpha:
            alpha = score
            best_move = move
        if score > beta:
            if stats is not None:
                stats.cutoffs += 1
            return SearchResult(beta, move)

    return SearchResult(alpha, best_move)


def minimax(
    board: Board,
    root_side: Side,
    depth: int,
    maximizing: bool = True,
    simple: bool = False,
    stats: SearchStats | None = None,
) -> SearchResult:
    """Unpruned minimax; every score is from ``root_side``'s point of view."""
    if stats is not None:
        stats.nodes += 1

    side = root_side if maximizing else root_side.opposite()
    if depth == 0 or not board.has_moves(side):
        if stats is not None:
            stats.leaves += 1
        return SearchResult(board.score(root_side, simple), None)

    best: SearchResult | None = None
    for move in board.legal_moves(side):
        child = board.copy()
        child.apply_move(move, side)
        score = minimax(
            child, root_side, depth - 1, not maximizing, simple, stats
        ).score
        if best is None:
            best = SearchResult(score, move)
        elif maximizing and score > best.score:
            best = SearchResult(score, move)
        elif not maximizing and score < best.score:
            best = SearchResult(score, move)

    if best is None:
        return SearchResult(board.score(root_side, simple), None)
    return best


def greedy(board: Board, side: Side, simple: bool = False) -> SearchResult:
    """Pick the move with the best score one ply ahead."""
    best: SearchResult | None = None
    for move in board.legal_moves(side):
        child = board.copy()
        child.apply_move(move, side)
        score = child.score(side, simple)
        if best is None or score > best.score:
            best = SearchResult(score, move)
    if best is None:
        return SearchResult(board.score(side, simple), None)
    return best


def first_legal(board: Board, side: Side) -> Move | None:
    moves = board.legal_moves(side)
    return moves[0] if moves else None


def random_legal(board: Board, side: Side, rng: random.Random) -> Move | None:
    moves = board.legal_moves(side)
    if not moves:
        return None
    return rng.choice(moves)
