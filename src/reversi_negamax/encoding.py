"""Board-to-array encoding for recorded self-play positions."""

import numpy as np

from .board import Board
from .common import BOARD_SIZE, NUM_SQUARES, Side

# Plane order of board_to_planes()
PLANE_MOVER, PLANE_OPPONENT, PLANE_EMPTY = 0, 1, 2


def _bits_to_plane(bits: int) -> np.ndarray:
    flat = np.array([(bits >> i) & 1 for i in range(NUM_SQUARES)], dtype=np.float32)
    # square index is x + 8 * y, so rows are y and columns are x
    return flat.reshape(BOARD_SIZE, BOARD_SIZE)


def board_to_planes(board: Board, side: Side) -> np.ndarray:
    """Encode ``board`` as seen by ``side``.

    Returns:
        float32 array of shape (3, 8, 8) with planes [mover, opponent, empty],
        indexed ``[plane, y, x]``
    """
    white = board.taken & ~board.black
    own, other = (board.black, white) if side is Side.BLACK else (white, board.black)
    planes = np.stack(
        [
            _bits_to_plane(own),
            _bits_to_plane(other),
            _bits_to_plane(~board.taken & ((1 << NUM_SQUARES) - 1)),
        ]
    )
    return planes


def outcome_value(winner: Side | None, side: Side) -> float:
    """Final game value from ``side``'s point of view: +1 win, -1 loss, 0 draw."""
    if winner is None:
        return 0.0
    return 1.0 if winner is side else -1.0
