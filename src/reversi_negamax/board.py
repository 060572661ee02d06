"""8x8 reversi board stored as two 64-bit sets.

Square (x, y) lives at bit ``x + 8 * y``. ``taken`` marks occupied
squares and ``black`` marks the black pieces among them, so a square is
white iff it is taken but not black.
"""

from __future__ import annotations

from typing import Iterator

from .common import (
    BOARD_SIZE,
    NUM_SQUARES,
    POSITION_WEIGHTS,
    SQUARE_POSITIONS,
    Move,
    Side,
)

DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

BLACK_CHARS = "bBxX"
WHITE_CHARS = "wWoO"
EMPTY_CHARS = "-. "

FULL_MASK = (1 << NUM_SQUARES) - 1
FILE_A = 0x0101010101010101  # x == 0
FILE_H = 0x8080808080808080  # x == 7
NOT_A = FULL_MASK ^ FILE_A
NOT_H = FULL_MASK ^ FILE_H


def _bit(x: int, y: int) -> int:
    return 1 << (x + BOARD_SIZE * y)


# One shift per compass direction; x grows with the bit index, y by 8.
SHIFTS = (
    lambda b: ((b & NOT_H) << 1) & FULL_MASK,
    lambda b: (b & NOT_A) >> 1,
    lambda b: (b << 8) & FULL_MASK,
    lambda b: b >> 8,
    lambda b: ((b & NOT_H) << 9) & FULL_MASK,
    lambda b: ((b & NOT_A) << 7) & FULL_MASK,
    lambda b: (b & NOT_H) >> 7,
    lambda b: (b & NOT_A) >> 9,
)

POSITION_MASKS = {
    position: sum(
        1 << index
        for index, square in enumerate(SQUARE_POSITIONS)
        if square is position
    )
    for position in POSITION_WEIGHTS
}


class Board:
    def __init__(self) -> None:
        """Create a board in the standard opening position."""
        self.taken = _bit(3, 3) | _bit(3, 4) | _bit(4, 3) | _bit(4, 4)
        self.black = _bit(4, 3) | _bit(3, 4)

    @classmethod
    def from_string(cls, data: str) -> Board:
        board = cls()
        board.set_board(data)
        return board

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        new_board = Board.__new__(Board)
        new_board.taken = self.taken
        new_board.black = self.black
        return new_board

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.taken == other.taken and self.black == other.black

    # ------------------------------------------------------------------
    # Square queries
    # ------------------------------------------------------------------

    @staticmethod
    def on_board(x: int, y: int) -> bool:
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def is_occupied(self, x: int, y: int) -> bool:
        return bool(self.taken & _bit(x, y))

    def get(self, side: Side, x: int, y: int) -> bool:
        """True iff (x, y) holds a piece of ``side``."""
        bit = _bit(x, y)
        if not self.taken & bit:
            return False
        return bool(self.black & bit) == (side is Side.BLACK)

    def set(self, side: Side, x: int, y: int) -> None:
        """Place a piece of ``side`` at (x, y) without capturing anything."""
        bit = _bit(x, y)
        self.taken |= bit
        if side is Side.BLACK:
            self.black |= bit
        else:
            self.black &= ~bit

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------

    def _brackets(self, x: int, y: int, dx: int, dy: int, side: Side) -> bool:
        """True iff the run from (x, y) along (dx, dy) is one or more
        opposing pieces capped by a piece of ``side``."""
        other = side.opposite()
        x += dx
        y += dy
        if not (self.on_board(x, y) and self.get(other, x, y)):
            return False
        while self.on_board(x, y) and self.get(other, x, y):
            x += dx
            y += dy
        return self.on_board(x, y) and self.get(side, x, y)

    def is_legal_move(self, move: Move | None, side: Side) -> bool:
        # Passing is only legal with no placements available.
        if move is None:
            return not self.has_moves(side)

        x, y = move.x, move.y
        if self.is_occupied(x, y):
            return False
        return any(self._brackets(x, y, dx, dy, side) for dx, dy in DIRECTIONS)

    def _own_and_other(self, side: Side) -> tuple[int, int]:
        white = self.taken & ~self.black
        if side is Side.BLACK:
            return self.black, white
        return white, self.black

    def legal_mask(self, side: Side) -> int:
        """Bit-set of every legal placement for ``side``.

        Same answer as testing each square with is_legal_move(), computed a
        whole board at a time by shifting runs of opposing pieces.
        """
        own, other = self._own_and_other(side)
        empty = ~self.taken & FULL_MASK
        moves = 0
        for shift in SHIFTS:
            run = shift(own) & other
            grown = run
            while grown:
                grown = shift(grown) & other
                run |= grown
            moves |= shift(run) & empty
        return moves

    def has_moves(self, side: Side) -> bool:
        return self.legal_mask(side) != 0

    def _iter_legal(self, side: Side) -> Iterator[Move]:
        mask = self.legal_mask(side)
        while mask:
            low = mask & -mask
            yield Move.from_index(low.bit_length() - 1)
            mask ^= low

    def legal_moves(self, side: Side) -> list[Move]:
        """All legal placements for ``side`` in square index order."""
        return list(self._iter_legal(side))

    def is_done(self) -> bool:
        """The game is over once neither side can place a piece."""
        return not (self.has_moves(Side.BLACK) or self.has_moves(Side.WHITE))

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------

    def apply_move(self, move: Move | None, side: Side) -> None:
        """Play ``move`` for ``side``, flipping every bracketed run.

        A pass or an illegal move leaves the board unchanged.
        """
        if move is None or not self.is_legal_move(move, side):
            return

        other = side.opposite()
        for dx, dy in DIRECTIONS:
            if not self._brackets(move.x, move.y, dx, dy, side):
                continue
            x, y = move.x + dx, move.y + dy
            while self.get(other, x, y):
                self.set(side, x, y)
                x += dx
                y += dy
        self.set(side, move.x, move.y)

    # ------------------------------------------------------------------
    # Counting and evaluation
    # ------------------------------------------------------------------

    def count_black(self) -> int:
        return self.black.bit_count()

    def count_white(self) -> int:
        return self.taken.bit_count() - self.black.bit_count()

    def count_total(self) -> int:
        return self.taken.bit_count()

    def count(self, side: Side) -> int:
        return self.count_black() if side is Side.BLACK else self.count_white()

    def score(self, side: Side, simple: bool = False) -> int:
        """Heuristic value of the position for ``side``; higher is better.

        Args:
            side: Side to score for
            simple: Use the plain piece difference instead of positional
                weights

        Returns:
            The score from ``side``'s point of view
        """
        if simple:
            return self.count(side) - self.count(side.opposite())

        own, other = self._own_and_other(side)
        total = 0
        for position, mask in POSITION_MASKS.items():
            diff = (own & mask).bit_count() - (other & mask).bit_count()
            total += POSITION_WEIGHTS[position] * diff
        return total

    # ------------------------------------------------------------------
    # Text form
    # ------------------------------------------------------------------

    def set_board(self, data: str) -> None:
        """Load a 64-character board string.

        'b'/'X' is a black piece, 'w'/'O' a white piece and '-', '.' or a
        space an empty square, in square index order.

        Raises:
            ValueError: On a wrong length or an unknown character
        """
        if len(data) != NUM_SQUARES:
            raise ValueError(
                f"Board string must have {NUM_SQUARES} characters, got {len(data)}"
            )
        taken = 0
        black = 0
        for index, char in enumerate(data):
            if char in BLACK_CHARS:
                taken |= 1 << index
                black |= 1 << index
            elif char in WHITE_CHARS:
                taken |= 1 << index
            elif char not in EMPTY_CHARS:
                raise ValueError(f"Unknown board character {char!r} at {index}")
        self.taken = taken
        self.black = black

    def to_string(self) -> str:
        chars = []
        for index in range(NUM_SQUARES):
            bit = 1 << index
            if not self.taken & bit:
                chars.append("-")
            elif self.black & bit:
                chars.append("X")
            else:
                chars.append("O")
        return "".join(chars)

    def __str__(self) -> str:
        text = self.to_string()
        lines = ["  " + " ".join(str(x) for x in range(BOARD_SIZE))]
        for y in range(BOARD_SIZE):
            row = text[y * BOARD_SIZE : (y + 1) * BOARD_SIZE]
            lines.append(f"{y} " + " ".join(row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"
