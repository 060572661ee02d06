"""Shared types: sides, moves and square classification."""

from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE


class Side(str, Enum):
    """Color of a player."""

    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @classmethod
    def parse(cls, name: str) -> "Side":
        """Parse 'BLACK' / 'white' etc. into a Side.

        Raises:
            ValueError: If the name is not a side
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown side '{name}', expected BLACK or WHITE") from None


def opposite(side: Side) -> Side:
    return side.opposite()


@dataclass(frozen=True)
class Move:
    """A placement at square (x, y).

    A pass is represented by ``None`` wherever a move is expected.
    """

    x: int
    y: int

    @property
    def index(self) -> int:
        return self.x + BOARD_SIZE * self.y

    @classmethod
    def from_index(cls, index: int) -> "Move":
        if not 0 <= index < NUM_SQUARES:
            raise ValueError(f"Square index {index} is outside 0..{NUM_SQUARES - 1}")
        return cls(index % BOARD_SIZE, index // BOARD_SIZE)

    def __str__(self) -> str:
        return f"Move: ({self.x}, {self.y})"


class Position(Enum):
    """Positional class of a square, used by the evaluation."""

    CORNER = "corner"
    EDGE = "edge"
    NEXT_TO_CORNER = "next_to_corner"
    DIAGONAL_TO_CORNER = "diagonal_to_corner"
    OTHER = "other"


POSITION_WEIGHTS: dict[Position, int] = {
    Position.CORNER: 3,
    Position.EDGE: 2,
    Position.NEXT_TO_CORNER: -2,
    Position.DIAGONAL_TO_CORNER: -3,
    Position.OTHER: 1,
}


def square_position(x: int, y: int, size: int = BOARD_SIZE) -> Position:
    """Classify a square from its coordinates alone."""
    last = size - 1
    on_x_edge = x in (0, last)
    on_y_edge = y in (0, last)

    if on_x_edge and on_y_edge:
        return Position.CORNER
    if x in (1, last - 1) and y in (1, last - 1):
        return Position.DIAGONAL_TO_CORNER
    # one step along an edge from a corner
    if (on_x_edge and y in (1, last - 1)) or (on_y_edge and x in (1, last - 1)):
        return Position.NEXT_TO_CORNER
    if on_x_edge or on_y_edge:
        return Position.EDGE
    return Position.OTHER


# Indexed by x + 8 * y
SQUARE_POSITIONS: tuple[Position, ...] = tuple(
    square_position(i % BOARD_SIZE, i // BOARD_SIZE) for i in range(NUM_SQUARES)
)
