from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Tuple

# Board layout (positions are chosen so that a quarter turn only shifts the ring):
#   1 2 3
#   8 0 4
#   7 6 5

State = int
Square = int
Figure = int

NUM_SQUARES = 9
SQUARE_BITS = 6
SQUARE_MASK = (1 << SQUARE_BITS) - 1
PLAYER_SHIFT = SQUARE_BITS * NUM_SQUARES
PLAYER_MASK = 0b11


class Size(IntEnum):
    SMALL = 1
    MEDIUM = 4
    LARGE = 16


class Color(IntEnum):
    EMPTY = 0
    ORANGE = 1
    BLUE = 2

    @property
    def opponent(self) -> "Color":
        if self == Color.ORANGE:
            return Color.BLUE
        if self == Color.BLUE:
            return Color.ORANGE
        raise ValueError(f"Invalid player color {int(self)}")


@dataclass(frozen=True)
class Board:
    player: Color
    squares: Tuple[Square, ...]

    def to_state(self) -> State:
        return encode_state(self.player, self.squares)

    @staticmethod
    def from_state(state: State) -> "Board":
        return decode_state(state)


def _check_position(position: int) -> None:
    if not 0 <= position < NUM_SQUARES:
        raise ValueError(f"Position {position} out of range.")


def _check_square(square: Square) -> None:
    if not 0 <= square <= SQUARE_MASK:
        raise ValueError(f"Square value {square} does not fit in {SQUARE_BITS} bits.")


def _check_player(player: Color) -> Color:
    try:
        return Color(player)
    except ValueError:
        raise ValueError(f"Invalid player color {player}.") from None


def get_square(state: State, position: int) -> Square:
    _check_position(position)
    return (state >> (position * SQUARE_BITS)) & SQUARE_MASK


def set_square(state: State, position: int, square: Square) -> State:
    _check_position(position)
    _check_square(square)
    shift = position * SQUARE_BITS
    cleared = state & ~(SQUARE_MASK << shift)
    return cleared | (square << shift)


def get_player(state: State) -> Color:
    return Color((state >> PLAYER_SHIFT) & PLAYER_MASK)


def set_player(state: State, player: Color) -> State:
    player = _check_player(player)
    cleared = state & ~(PLAYER_MASK << PLAYER_SHIFT)
    return cleared | (int(player) << PLAYER_SHIFT)


def encode_state(player: Color, squares: Sequence[Square]) -> State:
    if len(squares) != NUM_SQUARES:
        raise ValueError(f"Expected {NUM_SQUARES} squares, got {len(squares)}.")
    state = 0
    for position, square in enumerate(squares):
        state = set_square(state, position, square)
    return set_player(state, player)


def decode_state(state: State) -> Board:
    squares = tuple(get_square(state, position) for position in range(NUM_SQUARES))
    return Board(player=get_player(state), squares=squares)
