from __future__ import annotations

from enum import Enum
from typing import Dict

from .state import SQUARE_BITS, SQUARE_MASK, State, get_player, set_player

# A quarter turn moves every ring square two positions back (3 -> 1, 4 -> 2, ...)
# and wraps squares 1 and 2 around to 7 and 8. The center (0) never moves.
_RING_STEP = SQUARE_BITS * 2
_CENTER_MASK = SQUARE_MASK
_WRAP_MASK = (SQUARE_MASK << SQUARE_BITS) | (SQUARE_MASK << (SQUARE_BITS * 2))
_WRAP_SHIFT = SQUARE_BITS * 6
_BOARD_MASK = (1 << (SQUARE_BITS * 9)) - 1


class Rotation(Enum):
    ROT0 = 0
    ROT90 = 1
    ROT180 = 2
    ROT270 = 3


def rotate_state(state: State) -> State:
    player = get_player(state)
    board = state & _BOARD_MASK
    center = board & _CENTER_MASK
    wrapped = (board & _WRAP_MASK) << _WRAP_SHIFT
    shifted = (board >> _RING_STEP) & ~_CENTER_MASK
    return set_player(shifted | wrapped | center, player)


def rotate_state_by(state: State, rotation: Rotation) -> State:
    for _ in range(rotation.value):
        state = rotate_state(state)
    return state


def all_rotations(state: State) -> Dict[Rotation, State]:
    images: Dict[Rotation, State] = {}
    current = state
    for rotation in Rotation:
        images[rotation] = current
        current = rotate_state(current)
    return images


def canonicalize(state: State) -> State:
    """Return the smallest encoding among the four rotations of ``state``."""
    player = get_player(state)
    best = state
    rotated = state
    for _ in range(3):
        rotated = rotate_state(rotated)
        if rotated < best:
            best = rotated
    return set_player(best, player)


def is_canonical(state: State) -> bool:
    return canonicalize(state) == state
