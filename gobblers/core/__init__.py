"""Core game logic: packed state codec, rules, symmetry and move generation."""

from .state import (
    NUM_SQUARES,
    Board,
    Color,
    Figure,
    Size,
    Square,
    State,
    decode_state,
    encode_state,
    get_player,
    get_square,
    set_player,
    set_square,
)
from .rules import (
    PIECES_PER_SIZE,
    SIZES_ASCENDING,
    SIZES_DESCENDING,
    TRIPLES,
    can_place,
    figure_color,
    figure_size,
    initial_state,
    make_figure,
    remaining_sizes,
    reserve_counts,
    size_shift,
    square_color,
    square_figure,
    top_color,
    top_color_at,
    top_figure,
    winner,
)
from .symmetry import Rotation, all_rotations, canonicalize, is_canonical, rotate_state, rotate_state_by
from .moves import enumerate_placements, enumerate_relocations, enumerate_successors

__all__ = [
    "NUM_SQUARES",
    "Board",
    "Color",
    "Figure",
    "Size",
    "Square",
    "State",
    "decode_state",
    "encode_state",
    "get_player",
    "get_square",
    "set_player",
    "set_square",
    "PIECES_PER_SIZE",
    "SIZES_ASCENDING",
    "SIZES_DESCENDING",
    "TRIPLES",
    "can_place",
    "figure_color",
    "figure_size",
    "initial_state",
    "make_figure",
    "remaining_sizes",
    "reserve_counts",
    "size_shift",
    "square_color",
    "square_figure",
    "top_color",
    "top_color_at",
    "top_figure",
    "winner",
    "Rotation",
    "all_rotations",
    "canonicalize",
    "is_canonical",
    "rotate_state",
    "rotate_state_by",
    "enumerate_placements",
    "enumerate_relocations",
    "enumerate_successors",
]
