from __future__ import annotations

from typing import Dict, List, Tuple

from .state import (
    NUM_SQUARES,
    Color,
    Figure,
    Size,
    Square,
    State,
    get_player,
    get_square,
    set_player,
)

PIECES_PER_SIZE = 2
SIZES_ASCENDING: Tuple[Size, ...] = (Size.SMALL, Size.MEDIUM, Size.LARGE)
SIZES_DESCENDING: Tuple[Size, ...] = (Size.LARGE, Size.MEDIUM, Size.SMALL)
TRIPLES: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 3),
    (8, 0, 4),
    (7, 6, 5),
    (1, 8, 7),
    (2, 0, 6),
    (3, 4, 5),
    (1, 0, 5),
    (3, 0, 7),
)

_SIZE_SHIFTS: Dict[int, int] = {Size.SMALL: 0, Size.MEDIUM: 2, Size.LARGE: 4}


def size_shift(size: Size) -> int:
    try:
        return _SIZE_SHIFTS[size]
    except KeyError:
        raise ValueError(f"Invalid figure size {size}") from None


def make_figure(size: Size, color: Color) -> Figure:
    if color not in (Color.ORANGE, Color.BLUE):
        raise ValueError(f"Invalid figure color {color}")
    return int(color) << size_shift(size)


def figure_size(figure: Figure) -> Size:
    if figure in (1, 2):
        return Size.SMALL
    if figure in (4, 8):
        return Size.MEDIUM
    if figure in (16, 32):
        return Size.LARGE
    raise ValueError(f"Invalid figure {figure}")


def figure_color(figure: Figure) -> Color:
    size = figure_size(figure)
    return Color(figure >> size_shift(size))


def square_color(square: Square, size: Size) -> Color:
    return Color((square >> size_shift(size)) & 0b11)


def square_figure(square: Square, size: Size) -> Figure:
    shift = size_shift(size)
    return ((square >> shift) & 0b11) << shift


def top_figure(square: Square) -> Figure:
    for size in SIZES_DESCENDING:
        figure = square_figure(square, size)
        if figure:
            return figure
    return 0


def top_color(square: Square) -> Color:
    for size in SIZES_DESCENDING:
        color = square_color(square, size)
        if color != Color.EMPTY:
            return color
    return Color.EMPTY


def top_color_at(state: State, position: int) -> Color:
    return top_color(get_square(state, position))


def can_place(square: Square, size: Size) -> bool:
    return square_color(square, size) == Color.EMPTY


def reserve_counts(state: State, color: Color) -> Dict[Size, int]:
    counts = {size: PIECES_PER_SIZE for size in SIZES_ASCENDING}
    for position in range(NUM_SQUARES):
        square = get_square(state, position)
        for size in SIZES_ASCENDING:
            if square_color(square, size) == color:
                counts[size] -= 1
    return counts


def remaining_sizes(state: State) -> List[Size]:
    counts = reserve_counts(state, get_player(state))
    return [size for size in SIZES_ASCENDING if counts[size] > 0]


def winner(state: State) -> Color:
    tops = [top_color_at(state, position) for position in range(NUM_SQUARES)]
    for a, b, c in TRIPLES:
        if tops[a] != Color.EMPTY and tops[a] == tops[b] == tops[c]:
            return tops[a]
    return Color.EMPTY


def initial_state(player: Color = Color.ORANGE) -> State:
    return set_player(0, player)
