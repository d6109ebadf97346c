from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from gobblers.core import (
    SIZES_ASCENDING,
    SIZES_DESCENDING,
    Color,
    State,
    get_player,
    get_square,
    make_figure,
    reserve_counts,
    set_player,
    set_square,
    square_color,
)

GRID_DIM = 3
GRID_POSITIONS: Tuple[Tuple[int, int, int], ...] = ((1, 2, 3), (8, 0, 4), (7, 6, 5))
SIZE_CHANNELS = len(SIZES_ASCENDING)

_SYMBOLS = {Color.EMPTY: ".", Color.ORANGE: "O", Color.BLUE: "B"}
_COLOURS_BY_SYMBOL = {symbol: colour for colour, symbol in _SYMBOLS.items()}
_PLAYER_NAMES = {Color.ORANGE: "ORANGE", Color.BLUE: "BLUE"}


def build_grid(state: State) -> np.ndarray:
    """Return colours as an int8 array of shape (3, 3, 3): (size, row, col), small first."""
    grid = np.zeros((SIZE_CHANNELS, GRID_DIM, GRID_DIM), dtype=np.int8)
    for row, positions in enumerate(GRID_POSITIONS):
        for col, position in enumerate(positions):
            square = get_square(state, position)
            for channel, size in enumerate(SIZES_ASCENDING):
                grid[channel, row, col] = int(square_color(square, size))
    return grid


def render_board(state: State) -> str:
    grid = build_grid(state)
    rows = [
        " ".join(
            "".join(_SYMBOLS[Color(int(grid[channel, row, col]))] for channel in reversed(range(SIZE_CHANNELS)))
            for col in range(GRID_DIM)
        )
        for row in range(GRID_DIM)
    ]
    player = _PLAYER_NAMES.get(get_player(state), "NOBODY")
    return "\n".join(rows) + f"\nPlaying: {player}"


def parse_player(name: str) -> Color:
    key = name.strip().upper()
    for colour, player_name in _PLAYER_NAMES.items():
        if key in (player_name, _SYMBOLS[colour]):
            return colour
    raise ValueError(f"Unknown player {name!r}.")


def parse_cell(cell: str) -> int:
    """Parse a cell written large, medium, small, e.g. ``"B.O"``."""
    if len(cell) != len(SIZES_DESCENDING):
        raise ValueError(f"Cell {cell!r} must have {len(SIZES_DESCENDING)} characters.")
    square = 0
    for symbol, size in zip(cell.upper(), SIZES_DESCENDING):
        if symbol not in _COLOURS_BY_SYMBOL:
            raise ValueError(f"Unknown piece symbol {symbol!r} in cell {cell!r}.")
        colour = _COLOURS_BY_SYMBOL[symbol]
        if colour != Color.EMPTY:
            square |= make_figure(size, colour)
    return square


def parse_board(rows: Sequence[Union[str, Sequence[str]]], to_move: str) -> State:
    """Build a state from rows of cells, each row a list of cells or one space separated string."""
    rows = [row.split() if isinstance(row, str) else list(row) for row in rows]
    if len(rows) != GRID_DIM or any(len(row) != GRID_DIM for row in rows):
        raise ValueError("Board layout must be 3 rows of 3 cells.")
    state = set_player(0, parse_player(to_move))
    for row, positions in zip(rows, GRID_POSITIONS):
        for cell, position in zip(row, positions):
            state = set_square(state, position, parse_cell(cell))
    for colour in (Color.ORANGE, Color.BLUE):
        counts = reserve_counts(state, colour)
        if any(count < 0 for count in counts.values()):
            raise ValueError(f"Too many {_PLAYER_NAMES[colour].lower()} pieces of one size on the board.")
    return state
