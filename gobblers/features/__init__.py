"""Board views: numpy grids, ASCII rendering and layout parsing."""

from .observation import (
    GRID_POSITIONS,
    SIZE_CHANNELS,
    build_grid,
    parse_board,
    parse_cell,
    parse_player,
    render_board,
)

__all__ = [
    "GRID_POSITIONS",
    "SIZE_CHANNELS",
    "build_grid",
    "parse_board",
    "parse_cell",
    "parse_player",
    "render_board",
]
