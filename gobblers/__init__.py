"""Retrograde solver for the three-size stacking game on a 3x3 board."""

from . import core, features, orchestration, solver, validation
from .core import Board, Color, Size, State, canonicalize, decode_state, encode_state, enumerate_successors, winner
from .features import build_grid, parse_board, render_board
from .solver import (
    ExplorationResult,
    ExplorerConfig,
    GraphExplorer,
    GraphRecord,
    MoveChoice,
    Outcome,
    Verdict,
    best_move,
    explore,
)
from .orchestration import SolveConfig, SolveSummary, solve_position
from .validation import GraphIntegrityError

__all__ = [
    "core",
    "features",
    "orchestration",
    "solver",
    "validation",
    "Board",
    "Color",
    "Size",
    "State",
    "canonicalize",
    "decode_state",
    "encode_state",
    "enumerate_successors",
    "winner",
    "build_grid",
    "parse_board",
    "render_board",
    "ExplorationResult",
    "ExplorerConfig",
    "GraphExplorer",
    "GraphRecord",
    "MoveChoice",
    "Outcome",
    "Verdict",
    "best_move",
    "explore",
    "SolveConfig",
    "SolveSummary",
    "solve_position",
    "GraphIntegrityError",
]
