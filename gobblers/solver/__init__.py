"""Graph exploration and retrograde solving."""

from .records import GraphRecord, Outcome
from .propagation import propagate, propagate_edge
from .explorer import ExplorationResult, ExplorationStats, ExplorerConfig, GraphExplorer, explore
from .selection import MoveChoice, Verdict, best_move, candidate_moves, verdict_for_chooser

__all__ = [
    "GraphRecord",
    "Outcome",
    "propagate",
    "propagate_edge",
    "ExplorationResult",
    "ExplorationStats",
    "ExplorerConfig",
    "GraphExplorer",
    "explore",
    "MoveChoice",
    "Verdict",
    "best_move",
    "candidate_moves",
    "verdict_for_chooser",
]
