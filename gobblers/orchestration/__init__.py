"""Run a full solve and summarise it."""

from .loop import SolveConfig, SolveSummary, solve_position

__all__ = ["SolveConfig", "SolveSummary", "solve_position"]
