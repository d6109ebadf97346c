from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from gobblers.core import State
from gobblers.solver import (
    ExplorationResult,
    ExplorerConfig,
    GraphExplorer,
    MoveChoice,
    candidate_moves,
)
from gobblers.validation import validate_records

logger = logging.getLogger(__name__)


@dataclass
class SolveConfig:
    max_iterations: int = 100_000_000
    propagate_late_edges: bool = True
    show_progress: bool = False
    validate: bool = False

    def explorer_config(self) -> ExplorerConfig:
        return ExplorerConfig(
            max_iterations=self.max_iterations,
            propagate_late_edges=self.propagate_late_edges,
            show_progress=self.show_progress,
        )


@dataclass
class SolveSummary:
    exploration: ExplorationResult
    best: Optional[MoveChoice]
    candidates: List[MoveChoice]

    @property
    def start(self) -> State:
        return self.exploration.start

    def outcome_counts(self) -> Dict[str, int]:
        counts = {"win": 0, "loss": 0, "undetermined": 0}
        for record in self.exploration.records.values():
            counts[record.outcome.value] += 1
        return counts

    def as_dict(self) -> Dict[str, object]:
        start_record = self.exploration.record(self.start)
        return {
            "start": self.start,
            "start_outcome": start_record.outcome.value if start_record is not None else None,
            **self.exploration.stats.as_dict(),
            "outcomes": self.outcome_counts(),
            "candidates": len(self.candidates),
            "best_move": self.best.as_dict() if self.best is not None else None,
        }


def solve_position(state: State, config: Optional[SolveConfig] = None) -> SolveSummary:
    config = config or SolveConfig()
    exploration = GraphExplorer(config.explorer_config()).run(state)
    if config.validate:
        validate_records(exploration.records)

    candidates = candidate_moves(exploration.start, exploration.records)
    best = candidates[0] if candidates else None
    if best is None:
        logger.info("no successor of the start state was explored")
    else:
        logger.info("best move leads to %d (%s for the mover)", best.state, best.verdict.value)
    return SolveSummary(exploration=exploration, best=best, candidates=candidates)
