"""Pick the next move from a solved graph.

Outcomes stored on a record are from the point of view of that record's mover,
i.e. the opponent of whoever chose the move. A candidate that is lost for its
own mover is therefore a winning choice and vice versa.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional, Tuple

from gobblers.core import State

from .records import GraphRecord, Outcome


class Verdict(Enum):
    WIN = "win"
    UNDETERMINED = "undetermined"
    LOSS = "loss"


_VERDICT_RANK = {Verdict.WIN: 0, Verdict.UNDETERMINED: 1, Verdict.LOSS: 2}


@dataclass(frozen=True)
class MoveChoice:
    state: State
    child_count: int
    bad_children: int
    outcome: Outcome
    verdict: Verdict
    depth: Optional[int]

    def as_dict(self) -> dict:
        return {
            "state": self.state,
            "child_count": self.child_count,
            "bad_children": self.bad_children,
            "outcome": self.outcome.value,
            "verdict": self.verdict.value,
            "depth": self.depth,
        }


def verdict_for_chooser(record: GraphRecord) -> Verdict:
    if record.lost:
        return Verdict.WIN
    if record.won:
        return Verdict.LOSS
    return Verdict.UNDETERMINED


def _sort_key(choice: MoveChoice) -> Tuple[int, int, int, int]:
    depth = choice.depth or 0
    if choice.verdict == Verdict.WIN:
        # Immediate wins (no children) first, then the quickest forced win.
        return (_VERDICT_RANK[choice.verdict], 0 if choice.child_count == 0 else 1, depth, choice.state)
    if choice.verdict == Verdict.LOSS:
        return (_VERDICT_RANK[choice.verdict], -depth, 0, choice.state)
    return (_VERDICT_RANK[choice.verdict], -choice.bad_children, choice.child_count, choice.state)


def candidate_moves(origin: State, records: Mapping[State, GraphRecord]) -> List[MoveChoice]:
    """Every recorded successor of ``origin``, best first."""
    choices = [
        MoveChoice(
            state=state,
            child_count=record.child_count,
            bad_children=record.bad_children,
            outcome=record.outcome,
            verdict=verdict_for_chooser(record),
            depth=record.depth,
        )
        for state, record in records.items()
        if origin in record.predecessors
    ]
    choices.sort(key=_sort_key)
    return choices


def best_move(origin: State, records: Mapping[State, GraphRecord]) -> Optional[MoveChoice]:
    choices = candidate_moves(origin, records)
    return choices[0] if choices else None
