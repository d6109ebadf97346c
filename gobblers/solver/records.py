from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional


class Outcome(Enum):
    UNDETERMINED = "undetermined"
    WIN = "win"
    LOSS = "loss"


class GraphRecord:
    """Everything the solver knows about one canonical state.

    ``bad_children`` counts successors already known to be a forced win for the
    opponent. The mover is lost once every child is bad (a terminal state has no
    children, so it is lost from the start) and has a forced win once ``won`` is
    set. ``depth`` is the distance in plies to the terminal state that decided
    the record, filled in when it is first resolved.
    """

    __slots__ = ("predecessors", "child_count", "bad_children", "won", "terminal", "depth")

    def __init__(
        self,
        child_count: int,
        predecessors: Optional[Iterable[int]] = None,
        *,
        terminal: bool = False,
    ) -> None:
        self.predecessors: List[int] = list(predecessors or [])
        self.child_count: int = child_count
        self.bad_children: int = 0
        self.won: bool = False
        self.terminal: bool = terminal
        self.depth: Optional[int] = 0 if terminal else None

    @property
    def lost(self) -> bool:
        return not self.won and self.bad_children == self.child_count

    @property
    def resolved(self) -> bool:
        return self.won or self.lost

    @property
    def outcome(self) -> Outcome:
        if self.won:
            return Outcome.WIN
        if self.lost:
            return Outcome.LOSS
        return Outcome.UNDETERMINED

    def add_parent(self, parent: Optional[int]) -> None:
        if parent is not None:
            self.predecessors.append(parent)

    def __repr__(self) -> str:
        return (
            f"GraphRecord(outcome={self.outcome.value}, children={self.child_count}, "
            f"bad={self.bad_children}, parents={len(self.predecessors)}, depth={self.depth})"
        )
