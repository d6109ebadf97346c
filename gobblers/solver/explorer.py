from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass, field
from typing import Deque, Dict, Optional, Tuple

from tqdm.auto import tqdm

from gobblers.core import Color, State, canonicalize, enumerate_successors, get_player, winner
from gobblers.validation import GraphIntegrityError

from .propagation import propagate, propagate_edge
from .records import GraphRecord

logger = logging.getLogger(__name__)

QueueEntry = Tuple[State, Optional[State]]


@dataclass
class ExplorerConfig:
    max_iterations: int = 100_000_000
    propagate_late_edges: bool = True
    show_progress: bool = False


@dataclass
class ExplorationStats:
    visited: int = 0
    terminals: int = 0
    duplicates: int = 0
    pending: int = 0
    iterations: int = 0
    complete: bool = False

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass
class ExplorationResult:
    start: State
    records: Dict[State, GraphRecord] = field(default_factory=dict)
    stats: ExplorationStats = field(default_factory=ExplorationStats)

    def record(self, state: State) -> Optional[GraphRecord]:
        return self.records.get(canonicalize(state))


class GraphExplorer:
    """Breadth-first builder of the canonical state graph.

    Every state is expanded once. Reaching a known state again only adds the
    parent edge, so records can have many predecessors. Terminal states start a
    backward propagation as soon as they are found.
    """

    def __init__(self, config: Optional[ExplorerConfig] = None) -> None:
        self.config = config or ExplorerConfig()

    def run(self, start: State) -> ExplorationResult:
        start = canonicalize(start)
        mover = get_player(start)
        if mover == Color.EMPTY:
            raise ValueError("Start state has no player to move.")
        if winner(start) == mover:
            raise ValueError("Start state is already won by the player to move.")

        result = ExplorationResult(start=start)
        queue: Deque[QueueEntry] = deque([(start, None)])
        stats = result.stats

        with tqdm(desc="Exploring", unit="state", disable=not self.config.show_progress) as progress:
            while queue and stats.iterations < self.config.max_iterations:
                state, parent = queue.popleft()
                stats.iterations += 1
                self._visit(state, parent, result.records, queue, stats)
                progress.update(1)

        stats.complete = not queue
        stats.pending = len(queue)
        stats.visited = len(result.records)
        logger.info(
            "explored %d states (%d terminal, %d repeated) in %d iterations, %d pending",
            stats.visited,
            stats.terminals,
            stats.duplicates,
            stats.iterations,
            stats.pending,
        )
        return result

    # ------------------------------------------------------------------
    def _visit(
        self,
        state: State,
        parent: Optional[State],
        records: Dict[State, GraphRecord],
        queue: Deque[QueueEntry],
        stats: ExplorationStats,
    ) -> None:
        record = records.get(state)
        if record is not None:
            stats.duplicates += 1
            if parent is not None:
                record.add_parent(parent)
                if self.config.propagate_late_edges:
                    propagate_edge(records, state, parent)
            return

        parents = [parent] if parent is not None else []
        won_by = winner(state)
        if won_by != Color.EMPTY:
            if won_by == get_player(state):
                raise GraphIntegrityError(f"state {state} is won by the player to move")
            stats.terminals += 1
            records[state] = GraphRecord(0, parents, terminal=True)
            logger.debug("terminal state %d reached from %s", state, parent)
            propagate(records, parents, winning=True)
            return

        successors = enumerate_successors(state)
        for successor in successors:
            queue.append((successor, state))
        record = GraphRecord(len(successors), parents)
        records[state] = record
        if not successors:
            # No legal move: the mover is lost without a winning line on the board.
            record.depth = 0
            propagate(records, parents, winning=True)


def explore(start: State, config: Optional[ExplorerConfig] = None) -> ExplorationResult:
    return GraphExplorer(config).run(start)
