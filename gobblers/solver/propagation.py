"""Retrograde (backward) win/loss propagation over the recorded parent edges.

A wave is a list of parent states together with a role. In a *winning* wave
each parent has a child that is lost for its mover, so the parent's mover wins.
In a *losing* wave each parent has one more child that is won for its mover,
which is bad for the parent; once all of a parent's children are bad the parent
is lost. Parents of every record resolved in a wave make up the next wave, with
the role flipped.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, MutableMapping

from gobblers.validation import require_record

from .records import GraphRecord

logger = logging.getLogger(__name__)


def propagate(
    records: MutableMapping[int, GraphRecord],
    predecessors: Iterable[int],
    *,
    winning: bool,
    depth: int = 1,
) -> List[int]:
    """Run waves until a fixed point and return the states resolved on the way."""
    resolved: List[int] = []
    wave = list(predecessors)
    while wave:
        next_wave: List[int] = []
        for state in wave:
            record = require_record(records, state)
            if record.resolved:
                continue
            if winning:
                record.won = True
            else:
                record.bad_children += 1
                if not record.lost:
                    continue
            record.depth = depth
            resolved.append(state)
            next_wave.extend(record.predecessors)
        wave = next_wave
        winning = not winning
        depth += 1
    if resolved:
        logger.debug("propagation resolved %d states", len(resolved))
    return resolved


def propagate_edge(records: MutableMapping[int, GraphRecord], child: int, parent: int) -> List[int]:
    """Account for an edge recorded after ``child`` was already resolved."""
    record = require_record(records, child)
    if not record.resolved:
        return []
    return propagate(records, [parent], winning=record.lost, depth=(record.depth or 0) + 1)
