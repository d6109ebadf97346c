from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:  # pragma: no cover
    from gobblers.solver.records import GraphRecord


class GraphIntegrityError(RuntimeError):
    pass


def require_record(records: Mapping[int, "GraphRecord"], state: int) -> "GraphRecord":
    record = records.get(state)
    if record is None:
        raise GraphIntegrityError(f"found parent that has no record of its own: {state}")
    return record


def validate_records(records: Mapping[int, "GraphRecord"]) -> None:
    for state, record in records.items():
        if record.bad_children > record.child_count:
            raise GraphIntegrityError(
                f"state {state} has {record.bad_children} bad children out of {record.child_count}"
            )
        if record.terminal and record.child_count != 0:
            raise GraphIntegrityError(f"terminal state {state} records {record.child_count} children")
        if record.terminal and record.won:
            raise GraphIntegrityError(f"terminal state {state} is marked as won for its mover")
        for parent in record.predecessors:
            require_record(records, parent)
