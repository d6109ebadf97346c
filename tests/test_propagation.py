import pytest

from gobblers.solver import GraphRecord, Outcome, propagate, propagate_edge
from gobblers.validation import GraphIntegrityError

TERMINAL, LEFT, RIGHT, ROOT = 1, 2, 3, 4


def depth_two_graph(root_children: int = 2):
    return {
        TERMINAL: GraphRecord(0, [LEFT, RIGHT], terminal=True),
        LEFT: GraphRecord(2, [ROOT]),
        RIGHT: GraphRecord(1, [ROOT]),
        ROOT: GraphRecord(root_children, []),
    }


def test_terminal_record_is_lost_for_its_mover() -> None:
    record = GraphRecord(0, [LEFT], terminal=True)
    assert record.outcome == Outcome.LOSS
    assert record.depth == 0


def test_depth_two_graph_resolves_win_then_loss() -> None:
    records = depth_two_graph()
    resolved = propagate(records, records[TERMINAL].predecessors, winning=True)

    assert resolved == [LEFT, RIGHT, ROOT]
    assert records[LEFT].outcome == Outcome.WIN
    assert records[RIGHT].outcome == Outcome.WIN
    assert records[ROOT].outcome == Outcome.LOSS
    assert records[ROOT].bad_children == 2
    assert records[LEFT].depth == 1
    assert records[ROOT].depth == 2


def test_partially_refuted_root_stays_undetermined() -> None:
    records = depth_two_graph(root_children=3)
    propagate(records, [LEFT, RIGHT], winning=True)

    assert records[ROOT].outcome == Outcome.UNDETERMINED
    assert records[ROOT].bad_children == 2
    assert records[ROOT].depth is None


def test_won_records_are_not_counted() -> None:
    records = {LEFT: GraphRecord(2, [])}
    records[LEFT].won = True
    assert propagate(records, [LEFT], winning=False) == []
    assert records[LEFT].bad_children == 0
    assert records[LEFT].outcome == Outcome.WIN


def test_missing_predecessor_fails_loudly() -> None:
    records = {LEFT: GraphRecord(1, [99])}
    with pytest.raises(GraphIntegrityError):
        propagate(records, [LEFT], winning=True)


def test_late_edge_to_won_child_counts_against_parent() -> None:
    records = {LEFT: GraphRecord(3, [ROOT]), ROOT: GraphRecord(1, [])}
    records[LEFT].won = True
    records[LEFT].depth = 1

    assert propagate_edge(records, LEFT, ROOT) == [ROOT]
    assert records[ROOT].outcome == Outcome.LOSS
    assert records[ROOT].depth == 2


def test_late_edge_to_lost_child_wins_parent() -> None:
    records = {TERMINAL: GraphRecord(0, [RIGHT], terminal=True), RIGHT: GraphRecord(5, [])}
    assert propagate_edge(records, TERMINAL, RIGHT) == [RIGHT]
    assert records[RIGHT].outcome == Outcome.WIN
    assert records[RIGHT].depth == 1


def test_late_edge_to_open_child_is_a_no_op() -> None:
    records = {LEFT: GraphRecord(3, [ROOT]), ROOT: GraphRecord(1, [])}
    assert propagate_edge(records, LEFT, ROOT) == []
    assert records[ROOT].outcome == Outcome.UNDETERMINED
