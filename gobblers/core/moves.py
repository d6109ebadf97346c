from __future__ import annotations

from typing import List

from .rules import can_place, figure_size, remaining_sizes, make_figure, top_color, top_figure, winner
from .state import NUM_SQUARES, Color, State, get_player, get_square, set_player, set_square
from .symmetry import canonicalize


def _finish_move(board: State, opponent: Color) -> State:
    return canonicalize(set_player(board, opponent))


def enumerate_placements(state: State) -> List[State]:
    playing = get_player(state)
    opponent = playing.opponent
    successors: List[State] = []
    for size in remaining_sizes(state):
        figure = make_figure(size, playing)
        for position in range(NUM_SQUARES):
            square = get_square(state, position)
            if not can_place(square, size):
                continue
            board = set_square(state, position, square | figure)
            successors.append(_finish_move(board, opponent))
    return successors


def enumerate_relocations(state: State) -> List[State]:
    playing = get_player(state)
    opponent = playing.opponent
    successors: List[State] = []
    for position in range(NUM_SQUARES):
        square = get_square(state, position)
        if top_color(square) != playing:
            continue
        figure = top_figure(square)
        size = figure_size(figure)
        lifted = set_square(state, position, square & ~figure)
        # Lifting a piece must not uncover a finished line.
        if winner(lifted) != Color.EMPTY:
            continue
        for target in range(NUM_SQUARES):
            if target == position:
                continue
            target_square = get_square(lifted, target)
            if not can_place(target_square, size):
                continue
            board = set_square(lifted, target, target_square | figure)
            successors.append(_finish_move(board, opponent))
    return successors


def enumerate_successors(state: State) -> List[State]:
    """All canonical successor states, placements first then relocations.

    Two different moves may reach the same canonical successor; both are kept so
    that the length of the list is the node's expected child count.
    """
    return enumerate_placements(state) + enumerate_relocations(state)
