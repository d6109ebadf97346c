import pytest

from gobblers.core import (
    Color,
    Size,
    can_place,
    encode_state,
    figure_color,
    figure_size,
    initial_state,
    make_figure,
    remaining_sizes,
    reserve_counts,
    set_player,
    set_square,
    size_shift,
    square_color,
    square_figure,
    top_color,
    top_figure,
    winner,
)

S, M, L = int(Size.SMALL), int(Size.MEDIUM), int(Size.LARGE)
O, B = int(Color.ORANGE), int(Color.BLUE)
EMPTY = 0


def default_state() -> int:
    state = 0
    state = set_square(state, 2, S * O + L * B)
    state = set_square(state, 6, S * B + L * O)
    state = set_square(state, 0, M * O + L * B)
    state = set_square(state, 1, S * B + L * O)
    return set_player(state, Color.ORANGE)


def test_remaining_sizes_tracks_reserve() -> None:
    state = default_state()
    assert remaining_sizes(state) == [Size.SMALL, Size.MEDIUM]

    state = set_square(state, 3, S * O)
    assert remaining_sizes(state) == [Size.MEDIUM]

    state = set_square(state, 8, S * O + M * O)
    assert remaining_sizes(state) == []


def test_remaining_sizes_on_empty_board() -> None:
    for player in (Color.ORANGE, Color.BLUE):
        assert remaining_sizes(initial_state(player)) == [Size.SMALL, Size.MEDIUM, Size.LARGE]


def test_remaining_sizes_ignores_opponent_pieces() -> None:
    state = initial_state(Color.ORANGE)
    state = set_square(state, 1, S * O)
    state = set_square(state, 2, S * O)
    assert remaining_sizes(state) == [Size.MEDIUM, Size.LARGE]

    state = set_square(state, 3, S * B + M * B + L * B)
    state = set_square(state, 4, S * B + M * B + L * B)
    assert remaining_sizes(state) == [Size.MEDIUM, Size.LARGE]
    assert remaining_sizes(set_player(state, Color.BLUE)) == []


def test_reserve_counts_per_colour() -> None:
    counts = reserve_counts(default_state(), Color.BLUE)
    assert counts == {Size.SMALL: 0, Size.MEDIUM: 2, Size.LARGE: 0}


def test_figure_arithmetic() -> None:
    assert make_figure(Size.SMALL, Color.ORANGE) == S * O
    assert make_figure(Size.MEDIUM, Color.BLUE) == M * B
    assert make_figure(Size.LARGE, Color.BLUE) == L * B
    assert figure_size(S * O) == Size.SMALL
    assert figure_size(S * B) == Size.SMALL
    assert figure_size(L * B) == Size.LARGE
    assert figure_color(M * B) == Color.BLUE
    assert figure_color(L * O) == Color.ORANGE


def test_malformed_codes_fail_fast() -> None:
    with pytest.raises(ValueError):
        size_shift(3)
    with pytest.raises(ValueError):
        figure_size(3)
    with pytest.raises(ValueError):
        make_figure(Size.LARGE, Color.EMPTY)


def test_square_color() -> None:
    assert square_color(S * O + M * B, Size.SMALL) == Color.ORANGE
    assert square_color(S * O + M * B, Size.MEDIUM) == Color.BLUE
    assert square_color(S * O + M * B, Size.LARGE) == Color.EMPTY
    assert square_color(EMPTY, Size.SMALL) == Color.EMPTY
    assert square_color(L * O, Size.SMALL) == Color.EMPTY
    assert square_color(L * O, Size.LARGE) == Color.ORANGE


def test_square_figure() -> None:
    assert square_figure(S * O + M * B, Size.SMALL) == S * O
    assert square_figure(S * O + M * B, Size.MEDIUM) == M * B
    assert square_figure(S * O + M * B, Size.LARGE) == EMPTY
    assert square_figure(L * O, Size.SMALL) == EMPTY
    assert square_figure(L * O, Size.LARGE) == L * O


def test_top_figure_and_colour() -> None:
    assert top_figure(S * O + M * B) == M * B
    assert top_figure(EMPTY) == EMPTY
    assert top_figure(L * O) == L * O
    assert top_color(S * B + M * O + L * B) == Color.BLUE
    assert top_color(S * O) == Color.ORANGE
    assert top_color(EMPTY) == Color.EMPTY


def test_can_place_checks_only_the_size_slot() -> None:
    assert not can_place(S * O + M * B, Size.SMALL)
    assert not can_place(S * O + M * B, Size.MEDIUM)
    assert can_place(S * O + M * B, Size.LARGE)
    assert can_place(EMPTY, Size.SMALL)
    assert can_place(EMPTY, Size.LARGE)
    assert can_place(L * O, Size.SMALL)
    assert not can_place(L * O, Size.LARGE)
    assert not can_place(L * B, Size.LARGE)


def test_winner_row_of_mixed_sizes() -> None:
    squares = [0] * 9
    squares[1] = L * O
    squares[2] = M * O
    squares[3] = S * O
    assert winner(encode_state(Color.BLUE, squares)) == Color.ORANGE


def test_winner_diagonal() -> None:
    squares = [0] * 9
    squares[3] = M * B
    squares[0] = S * O + L * B
    squares[7] = L * B
    assert winner(encode_state(Color.ORANGE, squares)) == Color.BLUE


def test_winner_requires_top_visible_pieces() -> None:
    squares = [0] * 9
    squares[1] = L * O
    squares[2] = S * O + M * B
    squares[3] = M * O
    assert winner(encode_state(Color.BLUE, squares)) == Color.EMPTY


def test_no_winner_on_empty_board() -> None:
    assert winner(initial_state()) == Color.EMPTY
