"""Board placement rules and marker resolution."""

import random

import pytest

from Probability_Omok.Board import Board
from Probability_Omok.engine import markers, resolver
from Probability_Omok.engine.referee import RuleViolation, OutOfBoundsError, CellOccupiedError
from Probability_Omok.engine.win_detector import BLACK_WINS


def test_place_sets_marker_and_counts():
    b = Board()
    b.place(7, 7, markers.BLACK90)
    assert b.cells[7][7] == markers.BLACK90
    assert b.move_count == 1
    assert not b.is_empty(7, 7)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (15, 0), (0, 15), (20, 20)])
def test_place_out_of_bounds_raises(row, col):
    b = Board()
    with pytest.raises(OutOfBoundsError) as info:
        b.place(row, col, markers.BLACK90)
    assert info.value.kind == "out_of_bounds"
    assert b.move_count == 0


def test_occupied_cell_is_permanent():
    b = Board()
    b.place(3, 4, markers.BLACK10)
    with pytest.raises(CellOccupiedError):
        b.place(3, 4, markers.BLACK90)
    assert b.cells[3][4] == markers.BLACK10
    assert b.move_count == 1


def test_rule_violations_are_value_errors():
    assert issubclass(RuleViolation, ValueError)


def test_unknown_marker_rejected():
    b = Board()
    with pytest.raises(ValueError):
        b.place(0, 0, 50)
    with pytest.raises(ValueError):
        b.place(0, 0, markers.EMPTY)


def test_clone_is_independent():
    b = Board()
    b.place(1, 1, markers.BLACK70)
    c = b.clone()
    c.place(2, 2, markers.BLACK30)
    assert b.is_empty(2, 2)
    assert c.cells[1][1] == markers.BLACK70
    assert c.move_count == 2


def test_resolve_empty_board():
    resolved, outcome, winning = Board().resolve(random.Random(0).random)
    assert all(piece == markers.EMPTY for row in resolved for piece in row)
    assert outcome is None
    assert not winning


@pytest.mark.parametrize(
    "marker, draw, expected",
    [
        (markers.BLACK90, 0.895, markers.BLACK),
        (markers.BLACK90, 0.905, markers.WHITE),
        (markers.BLACK70, 0.695, markers.BLACK),
        (markers.BLACK70, 0.705, markers.WHITE),
        (markers.BLACK30, 0.295, markers.BLACK),
        (markers.BLACK30, 0.305, markers.WHITE),
        (markers.BLACK10, 0.095, markers.BLACK),
        (markers.BLACK10, 0.105, markers.WHITE),
    ],
)
def test_resolution_thresholds(marker, draw, expected):
    assert markers.resolve_marker(marker, lambda: draw) == expected


def test_empty_cells_do_not_draw():
    calls = []

    def rand():
        calls.append(1)
        return 0.0

    b = Board()
    b.place(0, 0, markers.BLACK90)
    b.place(14, 14, markers.BLACK10)
    resolved, _, _ = b.resolve(rand)
    assert len(calls) == 2
    assert resolved[0][0] == markers.BLACK
    assert resolved[14][14] == markers.BLACK
    assert resolved[5][5] == markers.EMPTY


def test_resolve_does_not_touch_markers():
    b = Board()
    b.place(2, 2, markers.BLACK30)
    b.resolve(lambda: 0.0)
    assert b.cells[2][2] == markers.BLACK30


def test_resolutions_are_independent():
    # A scripted source that alternates draws: each call must take a fresh one.
    draws = iter([0.0, 0.99, 0.0, 0.99])
    b = Board()
    b.place(0, 0, markers.BLACK90)
    first, _, _ = b.resolve(lambda: next(draws))
    second, _, _ = b.resolve(lambda: next(draws))
    assert first[0][0] == markers.BLACK
    assert second[0][0] == markers.WHITE


def test_resolve_reports_win():
    b = Board()
    for col in range(3, 8):
        b.place(7, col, markers.BLACK10)
    resolved, outcome, winning = b.resolve(lambda: 0.0)
    assert outcome == BLACK_WINS
    assert winning.black == [(7, 3), (7, 4), (7, 5), (7, 6), (7, 7)]
    assert winning.white == []


def test_black90_resolves_black_about_nine_times_in_ten():
    rng = random.Random(2024)
    trials = 20000
    cells = [[markers.BLACK90]]
    blacks = sum(resolver.resolve_cells(cells, rng.random)[0][0] == markers.BLACK for _ in range(trials))
    assert abs(blacks / trials - 0.90) < 0.02


def test_black10_resolves_white_about_nine_times_in_ten():
    rng = random.Random(7)
    trials = 20000
    whites = sum(markers.resolve_marker(markers.BLACK10, rng.random) == markers.WHITE for _ in range(trials))
    assert abs(whites / trials - 0.90) < 0.02
