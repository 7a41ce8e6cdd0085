"""Terminal front end rendering and command handling."""

import pytest

from Probability_Omok.ProbOmokgame import ProbOmokgame
from Probability_Omok.gui import text_view


def new_game(rand=lambda: 0.0):
    return ProbOmokgame(rand=rand, logger=lambda *_: None)


def test_board_shows_marker_digits():
    game = new_game()
    game.place_piece(0, 0)
    game.end_turn()
    game.place_piece(0, 1)
    lines = text_view.format_board(game.snapshot()).splitlines()
    assert len(lines) == 16
    assert lines[1].split() == ["0", "9", "1"] + ["."] * 13


def test_board_shows_resolved_pieces_and_winners():
    game = new_game()
    for col in range(4):
        game.place_piece(7, col)
        game.end_turn()
        game.place_piece(0, col)
        game.end_turn()
    game.place_piece(7, 4)
    game.request_preview()
    lines = text_view.format_board(game.snapshot()).splitlines()
    assert lines[8].split() == ["7"] + ["*"] * 5 + ["."] * 10
    assert lines[1].split() == ["0"] + ["X"] * 4 + ["."] * 11


def test_status_lines():
    game = new_game()
    status = text_view.format_status(game.snapshot())
    assert status.splitlines() == [
        "Current Turn: Black",
        "Next Piece: 90% Black",
        "Previews Left: 1",
        "Place a Piece",
    ]
    game.place_piece(3, 3)
    assert "Next Piece" not in text_view.format_status(game.snapshot())


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("p 3 4", ("p", (3, 4))),
        ("  P 0 14 ", ("p", (0, 14))),
        ("v", ("v", ())),
        ("e", ("e", ())),
        ("q", ("q", ())),
    ],
)
def test_parse_command(raw, expected):
    assert text_view.parse_command(raw) == expected


@pytest.mark.parametrize("raw", ["", "p 1", "p a b", "x", "p 1 2 3"])
def test_parse_command_rejects_malformed(raw):
    with pytest.raises(ValueError):
        text_view.parse_command(raw)


def test_run_drives_session_until_quit():
    game = new_game()
    script = iter(["p 7 7", "e", "p 7 7", "bogus", "q"])
    out = []
    view = text_view.TextView(read=lambda prompt: next(script), write=out.append)
    view.run(game)
    snap = game.snapshot()
    assert snap.board[7][7] != 0
    assert snap.current_player == 1
    assert any(line.startswith("Rejected (cell_occupied)") for line in out)
    assert any(line.startswith("Invalid input") for line in out)


def test_run_stops_on_eof():
    def read(prompt):
        raise EOFError

    out = []
    text_view.TextView(read=read, write=out.append).run(new_game())
    assert out[0] == text_view.HELP
