"""Five-in-a-row detection over a resolved board, with per-colour first-found lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

try:
    from .markers import BLACK, WHITE, EMPTY
except ImportError:
    from engine.markers import BLACK, WHITE, EMPTY


# Horizontal, vertical, diagonal down-right, diagonal down-left as (d_row, d_col).
# Order matters: the first qualifying line per colour is the one reported.
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]

WIN_LENGTH = 5

DRAW_BOTH_WIN = "draw_both_win"
BLACK_WINS = "black_wins"
WHITE_WINS = "white_wins"
DRAW_BOARD_FULL = "draw_board_full"

OUTCOME_TEXT = {
    DRAW_BOTH_WIN: "Draw! Both Players Win!",
    BLACK_WINS: "Black Wins!",
    WHITE_WINS: "White Wins!",
    DRAW_BOARD_FULL: "Draw! Board Full!",
}


@dataclass
class WinningPieces:
    black: List[Tuple[int, int]] = field(default_factory=list)
    white: List[Tuple[int, int]] = field(default_factory=list)

    def for_color(self, color: int) -> List[Tuple[int, int]]:
        return self.black if color == BLACK else self.white

    def __bool__(self):
        return bool(self.black or self.white)


def _forward_run(cells, row: int, col: int, d_row: int, d_col: int) -> List[Tuple[int, int]]:
    """Coordinates of the same-coloured run starting at (row, col), at most WIN_LENGTH long."""
    size = len(cells)
    color = cells[row][col]
    run = [(row, col)]
    for step in range(1, WIN_LENGTH):
        r = row + d_row * step
        c = col + d_col * step
        if not (0 <= r < size and 0 <= c < size):
            break
        if cells[r][c] != color:
            break
        run.append((r, c))
    return run


def is_full(cells) -> bool:
    return all(piece != EMPTY for row in cells for piece in row)


def find_winning_lines(cells) -> WinningPieces:
    """Scan origins row-major; keep the first line of five found for each colour."""
    found = WinningPieces()
    for row, line in enumerate(cells):
        for col, piece in enumerate(line):
            if piece == EMPTY:
                continue
            for d_row, d_col in DIRECTIONS:
                if found.for_color(piece):
                    break
                run = _forward_run(cells, row, col, d_row, d_col)
                if len(run) >= WIN_LENGTH:
                    if piece == BLACK:
                        found.black = run
                    elif piece == WHITE:
                        found.white = run
    return found


def classify(cells, lines: WinningPieces):
    """Return the outcome key for a resolved board, or None while play continues."""
    if lines.black and lines.white:
        return DRAW_BOTH_WIN
    if lines.black:
        return BLACK_WINS
    if lines.white:
        return WHITE_WINS
    if is_full(cells):
        return DRAW_BOARD_FULL
    return None


def check_winner(cells):
    """Return (outcome, WinningPieces) for a freshly resolved board."""
    lines = find_winning_lines(cells)
    return classify(cells, lines), lines


def outcome_text(outcome) -> str:
    return OUTCOME_TEXT.get(outcome, "")
