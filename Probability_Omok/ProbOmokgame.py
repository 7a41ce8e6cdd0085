"""Game session: turn/phase state machine, preview allowance, and win handling."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

try:
    from Board import Board
    from engine import markers, referee, win_detector
except ImportError:
    from Probability_Omok.Board import Board
    from Probability_Omok.engine import markers, referee, win_detector


AWAITING_PLACEMENT = "awaiting_placement"
AWAITING_TURN_END = "awaiting_turn_end"

PLACE_HINT = "Place a Piece"
END_TURN_HINT = "Click End Turn"


@dataclass(frozen=True)
class GameView:
    """Read-only projection of the session for front ends."""

    board: Tuple[Tuple[int, ...], ...]
    resolved: Optional[Tuple[Tuple[int, ...], ...]]
    current_player: int
    next_marker: int
    phase: str
    moves_this_turn: int
    preview_shown: bool
    previews_left: int
    outcome: Optional[str]
    winning_black: Tuple[Tuple[int, int], ...]
    winning_white: Tuple[Tuple[int, int], ...]
    game_over: bool
    show_prob_hint: bool
    black_prob_index: int
    white_prob_index: int

    @property
    def outcome_text(self) -> str:
        return win_detector.outcome_text(self.outcome)

    @property
    def next_piece_text(self) -> str:
        return markers.NEXT_PIECE_TEXT[self.next_marker]

    @property
    def move_hint(self) -> str:
        return END_TURN_HINT if self.moves_this_turn > 0 else PLACE_HINT

    @property
    def can_place(self) -> bool:
        return not self.game_over and not self.preview_shown and self.moves_this_turn == 0

    @property
    def can_end_turn(self) -> bool:
        return not self.game_over and self.moves_this_turn > 0

    @property
    def can_toggle_preview(self) -> bool:
        return self.preview_shown or (not self.game_over and self.previews_left > 0)


@dataclass(frozen=True)
class ActionResult:
    ok: bool
    rejection: Optional[str] = None
    message: str = ""
    view: Optional[GameView] = None


class ProbOmokgame:
    def __init__(self, rand=None, logger=print):
        # rand: zero-argument callable returning floats in [0, 1)
        self.rand = rand or random.random
        self.logger = logger
        self._reset()

    def _reset(self):
        self.board = Board()
        self.current_player = markers.BLACK
        self.prob_index = {markers.BLACK: 0, markers.WHITE: 0}
        self.moves_this_turn = 0
        self.preview_shown = False
        self.previews_left = 1
        self.resolved = None
        self.outcome = None
        self.winning_pieces = win_detector.WinningPieces()
        self.game_over = False
        self.show_prob_hint = True
        self.turn_index = 0

    @property
    def phase(self):
        return AWAITING_TURN_END if self.moves_this_turn > 0 else AWAITING_PLACEMENT

    def current_marker(self):
        return markers.marker_for(self.current_player, self.prob_index[self.current_player])

    def snapshot(self) -> GameView:
        shown = self.preview_shown and self.resolved is not None
        return GameView(
            board=tuple(tuple(row) for row in self.board.cells),
            resolved=tuple(tuple(row) for row in self.resolved) if shown else None,
            current_player=self.current_player,
            next_marker=self.current_marker(),
            phase=self.phase,
            moves_this_turn=self.moves_this_turn,
            preview_shown=self.preview_shown,
            previews_left=self.previews_left,
            outcome=self.outcome,
            winning_black=tuple(self.winning_pieces.black),
            winning_white=tuple(self.winning_pieces.white),
            game_over=self.game_over,
            show_prob_hint=self.show_prob_hint,
            black_prob_index=self.prob_index[markers.BLACK],
            white_prob_index=self.prob_index[markers.WHITE],
        )

    def _accept(self, message=""):
        return ActionResult(ok=True, message=message, view=self.snapshot())

    def _reject(self, exc: referee.RuleViolation, action: str):
        self.logger(f"Rejected {action}: {exc} ({exc.kind})")
        return ActionResult(ok=False, rejection=exc.kind, message=str(exc), view=self.snapshot())

    def place_piece(self, row: int, col: int) -> ActionResult:
        """Place the current player's next marker at (row, col)."""
        try:
            referee.check_place(self, row, col)
            marker = self.current_marker()
            self.board.place(row, col, marker)
        except referee.RuleViolation as exc:
            return self._reject(exc, f"place {(row, col)}")

        self.moves_this_turn = 1
        self.show_prob_hint = False
        tag = "B" if self.current_player == markers.BLACK else "W"
        self.logger(f"Move {self.board.move_count}: {tag} {markers.MARKER_LABELS[marker]} {(row, col)}")
        return self._accept()

    def request_preview(self) -> ActionResult:
        """Spend this turn's preview: resolve the board and judge it."""
        try:
            referee.check_preview(self)
        except referee.RuleViolation as exc:
            return self._reject(exc, "preview")

        resolved, outcome, winning = self.board.resolve(self.rand)
        self.previews_left -= 1
        self.resolved = resolved
        self.outcome = outcome
        self.winning_pieces = winning
        self.preview_shown = True

        if outcome is not None:
            self.game_over = True
            self.logger(f"Preview: {win_detector.outcome_text(outcome)}")
        else:
            self.logger("Preview: no result")
        return self._accept(win_detector.outcome_text(outcome))

    def hide_preview(self) -> ActionResult:
        try:
            referee.check_hide(self)
        except referee.RuleViolation as exc:
            return self._reject(exc, "hide preview")
        self.preview_shown = False
        return self._accept()

    def toggle_preview(self) -> ActionResult:
        """Hide the preview when shown, otherwise try to spend one."""
        if self.preview_shown:
            return self.hide_preview()
        return self.request_preview()

    def end_turn(self) -> ActionResult:
        try:
            referee.check_end_turn(self)
        except referee.RuleViolation as exc:
            return self._reject(exc, "end turn")

        departing = self.current_player
        self.prob_index[departing] = (self.prob_index[departing] + 1) % 2
        self.current_player = markers.opponent(departing)
        self.previews_left = 1
        self.preview_shown = False
        self.outcome = None
        self.winning_pieces = win_detector.WinningPieces()
        self.moves_this_turn = 0
        self.show_prob_hint = True
        self.turn_index += 1
        self.logger(f"Turn {self.turn_index}: {markers.player_name(self.current_player)} to move")
        return self._accept()

    def restart(self):
        self._reset()
        self.logger("Restart")
