"""Action guards for the turn/phase state machine and the rejection kinds they raise."""

OUT_OF_BOUNDS = "out_of_bounds"
CELL_OCCUPIED = "cell_occupied"
WRONG_PHASE = "wrong_phase"
PREVIEW_EXHAUSTED = "preview_exhausted"
GAME_OVER = "game_over"


class RuleViolation(ValueError):
    """Base class for rejected actions; `kind` names the rejection."""

    kind = None


class OutOfBoundsError(RuleViolation):
    kind = OUT_OF_BOUNDS


class CellOccupiedError(RuleViolation):
    kind = CELL_OCCUPIED


class WrongPhaseError(RuleViolation):
    kind = WRONG_PHASE


class PreviewExhaustedError(RuleViolation):
    kind = PREVIEW_EXHAUSTED


class GameOverError(RuleViolation):
    kind = GAME_OVER


def check_place(game, row, col):
    """
    Validate a placement against phase, bounds and occupancy.
    Raises a RuleViolation subclass; returns True when the move is legal.
    """
    if game.game_over:
        raise GameOverError("Game is over")
    if game.preview_shown:
        raise WrongPhaseError("Hide the preview before placing")
    if game.moves_this_turn > 0:
        raise WrongPhaseError("Already placed a piece this turn")

    if not game.board.in_bounds(row, col):
        raise OutOfBoundsError("Move out of bounds")
    if not game.board.is_empty(row, col):
        raise CellOccupiedError("Cell already occupied")
    return True


def check_preview(game):
    """Validate consuming a preview (resolution). Hiding is never checked here."""
    if game.game_over:
        raise GameOverError("Game is over")
    if game.previews_left <= 0:
        raise PreviewExhaustedError("No previews left this turn")
    if game.preview_shown:
        raise WrongPhaseError("Preview already shown")
    return True


def check_hide(game):
    if not game.preview_shown:
        raise WrongPhaseError("Preview is not shown")
    return True


def check_end_turn(game):
    if game.game_over:
        raise GameOverError("Game is over")
    if game.moves_this_turn == 0:
        raise WrongPhaseError("Place a piece before ending the turn")
    return True
