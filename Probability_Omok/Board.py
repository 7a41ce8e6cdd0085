"""Board of probability markers and on-demand resolution to definite pieces."""

try:
    from engine import markers, resolver, win_detector
    from engine.referee import OutOfBoundsError, CellOccupiedError
except ImportError:
    from Probability_Omok.engine import markers, resolver, win_detector
    from Probability_Omok.engine.referee import OutOfBoundsError, CellOccupiedError


class Board:
    def __init__(self):
        # Cells hold markers: 0 (empty) or the percentage chance of Black (90/70/30/10)
        self.size = markers.BOARD_SIZE
        self.cells = [[markers.EMPTY] * self.size for _ in range(self.size)]
        self.move_count = 0

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == markers.EMPTY

    def place(self, row, col, marker):
        """Place a marker; raise if out of bounds or occupied. Placements are permanent."""
        if not markers.is_marker(marker):
            raise ValueError(f"unknown marker {marker!r}")
        if not self.in_bounds(row, col):
            raise OutOfBoundsError("Move out of bounds")
        if self.cells[row][col] != markers.EMPTY:
            raise CellOccupiedError("Cell already occupied")
        self.cells[row][col] = marker
        self.move_count += 1

    def clone(self):
        new_board = Board()
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        return new_board

    def resolve(self, rand=None):
        """
        Resolve every marker independently and judge the result.
        Returns (resolved_cells, outcome, WinningPieces); outcome is None while play continues.
        """
        resolved = resolver.resolve_cells(self.cells, rand)
        outcome, winning = win_detector.check_winner(resolved)
        return resolved, outcome, winning
