"""Window geometry for the graphical front end: pixels to cells, and button hit boxes."""

try:
    from engine.markers import BOARD_SIZE
except ImportError:
    from Probability_Omok.engine.markers import BOARD_SIZE


PREVIEW = "preview"
END_TURN = "end_turn"
RESTART = "restart"
EXIT = "exit"


def _inside(rect, x, y):
    rx, ry, rw, rh = rect
    return rx <= x <= rx + rw and ry <= y <= ry + rh


class BoardLayout:
    PANEL_HEIGHT = 190
    FOOTER_HEIGHT = 170
    MARGIN = 40

    BUTTON_WIDTH = 190
    BUTTON_HEIGHT = 50
    BUTTON_GAP = 40

    GAME_OVER_BUTTON_WIDTH = 260
    GAME_OVER_BUTTON_HEIGHT = 80

    def __init__(self, window_size=900, board_size=BOARD_SIZE):
        self.board_size = board_size
        self.width = window_size
        self.tile_size = (window_size - 2 * self.MARGIN) / (board_size - 1)
        self.grid_origin = (self.MARGIN, self.PANEL_HEIGHT + self.MARGIN)
        self.board_span = self.tile_size * (board_size - 1)
        self.footer_top = self.PANEL_HEIGHT + 2 * self.MARGIN + self.board_span
        self.height = int(self.footer_top + self.FOOTER_HEIGHT)
        self.piece_radius = self.tile_size * 0.45

        center = self.width / 2
        button_y = self.PANEL_HEIGHT - self.BUTTON_HEIGHT - 20
        self.buttons = {
            PREVIEW: (center - self.BUTTON_GAP / 2 - self.BUTTON_WIDTH, button_y, self.BUTTON_WIDTH, self.BUTTON_HEIGHT),
            END_TURN: (center + self.BUTTON_GAP / 2, button_y, self.BUTTON_WIDTH, self.BUTTON_HEIGHT),
            RESTART: (
                center - self.BUTTON_GAP / 2 - self.GAME_OVER_BUTTON_WIDTH,
                self.footer_top + 30,
                self.GAME_OVER_BUTTON_WIDTH,
                self.GAME_OVER_BUTTON_HEIGHT,
            ),
            EXIT: (
                center + self.BUTTON_GAP / 2,
                self.footer_top + 30,
                self.GAME_OVER_BUTTON_WIDTH,
                self.GAME_OVER_BUTTON_HEIGHT,
            ),
        }

    def cell_center(self, row, col):
        gx, gy = self.grid_origin
        return gx + col * self.tile_size, gy + row * self.tile_size

    def cell_at(self, x, y):
        """Snap a pixel to the nearest intersection; None when off the board."""
        gx, gy = self.grid_origin
        half = self.tile_size / 2
        if not (gx - half <= x <= gx + self.board_span + half and gy - half <= y <= gy + self.board_span + half):
            return None

        col = int(round((x - gx) / self.tile_size))
        row = int(round((y - gy) / self.tile_size))
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def active_buttons(self, view):
        if view.game_over:
            active = [RESTART, EXIT]
            if view.preview_shown:
                active.append(PREVIEW)
            return active
        active = []
        if view.can_toggle_preview:
            active.append(PREVIEW)
        if view.can_end_turn:
            active.append(END_TURN)
        return active

    def button_at(self, x, y, view):
        for name in self.active_buttons(view):
            if _inside(self.buttons[name], x, y):
                return name
        return None
