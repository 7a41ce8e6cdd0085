"""Pygame-based board renderer and mouse input loop for a game session."""

try:
    from engine import markers
    from gui.layout import BoardLayout, PREVIEW, END_TURN, RESTART, EXIT
except ImportError:
    from Probability_Omok.engine import markers
    from Probability_Omok.gui.layout import BoardLayout, PREVIEW, END_TURN, RESTART, EXIT


RULE_LINES = [
    "1. Black goes first. Players take turns, 1 piece per turn.",
    "2. Black's pieces: 90% Black / 70% Black (rotates each turn)",
    "3. White's pieces: 90% White / 70% White (rotates each turn)",
    "4. Click 'Preview Board' to see final pieces once per turn.",
    "5. Win by getting 5 same pieces in a row after preview.",
]

STAR_POINTS = [(3, 3), (3, 11), (7, 7), (11, 3), (11, 11)]


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (255, 255, 255)
    COLOR_GRID = (80, 80, 80)
    COLOR_TEXT = (0, 0, 0)
    COLOR_LABEL = (255, 255, 255)
    COLOR_PANEL = (230, 230, 230)
    COLOR_RED = (220, 0, 0)
    COLOR_GREEN = (0, 200, 0)
    COLOR_BLUE = (50, 100, 205)
    COLOR_DISABLED = (128, 128, 128)
    COLOR_BANNER = (255, 255, 0)
    COLOR_OVERLAY = (0, 0, 0, 76)
    COLOR_GHOST = (51, 51, 51, 102)

    HOVER_SCALE = 1.05

    def __init__(self, window_size=900):
        import pygame

        self._pygame = pygame
        self.layout = BoardLayout(window_size=window_size)

        pygame.init()
        self.screen = pygame.display.set_mode((self.layout.width, self.layout.height))
        pygame.display.set_caption("Probability Gomoku")

        # Fonts
        self.font_banner = pygame.font.Font(None, 96)
        self.font_large = pygame.font.Font(None, 42)
        self.font_medium = pygame.font.Font(None, 34)
        self.font_small = pygame.font.Font(None, 26)

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_grid(self):
        pygame = self._pygame
        layout = self.layout
        gx, gy = layout.grid_origin
        end = layout.board_span
        for i in range(layout.board_size):
            offset = i * layout.tile_size
            pygame.draw.line(self.screen, self.COLOR_GRID, (gx + offset, gy), (gx + offset, gy + end), 3)
            pygame.draw.line(self.screen, self.COLOR_GRID, (gx, gy + offset), (gx + end, gy + offset), 3)
        for row, col in STAR_POINTS:
            pygame.draw.circle(self.screen, self.COLOR_TEXT, layout.cell_center(row, col), 6)

    def _draw_markers(self, board):
        pygame = self._pygame
        for row, line in enumerate(board):
            for col, marker in enumerate(line):
                if marker == markers.EMPTY:
                    continue
                center = self.layout.cell_center(row, col)
                pygame.draw.circle(self.screen, markers.MARKER_SHADES[marker], center, self.layout.piece_radius)
                self._draw_text(markers.MARKER_LABELS[marker], self.font_small, self.COLOR_LABEL, center)

    def _draw_placement_ghost(self, view):
        if not view.can_place:
            return
        cell = self.layout.cell_at(*self._pygame.mouse.get_pos())
        if cell is None or view.board[cell[0]][cell[1]] != markers.EMPTY:
            return
        pygame = self._pygame
        radius = int(self.layout.piece_radius)
        ghost = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(ghost, self.COLOR_GHOST, (radius, radius), radius - 4)
        cx, cy = self.layout.cell_center(*cell)
        self.screen.blit(ghost, (cx - radius, cy - radius))

    def _draw_resolved(self, view):
        pygame = self._pygame
        layout = self.layout
        pad = layout.MARGIN * 0.75
        gx, gy = layout.grid_origin
        size = int(layout.board_span + pad * 2)
        overlay = pygame.Surface((size, size), pygame.SRCALPHA)
        overlay.fill(self.COLOR_OVERLAY)
        self.screen.blit(overlay, (gx - pad, gy - pad))

        for row, line in enumerate(view.resolved):
            for col, piece in enumerate(line):
                if piece == markers.EMPTY:
                    continue
                color = (0, 0, 0) if piece == markers.BLACK else (255, 255, 255)
                pygame.draw.circle(self.screen, color, layout.cell_center(row, col), layout.piece_radius)

        for row, col in view.winning_black + view.winning_white:
            pygame.draw.circle(self.screen, self.COLOR_RED, layout.cell_center(row, col), layout.piece_radius + 2, 4)

        if view.outcome:
            text_surface = self.font_banner.render(view.outcome_text, True, self.COLOR_TEXT)
            rect = text_surface.get_rect(center=(layout.width / 2, layout.PANEL_HEIGHT / 2))
            banner = rect.inflate(30, 20)
            pygame.draw.rect(self.screen, self.COLOR_BANNER, banner)
            pygame.draw.rect(self.screen, self.COLOR_TEXT, banner, 4)
            self.screen.blit(text_surface, rect)

    def _draw_button(self, name, label, color, enabled, font):
        pygame = self._pygame
        x, y, w, h = self.layout.buttons[name]
        hover = enabled and pygame.Rect(x, y, w, h).collidepoint(pygame.mouse.get_pos())
        scale = self.HOVER_SCALE if hover else 1.0
        rect = pygame.Rect(x - w * (scale - 1) / 2, y - h * (scale - 1) / 2, w * scale, h * scale)
        pygame.draw.rect(self.screen, color if enabled else self.COLOR_DISABLED, rect)
        self._draw_text(label, font, self.COLOR_LABEL, rect.center)

    def _draw_info_panel(self, view):
        pygame = self._pygame
        layout = self.layout
        pygame.draw.rect(self.screen, self.COLOR_PANEL, pygame.Rect(0, 0, layout.width, 80))

        player = markers.player_name(view.current_player)
        self._draw_text(f"Current Turn: {player}", self.font_large, self.COLOR_TEXT, (layout.width / 2, 25))
        if view.show_prob_hint:
            self._draw_text(view.next_piece_text, self.font_medium, self.COLOR_TEXT, (layout.width / 2, 60))

        px, py, _, _ = layout.buttons[PREVIEW]
        ex, _, ew, _ = layout.buttons[END_TURN]
        self.screen.blit(
            self.font_small.render(f"Previews Left: {view.previews_left}", True, self.COLOR_TEXT), (px, py - 24)
        )
        hint_color = self.COLOR_GREEN if view.moves_this_turn else self.COLOR_RED
        self._draw_text(view.move_hint, self.font_small, hint_color, (ex + ew / 2, py - 12))

        label = "Hide Preview" if view.preview_shown else "Preview Board"
        self._draw_button(PREVIEW, label, self.COLOR_GREEN, view.can_toggle_preview, self.font_small)
        self._draw_button(END_TURN, "End Turn", self.COLOR_BLUE, view.can_end_turn, self.font_small)

    def _draw_rules(self):
        layout = self.layout
        y = layout.footer_top + 10
        self._draw_text("Game Rules", self.font_medium, self.COLOR_RED, (layout.width / 2, y))
        for i, line in enumerate(RULE_LINES):
            self._draw_text(line, self.font_small, self.COLOR_TEXT, (layout.width / 2, y + 28 * (i + 1)))

    def _draw_game_over_buttons(self):
        self._draw_button(RESTART, "Restart Game", self.COLOR_GREEN, True, self.font_large)
        self._draw_button(EXIT, "Exit Game", self.COLOR_RED, True, self.font_large)

    def render(self, view):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_grid()
        self._draw_markers(view.board)
        self._draw_placement_ghost(view)

        if not view.game_over:
            self._draw_info_panel(view)
            self._draw_rules()
        else:
            self._draw_game_over_buttons()

        if view.resolved is not None:
            self._draw_resolved(view)

        self._pygame.display.flip()

    def handle_click(self, game, pos):
        """Apply the action under a click. Returns False when the player asked to exit."""
        view = game.snapshot()
        button = self.layout.button_at(*pos, view)
        if button == EXIT:
            return False
        if button == RESTART:
            game.restart()
        elif button == PREVIEW:
            game.toggle_preview()
        elif button == END_TURN:
            game.end_turn()
        elif view.can_place:
            cell = self.layout.cell_at(*pos)
            if cell is not None:
                game.place_piece(*cell)
        return True

    def run(self, game):
        pygame = self._pygame
        clock = pygame.time.Clock()
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        running = self.handle_click(game, event.pos)
                    if not running:
                        break
                self.render(game.snapshot())
                clock.tick(60)
        finally:
            self.close()

    def close(self):
        self._pygame.quit()
