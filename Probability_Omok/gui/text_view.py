"""Terminal front end: board rendering as text and a command loop."""

try:
    from engine import markers
except ImportError:
    from Probability_Omok.engine import markers


MARKER_CHARS = {
    markers.EMPTY: ".",
    markers.BLACK90: "9",
    markers.BLACK70: "7",
    markers.BLACK30: "3",
    markers.BLACK10: "1",
}

# Resolved pieces; winning pieces use the second character.
PIECE_CHARS = {
    markers.EMPTY: (".", "."),
    markers.BLACK: ("X", "*"),
    markers.WHITE: ("O", "@"),
}

HELP = (
    "Commands: p ROW COL (place), v (preview/hide), e (end turn), r (restart), q (quit), ? (help)\n"
    "Markers show the chance of Black: 9=90% 7=70% 3=30% 1=10%. Preview: X black, O white, * @ winning line."
)


def format_board(view):
    size = len(view.board)
    header = "  " + "".join(f"{c:>3}" for c in range(size))
    lines = [header]
    winners = set(view.winning_black) | set(view.winning_white)
    for r in range(size):
        if view.resolved is not None:
            chars = [PIECE_CHARS[p][(r, c) in winners] for c, p in enumerate(view.resolved[r])]
        else:
            chars = [MARKER_CHARS[m] for m in view.board[r]]
        lines.append(f"{r:>2}" + "".join(f"{ch:>3}" for ch in chars))
    return "\n".join(lines)


def format_status(view):
    if view.outcome:
        lines = [view.outcome_text]
        if view.game_over:
            lines.append("Game over: r to restart, q to quit")
        return "\n".join(lines)

    lines = [f"Current Turn: {markers.player_name(view.current_player)}"]
    if view.show_prob_hint:
        lines.append(view.next_piece_text)
    lines.append(f"Previews Left: {view.previews_left}")
    lines.append(view.move_hint)
    return "\n".join(lines)


def parse_command(raw):
    """Return (command, args) or raise ValueError on malformed input."""
    parts = raw.strip().split()
    if not parts:
        raise ValueError("empty command")
    cmd = parts[0].lower()
    if cmd == "p":
        if len(parts) != 3:
            raise ValueError("expected: p ROW COL")
        try:
            return cmd, (int(parts[1]), int(parts[2]))
        except ValueError as exc:
            raise ValueError("ROW and COL must be integers") from exc
    if cmd in ("v", "e", "r", "q", "?"):
        return cmd, ()
    raise ValueError(f"unknown command {cmd!r}")


class TextView:
    def __init__(self, read=None, write=None):
        self.read = read or input
        self.write = write or print

    def render(self, view):
        self.write(format_board(view))
        self.write(format_status(view))

    def step(self, game, raw):
        """Apply one command line. Returns False when the player quits."""
        try:
            cmd, args = parse_command(raw)
        except ValueError as exc:
            self.write(f"Invalid input: {exc}")
            return True

        result = None
        if cmd == "q":
            return False
        if cmd == "?":
            self.write(HELP)
        elif cmd == "p":
            result = game.place_piece(*args)
        elif cmd == "v":
            result = game.toggle_preview()
        elif cmd == "e":
            result = game.end_turn()
        elif cmd == "r":
            game.restart()

        if result is not None and not result.ok:
            self.write(f"Rejected ({result.rejection}): {result.message}")
        return True

    def run(self, game):
        self.write(HELP)
        while True:
            self.render(game.snapshot())
            try:
                raw = self.read("> ")
            except EOFError:
                break
            if not self.step(game, raw):
                break
