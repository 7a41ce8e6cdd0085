"""Entry point for Probability Omok. Load config, build the session, start a front end."""

import random
import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event, silent
    from ProbOmokgame import ProbOmokgame
    from gui.text_view import TextView
    from gui.pygame_view import PygameView
except ImportError:
    from Probability_Omok.utils.cli import parse_args
    from Probability_Omok.utils.logger import log_event, silent
    from Probability_Omok.ProbOmokgame import ProbOmokgame
    from Probability_Omok.gui.text_view import TextView
    from Probability_Omok.gui.pygame_view import PygameView


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Probability_Omok/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_game(args, settings):
    seed = args.seed if args.seed is not None else settings.get("seed")
    rand = random.Random(seed).random if seed is not None else None
    quiet = args.quiet or not settings.get("log_moves", True)
    return ProbOmokgame(rand=rand, logger=silent if quiet else log_event)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    ui = args.ui or settings.get("ui", "gui")
    window_size = args.window_size or settings.get("window_size", 900)
    game = build_game(args, settings)

    if ui == "gui":
        PygameView(window_size=window_size).run(game)
    else:
        TextView().run(game)


if __name__ == "__main__":
    main()
