"""CLI options for choosing the front end, random seed, and config path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Probability Omok (five in a row with probability pieces)")
    parser.add_argument("--ui", choices=["gui", "text"], default=None, help="Front end (default from settings)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece resolution (reproducible previews)")
    parser.add_argument("--window-size", type=int, default=None, help="Window width/height in pixels for the GUI")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--quiet", action="store_true", help="Do not log moves and previews")
    return parser.parse_args(argv)
