"""Settings loading and session wiring for the entry point."""

from Probability_Omok import main
from Probability_Omok.utils import logger
from Probability_Omok.utils.cli import parse_args


def test_default_settings_load():
    settings = main.load_settings("config/settings.yaml")
    assert settings["ui"] in ("gui", "text")
    assert "seed" in settings


def test_cli_seed_overrides_settings():
    args = parse_args(["--seed", "5", "--quiet", "--ui", "text"])
    game = main.build_game(args, {"seed": 1})
    assert game.logger is logger.silent

    other = main.build_game(parse_args(["--seed", "5"]), {})
    for g in (game, other):
        for col in range(5):
            g.place_piece(0, col)
            g.end_turn()
        g.place_piece(1, 0)
    assert game.request_preview().view.resolved == other.request_preview().view.resolved


def test_text_ui_runs(monkeypatch, tmp_path):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("ui: text\nseed: 3\nlog_moves: false\n", encoding="utf-8")
    commands = iter(["p 7 7", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))
    main.main(["--settings", str(cfg)])


def test_log_event_format(capsys):
    logger.log_event("hello")
    out = capsys.readouterr().out
    assert out.startswith("[") and out.rstrip().endswith("] hello")
