"""Tests for the CLI entry point and the terminal event loop."""

from unittest.mock import MagicMock, patch

import pytest
from blessed.keyboard import Keystroke

from tui_bounded import cli
from tui_bounded.core.config import Config
from tui_bounded.ui.blessed import app as app_module
from tui_bounded.ui.blessed.component import Message
from tui_bounded.ui.blessed.keys import Keybind, Keymap
from tui_bounded.ui.blessed.term import poll_event, terminal_session


def parse(*argv: str):
    return cli.build_parser().parse_args(list(argv))


class TestApplyOverrides:
    """Test folding command line options into config."""

    def test_no_options_keeps_config(self):
        config = Config()
        assert cli.apply_overrides(config, parse()) == config

    def test_all_options(self):
        config = cli.apply_overrides(
            Config(),
            parse("--items", "5", "--no-wrap", "--select", "2", "--log-level", "DEBUG"),
        )
        assert config.ui.initial_items == 5
        assert config.ui.wrap is False
        assert config.ui.initial_selection == 2
        assert config.logging.level == "DEBUG"

    def test_negative_items_rejected(self):
        with pytest.raises(ValueError):
            cli.apply_overrides(Config(), parse("--items", "-1"))


class TestMain:
    """Test the main entry point with the UI patched out."""

    def test_init_config(self, tmp_path, capsys):
        target = tmp_path / "config.toml"
        assert cli.main(["--init-config", "--config", str(target)]) == 0
        assert target.exists()
        assert str(target) in capsys.readouterr().out

    def test_runs_app_with_configured_keymap(self, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('[keys]\nquit = "q"\n', encoding="utf-8")

        with patch("tui_bounded.cli.setup_loguru") as mock_logging, patch(
            "tui_bounded.ui.blessed.run_app"
        ) as mock_run:
            assert cli.main(["--config", str(config_path), "--no-wrap"]) == 0

        mock_logging.assert_called_once()
        config, keymap = mock_run.call_args.args
        assert config.ui.wrap is False
        assert keymap.quit == Keybind("q")
        assert Keymap.shared() is keymap

    def test_unknown_log_level_starts_with_info(self, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('[logging]\nlevel = "verbose"\n', encoding="utf-8")

        with patch("tui_bounded.cli.setup_loguru") as mock_logging, patch(
            "tui_bounded.ui.blessed.run_app"
        ) as mock_run:
            assert cli.main(["--config", str(config_path)]) == 0

        assert mock_logging.call_args.kwargs["level"] == "INFO"
        mock_run.assert_called_once()

    def test_invalid_keybinding_exits_with_error(self, tmp_path, capsys):
        config_path = tmp_path / "config.toml"
        config_path.write_text('[keys]\nup = "warp-drive"\n', encoding="utf-8")

        with patch("tui_bounded.cli.setup_loguru"), patch(
            "tui_bounded.ui.blessed.run_app"
        ) as mock_run:
            assert cli.main(["--config", str(config_path)]) == 1

        mock_run.assert_not_called()
        assert "Invalid key binding" in capsys.readouterr().err


class TestTerminal:
    """Test polling and the event loop against a mocked terminal."""

    def test_poll_event_returns_key(self):
        term = MagicMock()
        term.inkey.return_value = Keystroke("x")
        assert poll_event(term, timeout=0.5) == "x"
        term.inkey.assert_called_once_with(timeout=0.5)

    def test_poll_event_timeout(self):
        term = MagicMock()
        term.inkey.return_value = Keystroke("")
        assert poll_event(term) is None

    def test_terminal_session_restores_on_error(self):
        term = MagicMock()
        with pytest.raises(RuntimeError):
            with terminal_session(term):
                raise RuntimeError("boom")
        term.fullscreen.return_value.__exit__.assert_called_once()
        term.cbreak.return_value.__exit__.assert_called_once()
        term.hidden_cursor.return_value.__exit__.assert_called_once()

    def test_main_loop_redraws_until_exit(self):
        fake_app = MagicMock()
        fake_app.handle_key.side_effect = [Message.IDLE, Message.EXIT]
        keys = [Keystroke("j"), None, Keystroke("q")]

        with patch.object(app_module, "poll_event", side_effect=keys):
            app_module.main_loop(MagicMock(), fake_app, timeout=0)

        assert fake_app.draw.call_count == 3
        assert fake_app.handle_key.call_count == 2
