# Area: CLI Tests
"""Tests for the command-line interface."""

import json
import logging

import pytest

from treasure_hunt import cli
from treasure_hunt._shared.logging_config import disable_event_mode, is_event_mode_enabled
from treasure_hunt.config import ENGINE_ENV_MAPPINGS, ENV_MAPPINGS


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run in a temp dir with no TREASURE_HUNT_* env and restore logging after."""
    monkeypatch.chdir(tmp_path)
    for key in list(ENV_MAPPINGS) + list(ENGINE_ENV_MAPPINGS):
        monkeypatch.delenv(key, raising=False)
    yield
    disable_event_mode()
    pkg_logger = logging.getLogger("treasure_hunt")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True


class TestParseArgs:
    """Tests for parse_args()."""

    def test_defaults_are_unset(self):
        args = cli.parse_args([])
        assert args.players is None
        assert args.config is None
        assert args.quiet is False

    def test_flags(self):
        args = cli.parse_args([
            "--players", "4", "--rounds", "2", "--seed", "9",
            "--bet", "0.05 ether", "--max-turns", "50", "--quiet",
        ])
        assert args.players == 4
        assert args.rounds == 2
        assert args.seed == 9
        assert args.bet == "0.05 ether"
        assert args.max_turns == 50
        assert args.quiet is True


class TestBuildConfig:
    """Tests for build_config()."""

    def test_flags_override_file(self, tmp_path):
        path = tmp_path / "sim.json"
        path.write_text(json.dumps({"players": 2, "rounds": 5}))

        config = cli.build_config(cli.parse_args(["--config", str(path), "--rounds", "1"]))

        assert config.players == 2
        assert config.rounds == 1

    def test_bet_in_ether(self):
        config = cli.build_config(cli.parse_args(["--bet", "0.05 ether"]))
        assert config.bet == 5 * 10 ** 16

    def test_quiet_hides_events(self):
        config = cli.build_config(cli.parse_args(["--quiet"]))
        assert config.show_events is False


class TestMain:
    """Tests for main()."""

    def test_successful_run(self, capsys, tmp_path):
        log_file = tmp_path / "run.log"
        code = cli.main([
            "--players", "2", "--seed", "3", "--max-turns", "5000",
            "--log-file", str(log_file), "--quiet",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "Simulation Summary" in out
        assert "Round 1" in out
        assert log_file.exists()

    def test_invalid_configuration(self, capsys):
        code = cli.main(["--players", "0"])

        assert code == 1
        assert "invalid configuration" in capsys.readouterr().err

    def test_missing_config_file(self, capsys):
        assert cli.main(["--config", "nope.json"]) == 1

    def test_engine_error_reported(self, capsys, tmp_path):
        path = tmp_path / "sim.json"
        path.write_text(json.dumps({"starting_balance": 1}))

        code = cli.main([
            "--config", str(path), "--log-file", str(tmp_path / "run.log"), "--quiet",
        ])

        assert code == 1
        assert "INSUFFICIENT_FUNDS" in capsys.readouterr().err

    def test_event_mode_cleared_after_run(self, capsys, tmp_path):
        code = cli.main([
            "--players", "2", "--seed", "3", "--max-turns", "5000",
            "--log-file", str(tmp_path / "run.log"),
        ])

        assert code == 0
        assert is_event_mode_enabled() is False

    def test_event_mode_cleared_after_engine_error(self, capsys, tmp_path):
        path = tmp_path / "sim.json"
        path.write_text(json.dumps({"starting_balance": 1}))

        code = cli.main(["--config", str(path), "--log-file", str(tmp_path / "run.log")])

        assert code == 1
        assert is_event_mode_enabled() is False
