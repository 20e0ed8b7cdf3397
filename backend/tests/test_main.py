"""
Tests for main.py - the headless session runner.
"""

import argparse
import sys
import os
from unittest.mock import Mock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings
from domain import UP
from main import build_parser, main, run_session
from players import Player


class AlwaysUp(Player):
    def get_move(self, game_state):
        return UP


def make_params(**overrides):
    params = dict(
        grid_size=20,
        seed=1,
        speed=150,
        max_ticks=None,
        no_delay=False,
        show_board=False,
        snapshot=None,
    )
    params.update(overrides)
    return argparse.Namespace(**params)


class TestRunSession:
    """Tests for run_session."""

    def test_stops_at_max_ticks(self):
        sleep = Mock()
        result = run_session(make_params(max_ticks=5), sleep=sleep)

        assert result["ticks"] == 5
        assert result["game_over"] is False
        assert result["length"] == 3 + result["score"]
        assert sleep.call_count == 5
        sleep.assert_called_with(0.15)

    def test_runs_until_wall(self):
        """Heading straight up from (10, 10) hits the wall on tick 11."""
        sleep = Mock()
        result = run_session(make_params(no_delay=True), player=AlwaysUp(), sleep=sleep)

        assert result["game_over"] is True
        assert result["death_reason"] == "wall"
        assert result["ticks"] == 11
        sleep.assert_not_called()

    def test_show_board_prints(self, capsys):
        run_session(make_params(max_ticks=1, no_delay=True, show_board=True))
        assert " H " in capsys.readouterr().out

    def test_snapshot(self, tmp_path):
        path = str(tmp_path / "final.png")
        result = run_session(make_params(max_ticks=2, no_delay=True, snapshot=path))
        assert result["snapshot"] == path
        assert os.path.exists(path)

    def test_same_seed_same_game(self):
        first = run_session(make_params(seed=42, no_delay=True, max_ticks=200))
        second = run_session(make_params(seed=42, no_delay=True, max_ticks=200))
        assert first == second


class TestCommandLine:
    """Tests for argument parsing and main()."""

    def test_parser_defaults_come_from_settings(self):
        settings = Settings(game_speed_ms=90, grid_size=12, seed=5)
        args = build_parser(settings).parse_args([])
        assert args.speed == 90
        assert args.grid_size == 12
        assert args.seed == 5
        assert args.max_ticks is None

    @patch("main.load_settings", return_value=Settings())
    def test_main_prints_summary(self, _settings, capsys):
        result = main(["--max-ticks", "3", "--no-delay", "--seed", "3"])

        assert result["ticks"] == 3
        assert "Session Result Summary" in capsys.readouterr().out

    @patch("main.load_settings", return_value=Settings())
    def test_main_rejects_bad_speed(self, _settings):
        with pytest.raises(ValueError):
            main(["--speed", "0"])
