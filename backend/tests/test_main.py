"""
Tests for main.py - the headless game runner.
"""

import os
import sys
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wrapsnake.domain import GameConfig, ConfigurationError
from wrapsnake.main import run_game, main


SMALL = GameConfig.init({"rows_count": 10, "cols_count": 10, "speed": 10, "win_food_count": 5})


class TestRunGame:
    """Tests for run_game()."""

    def test_tick_limit_stops_the_game(self):
        result = run_game(SMALL, max_ticks=3, seed=1, fast=True, printer=None)

        assert result["ticks"] == 3
        assert result["status"] == "stopped"
        assert result["outcome"] is None
        assert result["settings"]["rows_count"] == 10

    def test_game_runs_to_a_finish(self):
        result = run_game(SMALL, max_ticks=5000, seed=5, fast=True, printer=None)

        assert result["ticks"] <= 5000
        if result["status"] == "finished":
            assert result["outcome"] in ("won", "lost")
            if result["outcome"] == "won":
                assert result["length"] == 6
                assert result["score"] == 5
        else:
            assert result["status"] == "stopped"
        assert result["length"] == result["score"] + 1

    def test_printer_receives_boards(self):
        lines = []
        run_game(SMALL, max_ticks=2, seed=1, fast=True, printer=lines.append)

        assert len(lines) == 3
        assert lines[0].startswith("\nTick 0 | score 0")
        assert "H" in lines[-1]

    def test_invalid_settings_raise(self):
        with pytest.raises(ConfigurationError) as exc_info:
            run_game(GameConfig.init({"speed": 0, "rows_count": 2}), printer=None)
        assert len(exc_info.value.errors) == 2

    def test_real_time_mode_uses_scheduler(self):
        with patch("wrapsnake.main.time.sleep") as sleep:
            result = run_game(SMALL, max_ticks=2, seed=1, printer=None)

        assert result["ticks"] == 2
        assert sleep.called


class TestMain:

    def test_invalid_arguments_exit_with_code_2(self, capsys):
        with patch.object(sys, "argv", ["main.py", "--rows", "3", "--quiet"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 2
        assert "rows_count" in capsys.readouterr().err

    def test_prints_summary(self, capsys):
        argv = ["main.py", "--rows", "10", "--cols", "10", "--max-ticks", "4",
                "--seed", "2", "--fast", "--quiet"]
        with patch.object(sys, "argv", argv):
            main()

        out = capsys.readouterr().out
        assert "Game Result Summary" in out
        assert '"rows_count": 10' in out
