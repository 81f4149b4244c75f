"""Tests for the headless CLI."""

import json

import pytest

from smooth_snake.cli import _build_parser, main
from smooth_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_run_defaults(self):
        parser = _build_parser()
        args = parser.parse_args(["run"])
        assert args.command == "run"
        assert args.config is None
        assert args.frames == 600
        assert args.width is None
        assert args.turn_chance == 0.05

    def test_run_with_flags(self):
        parser = _build_parser()
        args = parser.parse_args([
            "run",
            "--frames", "30",
            "--width", "15",
            "--direction", "up",
            "--seed", "7",
        ])
        assert args.frames == 30
        assert args.width == 15
        assert args.direction == "up"
        assert args.seed == 7

    def test_benchmark_defaults(self):
        parser = _build_parser()
        args = parser.parse_args(["benchmark"])
        assert args.command == "benchmark"
        assert args.num_games == 10
        assert args.frames == 600

    def test_invalid_direction_exits(self):
        with pytest.raises(SystemExit, match="2"):
            main(["run", "--direction", "north"])

    def test_run_frames_must_be_positive(self):
        with pytest.raises(SystemExit, match="2"):
            main(["run", "--frames", "0"])

    @pytest.mark.parametrize("value", ["1.5", "-0.1"])
    def test_run_turn_chance_out_of_range(self, value):
        with pytest.raises(SystemExit, match="2"):
            main(["run", "--turn-chance", value])


class TestCLIRun:
    def test_run_prints_state(self, capsys):
        result = main([
            "run", "--frames", "20", "--width", "12", "--height", "10",
            "--seed", "3",
        ])
        assert result == 0
        state = json.loads(capsys.readouterr().out)
        assert state["width"] == 12
        assert state["height"] == 10
        assert state["tick"] == 20

    def test_run_from_config_file(self, tmp_path, capsys):
        path = tmp_path / "game.json"
        GameConfig(width=8, height=6, seed=2).save(path)
        result = main(["run", "--config", str(path), "--frames", "5"])
        assert result == 0
        state = json.loads(capsys.readouterr().out)
        assert state["width"] == 8
        assert state["height"] == 6

    def test_run_reports_filled_board(self, capsys):
        result = main([
            "run", "--frames", "100", "--width", "2", "--height", "1",
            "--length", "1", "--turn-chance", "0", "--seed", "0",
        ])
        assert result == 0
        state = json.loads(capsys.readouterr().out)
        assert state["board_full"] is True
        assert state["score"] == 1

    def test_flags_override_config_file(self, tmp_path, capsys):
        path = tmp_path / "game.json"
        GameConfig(width=8, height=6).save(path)
        main(["run", "--config", str(path), "--frames", "5", "--width", "9"])
        state = json.loads(capsys.readouterr().out)
        assert state["width"] == 9


class TestCLIBenchmark:
    def test_benchmark_runs(self, capsys):
        result = main([
            "benchmark",
            "--num-games", "2",
            "--frames", "20",
            "--width", "10",
            "--height", "10",
        ])
        assert result == 0
        captured = capsys.readouterr()
        assert "Benchmark:" in captured.out
        assert "games/s" in captured.out

    def test_benchmark_num_games_must_be_positive(self):
        with pytest.raises(SystemExit, match="2"):
            main(["benchmark", "--num-games", "0"])
