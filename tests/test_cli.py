"""
Tests for the command line entry points.
"""

import json

import pytest

from snakecore.cli import show_high_scores, simulate
from snakecore.data_access import HighScoreRepository, Leaderboard


@pytest.fixture
def cli_env(clean_env, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return ["--env-file", str(tmp_path / "missing.env")]


def summary_from(output: str):
    _, _, payload = output.partition("Simulation Result Summary:")
    return json.loads(payload)


class TestSimulate:
    """Tests for snakecore-simulate."""

    def test_headless_games(self, cli_env, capsys):
        code = simulate.main(cli_env + [
            "--no-save", "--seed", "7", "--games", "3", "--width", "10", "--height", "10",
            "--max-ticks", "300",
        ])
        assert code == 0
        results = summary_from(capsys.readouterr().out)
        assert [r["game"] for r in results] == [1, 2, 3]
        for result in results:
            assert result["status"] in ("RUNNING", "GAME_OVER")
            assert result["length"] >= 3
            assert result["ticks"] <= 300

    def test_same_seed_same_results(self, cli_env, capsys):
        args = cli_env + ["--no-save", "--seed", "11", "--width", "8", "--height", "8"]
        simulate.main(args)
        first = summary_from(capsys.readouterr().out)
        simulate.main(args)
        second = summary_from(capsys.readouterr().out)
        assert first == second

    def test_wrap_flag(self, cli_env, capsys):
        code = simulate.main(cli_env + ["--no-save", "--seed", "2", "--wrap", "--max-ticks", "50"])
        assert code == 0

    def test_scores_are_saved(self, cli_env, tmp_path, capsys):
        db_path = str(tmp_path / "scores.db")
        code = simulate.main(cli_env + ["--seed", "3", "--games", "2", "--db", db_path])
        assert code == 0
        results = summary_from(capsys.readouterr().out)
        finished = [r for r in results if r["status"] == "GAME_OVER"]
        assert len(HighScoreRepository(db_path).load()) == len(finished)

    def test_invalid_configuration(self, cli_env, capsys):
        code = simulate.main(cli_env + ["--no-save", "--width", "0"])
        assert code == 2
        assert "Simulation Result Summary" not in capsys.readouterr().out


class TestShowHighScores:
    """Tests for snakecore-scores."""

    def test_empty_board(self, cli_env, tmp_path, capsys):
        code = show_high_scores.main(cli_env + ["--db", str(tmp_path / "scores.db")])
        assert code == 0
        assert "No high scores yet." in capsys.readouterr().out

    def test_lists_records(self, cli_env, tmp_path, capsys):
        db_path = str(tmp_path / "scores.db")
        leaderboard = Leaderboard(HighScoreRepository(db_path))
        leaderboard.record(7, 10)
        leaderboard.record(12, 15)

        code = show_high_scores.main(cli_env + ["--db", db_path, "--limit", "1"])
        assert code == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0].split() == ["#", "Score", "Length", "Date"]
        assert len(lines) == 2
        assert lines[1].split()[:3] == ["1", "12", "15"]

    def test_invalid_configuration(self, cli_env, clean_env, capsys):
        clean_env["SNAKE_HIGH_SCORE_LIMIT"] = "many"
        assert show_high_scores.main(cli_env) == 2
        assert capsys.readouterr().out == ""
