"""Tests for the command-line scripts and CSV analysis."""

import csv

import pandas as pd
import pytest

from eightpuzzle.domains.puzzle8 import INSTANCES, InvalidConfigurationError, is_solvable
from eightpuzzle.experiments import analyze, plot, runner, solve_one, visualize_path
from eightpuzzle.search.result import CSV_HEADER


@pytest.fixture
def easy_csv(tmp_path):
    out = tmp_path / "easy.csv"
    runner.main(["--instances", "easy", "134862705", "--out", str(out)])
    return out


class TestParseStart:

    @pytest.mark.parametrize("text", ["easy", "EASY", "134862705", "1,3,4,8,6,2,7,0,5", "1 3 4 8 6 2 7 0 5"])
    def test_forms(self, text):
        assert runner.parse_start(text) == INSTANCES["easy"]

    @pytest.mark.parametrize("text", ["12", "1,2,x", "112345678", "nope"])
    def test_rejects(self, text):
        with pytest.raises(InvalidConfigurationError):
            runner.parse_start(text)

    def test_unsolvable_variant_flips_parity(self):
        for s in INSTANCES.values():
            u = runner.make_unsolvable_variant(s)
            assert sorted(u) == list(range(9))
            assert not is_solvable(u)


class TestRunner:

    def test_writes_all_combinations(self, easy_csv):
        with easy_csv.open(newline="") as f:
            rows = list(csv.DictReader(f))
        assert list(rows[0].keys()) == CSV_HEADER
        # 2 instances x 2 heuristics x 3 algorithms
        assert len(rows) == 12
        assert {r["algorithm"] for r in rows} == {"A*", "DFBB", "IDA*"}
        assert {r["g"] for r in rows} == {"5"}
        assert {r["termination"] for r in rows} == {"ok"}

    def test_unsolvable_with_precheck(self, tmp_path):
        out = tmp_path / "u.csv"
        runner.main(["--instances", "easy", "--include_unsolvable", "--check_solvable",
                     "--heuristic", "manhattan", "--out", str(out)])
        df = pd.read_csv(out)
        bad = df[df["instance"] == "easy_unsolvable"]
        assert len(bad) == 3
        assert set(bad["termination"]) == {"unsolvable"}
        assert set(bad["solvable"]) == {0}

    def test_bad_instance_exits(self, tmp_path):
        with pytest.raises(SystemExit) as e:
            runner.main(["--instances", "1234", "--out", str(tmp_path / "x.csv")])
        assert e.value.code == 2


class TestSolveOne:

    def test_prints_path(self, capsys):
        assert solve_one.main(["easy", "--algo", "a"]) == 0
        out = capsys.readouterr().out
        assert "priority = 5 = g+h = 0+5" in out
        assert "1 2 3\n8 0 4\n7 6 5" in out
        assert "Moves = 5" in out
        assert "Node Expanded = " in out

    def test_dfbb_reports_best_time(self, capsys):
        solve_one.main(["easy", "--algo", "dfbb", "--quiet"])
        out = capsys.readouterr().out
        assert "Optimal Time (ms)" in out
        assert "priority" not in out

    def test_ida_reports_bounds(self, capsys):
        solve_one.main(["easy", "--algo", "ida", "--quiet"])
        assert "Bounds tried = 5" in capsys.readouterr().out

    def test_unsolvable(self, capsys):
        assert solve_one.main(["314862705", "--check_solvable"]) == 1
        assert "No solution (unsolvable)" in capsys.readouterr().out

    def test_invalid(self):
        with pytest.raises(SystemExit) as e:
            solve_one.main(["111111111"])
        assert e.value.code == 2


class TestAnalysis:

    def test_summarize(self, easy_csv):
        df = analyze.load_many([str(easy_csv)])
        table = analyze.summarize(df)
        assert set(table["algorithm"]) == {"A*", "DFBB", "IDA*"}
        assert (table["g"] == 5).all()
        assert analyze.disagreements(df).empty

    def test_disagreement_detected(self):
        df = pd.DataFrame({
            "instance": ["x", "x"], "heuristic": ["manhattan"] * 2,
            "algorithm": ["A*", "DFBB"], "g": [4, 6], "termination": ["ok", "ok"],
        })
        assert len(analyze.disagreements(df)) == 1

    def test_missing_file_is_skipped(self, tmp_path, capsys):
        df = analyze.load_many([str(tmp_path / "missing.csv")])
        assert df.empty
        assert "skip" in capsys.readouterr().out

    def test_main(self, easy_csv, tmp_path, capsys):
        out = tmp_path / "summary.csv"
        assert analyze.main([str(easy_csv), "--out", str(out)]) == 0
        assert out.exists()
        assert "Solved runs" in capsys.readouterr().out


class TestFigures:

    def test_plot(self, easy_csv, tmp_path):
        plot.main([str(easy_csv), "--save", str(tmp_path / "plots")])
        assert (tmp_path / "plots" / "easy_combined.png").exists()

    def test_frames(self, tmp_path):
        visualize_path.main(["easy", "--outdir", str(tmp_path / "frames")])
        frames = sorted((tmp_path / "frames").glob("step_*.png"))
        assert len(frames) == 6
