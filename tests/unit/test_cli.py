"""
Tests for the digitsum command-line interface.
"""

import json

import pytest

from digitsum.cli import build_parser, main


class TestClassify:
    """Test the classify subcommand."""

    def test_above_threshold_exits_one(self, capsys) -> None:
        assert main(["classify", "99999999"]) == 1

        out = capsys.readouterr().out
        assert "Path: above_threshold" in out
        assert "Digit sum: 72" in out

    def test_below_threshold_exits_zero(self) -> None:
        assert main(["classify", "5"]) == 0

    def test_negative_exits_zero(self, capsys) -> None:
        assert main(["classify", "-9999999"]) == 0
        assert "Path: negative" in capsys.readouterr().out

    def test_hex_input(self, capsys) -> None:
        """394139 is '9A9', which sums to 35."""
        assert main(["classify", "--hex", "394139"]) == 0
        assert "Digit sum: 35" in capsys.readouterr().out

    def test_signed_flag(self) -> None:
        assert main(["classify", "--hex", "ff"]) == 1
        assert main(["classify", "--hex", "ff", "--signed"]) == 0

    def test_bad_hex_exits_two(self) -> None:
        assert main(["classify", "--hex", "zz"]) == 2


class TestExplore:
    """Test the explore subcommand."""

    def test_exhaustive_run_passes(self, capsys) -> None:
        assert main(["explore", "--max-length", "2"]) == 0
        assert "Result: PASSED" in capsys.readouterr().out

    def test_writes_reports(self, tmp_path) -> None:
        assert main(["explore", "--max-length", "1", "--output", str(tmp_path)]) == 0

        assert len(list(tmp_path.glob("explore_*.json"))) == 1
        assert len(list(tmp_path.glob("explore_*.md"))) == 1

    def test_inline_json_config(self, capsys) -> None:
        config = json.dumps({"strategy": "random", "max_inputs": 100})

        assert main(["explore", config]) == 0
        assert "Strategy: random" in capsys.readouterr().out

    def test_overrides_apply_on_top_of_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "explore.yaml"
        path.write_text("strategy: bfs\nmax_length: 3\n")

        assert main(["explore", str(path), "--max-length", "1", "--alphabet", "09"]) == 0
        assert "Inputs explored: 3 / 3" in capsys.readouterr().out

    def test_invalid_config_exits_two(self) -> None:
        assert main(["explore", '{"strategy": "astar"}']) == 2

    @pytest.mark.parametrize("config", ['{"strategy": 5}', '{"max_length": "3"}'])
    def test_wrong_value_type_exits_two(self, config) -> None:
        assert main(["explore", config]) == 2

    def test_wrong_value_type_in_yaml_exits_two(self, tmp_path) -> None:
        path = tmp_path / "explore.yaml"
        path.write_text("timeout_seconds: soon\n")

        assert main(["explore", str(path)]) == 2

    def test_missing_config_file_exits_two(self, tmp_path) -> None:
        assert main(["explore", str(tmp_path / "missing.yaml")]) == 2


def test_census_command(capsys):
    assert main(["census", "--max-length", "1"]) == 0

    out = capsys.readouterr().out
    assert "Assignments: 256" in out
    assert "above_threshold" in out


def test_census_invalid_length():
    assert main(["census", "--max-length", "12"]) == 2


def test_paths_command(capsys):
    assert main(["paths"]) == 0

    assert "negative (exit 0): ('a[0]' >= 45 && 'a[0]' <= 45)" in capsys.readouterr().out


def test_invalid_log_level():
    assert main(["--log-level", "CHATTY", "paths"]) == 2


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
