"""
Integration tests for the statistics command-line interface.
"""

import json

import pytest

from src.cli.stats_cli import build_parser, build_view_config, main

pytestmark = pytest.mark.integration


def run_cli(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    out = capsys.readouterr().out
    return exc_info.value.code, out


class TestBuildViewConfig:
    """Tests for combining YAML and flags"""

    def test_flags_only(self):
        args = build_parser().parse_args(
            ["compute", "--threshold", ">500", "--date-mode", "last-7d", "--sort", "ascending"]
        )
        config = build_view_config(args)

        assert config.amount_threshold == ">500"
        assert config.date_mode == "last-7d"
        assert config.sort_order == "ascending"

    def test_flags_override_file(self, tmp_path):
        config_file = tmp_path / "view.yaml"
        config_file.write_text("view:\n  amount_threshold: '>100'\n  sort_order: descending\n")
        args = build_parser().parse_args(
            ["compute", "--config", str(config_file), "--sort", "none"]
        )

        config = build_view_config(args)

        assert config.amount_threshold == ">100"
        assert config.sort_order == "none"

    def test_start_end_imply_custom_range(self):
        args = build_parser().parse_args(["compute", "--start", "2026-10-01", "--end", "2026-10-03"])
        config = build_view_config(args)

        assert config.date_mode == "custom-range"
        assert config.custom_range.end.day == 3

    def test_start_without_end_rejected(self):
        args = build_parser().parse_args(["compute", "--start", "2026-10-01"])
        with pytest.raises(ValueError, match="together"):
            build_view_config(args)


class TestComputeCommand:
    """Tests for `compute`"""

    def test_prints_view_json(self, carts_path, capsys):
        code, out = run_cli(
            ["compute", "--input", carts_path, "--threshold", ">500", "--sort", "ascending", "--seed", "1"],
            capsys,
        )

        payload = json.loads(out)
        assert code == 0
        assert payload["series"]["labels"] == ["Order 3", "Order 4"]
        assert payload["series"]["productCounts"] == [3, 1]
        assert payload["summary"]["totalOrders"] == 5
        assert payload["skippedCount"] == 1
        assert payload["config"]["sortOrder"] == "ascending"

    def test_same_seed_same_output(self, carts_path, capsys):
        argv = ["compute", "--input", carts_path, "--date-mode", "last-7d", "--seed", "11"]
        _, first = run_cli(argv, capsys)
        _, second = run_cli(argv, capsys)
        assert json.loads(first)["series"] == json.loads(second)["series"]

    def test_missing_input_file_exits_1(self, tmp_path, capsys):
        code, out = run_cli(["compute", "--input", str(tmp_path / "absent.json")], capsys)
        assert code == 1
        assert out == ""

    def test_custom_range_without_bounds_exits_1(self, carts_path, capsys):
        code, _ = run_cli(["compute", "--input", carts_path, "--date-mode", "custom-range"], capsys)
        assert code == 1

    def test_no_command_prints_help(self, capsys):
        code, out = run_cli([], capsys)
        assert code == 1
        assert "compute" in out

    def test_log_flags_reconfigure_logging(self, carts_path, capsys, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "src.cli.stats_cli.configure_logging",
            lambda **kwargs: calls.append(kwargs),
        )

        code, _ = run_cli(
            ["--log-level", "ERROR", "--log-format", "text", "compute", "--input", carts_path],
            capsys,
        )

        assert code == 0
        assert calls == [{"level": "ERROR", "format_type": "text"}]

    def test_non_integer_seed_env_exits_1(self, carts_path, capsys, monkeypatch):
        monkeypatch.setenv("STATS_SEED", "seven")

        code, out = run_cli(["compute", "--input", carts_path], capsys)

        assert code == 1
        assert out == ""

    def test_malformed_url_exits_1(self, capsys):
        code, out = run_cli(["compute", "--url", "not-a-url"], capsys)
        assert code == 1
        assert out == ""
