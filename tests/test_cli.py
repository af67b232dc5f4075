import logging

from click.utils import strip_ansi
from typer.testing import CliRunner

import fuzzy_align.__main__ as entrypoint
from fuzzy_align import __version__


def test_help_includes_expected_options() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["--help"])
    output = strip_ansi(result.output)

    assert result.exit_code == 0
    assert "--span" in output
    assert "--verbose" in output
    assert "--version" in output


def test_version_flag_prints_version_and_exits() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"fuzzy-align {__version__}"


def test_cli_prints_score_and_indices() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["AaBbCc", "abc"])

    assert result.exit_code == 0
    assert result.output == "28\t0,2,4\n"


def test_cli_empty_pattern_prints_zero_score() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["anything", ""])

    assert result.exit_code == 0
    assert result.output == "0\t\n"


def test_cli_span_prints_start_and_length() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["I am a 中国人.", "a人", "--span"])

    assert result.exit_code == 0
    assert result.output == "2\t8\n"


def test_cli_exits_when_nothing_matches() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["Ca", "ac"])

    assert result.exit_code == 1
    assert "no match" in result.output


def test_cli_span_exits_when_nothing_matches() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["abcdefg", "hi", "--span"])

    assert result.exit_code == 1
    assert "no match" in result.output


def test_cli_passes_verbose_flag_to_logging(monkeypatch) -> None:
    runner = CliRunner()
    captured: dict[str, object] = {}

    def _fake_setup_logging(*, verbose: bool = False) -> logging.Logger:
        captured["verbose"] = verbose
        return logging.getLogger("fuzzy_align")

    monkeypatch.setattr(entrypoint, "setup_logging", _fake_setup_logging)

    result = runner.invoke(entrypoint.cli, ["-v", "1111121", "21"])

    assert result.exit_code == 0
    assert result.output == "-4\t5,6\n"
    assert captured == {"verbose": True}


def test_cli_accepts_values_starting_with_dash_after_separator() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["--", "a-b", "-b"])

    assert result.exit_code == 0
    assert result.output == "12\t1,2\n"


def test_help_mentions_double_dash_for_dash_values() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["--help"])

    assert result.exit_code == 0
    assert "Put -- before" in strip_ansi(result.output)
