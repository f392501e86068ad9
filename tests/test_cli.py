"""Tests for the command line and the interactive session."""
from __future__ import annotations

import io
from pathlib import Path

import pytest

from ZhSortTools.Cli import Cli
from ZhSortTools.classifier import Category
from ZhSortTools.options import NumeralPolicy, SortOptions, UpperCaseOrder
from ZhSortTools.scripts.cli import main

LABELS = ["肆", "1", "一", "2", "二", "參", "正"]


@pytest.fixture
def no_config(tmp_path: Path) -> list[str]:
    """Don't read the user config."""

    return ["--config", str(tmp_path / "config.yaml")]


@pytest.fixture
def cli(monkeypatch: pytest.MonkeyPatch) -> tuple[Cli, list[str]]:
    messages: list[str] = []
    cli = Cli()
    monkeypatch.setattr(cli, "print", lambda message="": messages.append(message))
    return cli, messages


def test_main_sorts_arguments(no_config: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(no_config + ["--policy", "value-upper-first"] + LABELS) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["1", "2", "參", "肆", "一", "二", "正"]


def test_main_reads_stdin(
    no_config: list[str],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(LABELS) + "\n"))
    assert main(no_config + ["--policy", "value"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1", "2", "一", "二", "參", "肆", "正"]


def test_main_reads_file(no_config: list[str], tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "labels.txt"
    path.write_text("\n".join(["十二測試", "三", "b"]), encoding="utf8")
    assert main(no_config + ["--policy", "value", "--prefix", "--input", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["b", "三", "十二測試"]


def test_main_uses_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Command line options override the config file."""

    path = tmp_path / "config.yaml"
    path.write_text("NUMERAL_POLICY: value-case\nUPPER_CASE_ORDER: upper-first\n")
    assert main(["--config", str(path)] + LABELS) == 0
    assert capsys.readouterr().out.splitlines() == ["1", "2", "參", "肆", "一", "二", "正"]

    assert main(["--config", str(path), "--policy", "value-lower-first"] + LABELS) == 0
    assert capsys.readouterr().out.splitlines() == ["1", "2", "一", "二", "參", "肆", "正"]


def test_main_invalid_config(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("VARIANT: cantonese\n")
    with pytest.raises(SystemExit):
        main(["--config", str(path), "a"])


def test_commands() -> None:
    commands = Cli().COMMANDS
    for _ in ("sort", "sort_file", "classify", "compare", "variant", "policy", "prefix", "options", "help"):
        assert _ in commands
    assert "cli" not in commands
    assert "run" not in commands


def test_session_options(cli: tuple[Cli, list[str]]) -> None:
    """Commands can be chained with a semicolon."""

    _cli, messages = cli
    assert _cli.run("variant simplified; policy value-case upper-first; prefix true")
    assert _cli._options == SortOptions.from_names("simplified", "value-case", "upper-first", True)
    assert "zh-CN" in messages[-1]


def test_session_sort(cli: tuple[Cli, list[str]]) -> None:
    _cli, messages = cli
    _cli.run("policy value-case lower-first")
    messages.clear()
    _cli.run("sort " + " ".join(LABELS))
    assert [_.strip() for _ in messages] == [
        f"<green>{_}</green>" for _ in ["1", "2", "一", "二", "參", "肆", "正"]
    ]


def test_session_sort_quoted_label(cli: tuple[Cli, list[str]]) -> None:
    _cli, messages = cli
    _cli.run("sort 'b a' a")
    assert [_.strip() for _ in messages] == ["<green>a</green>", "<green>b a</green>"]


def test_session_sort_file(cli: tuple[Cli, list[str]], tmp_path: Path) -> None:
    path = tmp_path / "labels.txt"
    path.write_text("二\n1\n一\n", encoding="utf8")
    _cli, messages = cli
    _cli.run(f"policy value; sort_file {path}")
    assert [_.strip() for _ in messages[1:]] == [f"<green>{_}</green>" for _ in ["1", "一", "二"]]


def test_session_classify(cli: tuple[Cli, list[str]]) -> None:
    _cli, messages = cli
    _cli.run("policy value-case; classify 壹 a 測試")
    assert Category.UPPER_NUMERAL.value in messages[1]
    assert Category.ASCII_WORD.value in messages[2]
    assert Category.GENERIC_WORD.value in messages[3]


def test_session_errors(cli: tuple[Cli, list[str]]) -> None:
    """Errors are printed and the session continues."""

    _cli, messages = cli
    assert _cli.run("policy roman")
    assert "roman" in messages[-1]
    assert _cli._options.numeral_policy == NumeralPolicy.COLLATION_DEFAULT
    assert _cli.run("sort")
    assert "No label" in messages[-1]
    assert _cli.run("unknown")
    assert any("Invalid command" in _ for _ in messages)


def test_session_quit(cli: tuple[Cli, list[str]]) -> None:
    _cli, messages = cli
    assert not _cli.run("options; quit; sort a")
    assert len(messages) == 1


def test_session_compare(cli: tuple[Cli, list[str]]) -> None:
    _cli, messages = cli
    _cli.run("compare a a")
    assert "=" in messages[-1]
    assert "zh-TW" in messages[-1]


def test_upper_case_order_kept(cli: tuple[Cli, list[str]]) -> None:
    """Changing the policy keeps the previous upper case order."""

    _cli, messages = cli
    _cli.run("policy value-case upper-first; policy value")
    assert _cli._options.upper_case_order == UpperCaseOrder.UPPER_FIRST


def test_completion() -> None:
    """Command names then parameter values are completed."""

    from prompt_toolkit.document import Document

    completer = Cli()._completer

    def complete(text: str) -> list[str]:
        return [_.text for _ in completer.get_completions(Document(text), None)]

    assert complete("var") == ["variant"]
    assert complete("policy v") == ["value", "value-case"]
    assert complete("policy value-case ") == ["upper-first", "lower-first"]
    assert complete("options; pre") == ["prefix"]
    assert complete("sort ") == []
