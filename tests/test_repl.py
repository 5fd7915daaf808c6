from typing import Iterator

import pytest

from rpncalc.config import REPL_CONFIG
from rpncalc.repl import format_result, main, repl


def feed_lines(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        print(prompt, end="")
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(7.0, "7"),
        pytest.param(2.5, "2.5"),
        pytest.param(1 / 3, "0.333333"),
        pytest.param(1e20, "1e+20"),
        pytest.param(float("inf"), "inf"),
        pytest.param(float("nan"), "nan"),
    ],
)
def test_format_result(value: float, expected: str) -> None:
    assert format_result(value) == expected


def test_repl_reports_each_line(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    feed_lines(monkeypatch, ["1+2*3", "  2+(3  ", "(1+2+3)", "5/0", "", "1+1"])
    repl()
    out = capsys.readouterr().out
    assert out.startswith("Simple math expression evaluator v 0.1")
    prompt = REPL_CONFIG["prompt"]
    assert out.split(prompt)[1:] == [
        "(result): 7\n",
        "-- parsing error --\n",
        "-- error --\n",
        "(result): inf\n",
        "",
    ]


def test_repl_stops_on_eof(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    feed_lines(monkeypatch, ["3.5+1.5"])
    repl()
    assert capsys.readouterr().out.endswith(f"(result): 5\n{REPL_CONFIG['prompt']}")


def test_repl_debug_dumps_postfix(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    feed_lines(monkeypatch, ["(1+2)*3"])
    repl(debug=True)
    out = capsys.readouterr().out
    assert "(result): 9\n  <NUMBER>1 1.0\n  <NUMBER>2 2.0\n  <PLUS>+\n  <NUMBER>3 3.0\n  <STAR>*\n" in out


def test_main(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    feed_lines(monkeypatch, ["10/2/5"])
    main(["--log-level", "debug"])
    assert "(result): 1\n" in capsys.readouterr().out


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["--version"])
    assert capsys.readouterr().out.strip() == "rpncalc 0.1"
