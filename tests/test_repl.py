import io
from typing import Iterator

import pytest

from clips.console import LineReader
from clips.parser import parse
from clips.repl import main, rep, run
from clips.runtime import evaluate
from clips.value import Error, Number, SExpr, Symbol


@pytest.mark.parametrize(
    "value, rendered",
    [
        pytest.param(Number(-42), "-42"),
        pytest.param(Error("Division by zero!"), "Error: Division by zero!"),
        pytest.param(Symbol("mul"), "mul"),
        pytest.param(SExpr(), "()"),
        pytest.param(SExpr((Symbol("+"), Number(1), SExpr((Symbol("-"), Number(2))))), "(+ 1 (- 2))"),
    ],
)
def test_render(value, rendered: str) -> None:
    assert str(value) == rendered


@pytest.mark.parametrize(
    "line, output",
    [
        pytest.param("", "()"),
        pytest.param("()", "()"),
        pytest.param("(5)", "5"),
        pytest.param("(- 10 2 3)", "5"),
        pytest.param("(- 5)", "-5"),
        pytest.param("(/ 10 0)", "Error: Division by zero!"),
        pytest.param("(+ 1 (/ 10 0) 2)", "Error: Division by zero!"),
        pytest.param("(+ 1 -)", "Error: Cannot operate on non-number!"),
        pytest.param("div", "div"),
    ],
)
def test_rep(line: str, output: str) -> None:
    assert rep(line) == output


def test_rep_parse_failure() -> None:
    assert rep("(+ 1 2").startswith("[Parser error] Unclosed bracket")
    assert rep("(+ 1 foo)").startswith("[Tokenizer error] Unknown symbol")


@pytest.mark.parametrize("line", ["42", "-17", "(* 6 7)"])
def test_numbers_render_back_to_themselves(line: str) -> None:
    result = evaluate(parse(line))
    assert evaluate(parse(str(result))) == result


def test_errors_do_not_parse_back() -> None:
    # rendering an Error is one-way
    assert rep(rep("(/ 1 0)")).startswith("[Tokenizer error]")


def _reader(monkeypatch: pytest.MonkeyPatch, lines: list[str], end: type[BaseException] = EOFError) -> LineReader:
    feed: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(feed)
        except StopIteration:
            raise end

    monkeypatch.setattr("builtins.input", fake_input)
    return LineReader()


def test_run(monkeypatch: pytest.MonkeyPatch) -> None:
    reader = _reader(monkeypatch, ["(+ 1 2)", "(+ 1 2", "(/ 1 0)", "", "(* 2 3)", "(* 2 3)"])
    out = io.StringIO()
    run(reader, out)

    lines = out.getvalue().splitlines()
    assert lines[:3] == ["Clips v0.0.2", "Press Ctrl+C to Exit", ""]
    results = lines[3:]
    assert results[0] == "3"
    assert results[1] == "[Parser error] Unclosed bracket"
    assert results[4:] == ["Error: Division by zero!", "()", "6", "6", ""]
    assert reader.history == ["(+ 1 2)", "(+ 1 2", "(/ 1 0)", "", "(* 2 3)", "(* 2 3)"]


def test_run_stops_on_interrupt(monkeypatch: pytest.MonkeyPatch) -> None:
    reader = _reader(monkeypatch, ["(% 7 4)"], end=KeyboardInterrupt)
    out = io.StringIO()
    run(reader, out)
    assert out.getvalue().splitlines()[3:] == ["3", ""]


def test_main_expression(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["(* 2 (+ 3 4))"]) == 0
    assert capsys.readouterr().out == "14\n"


def test_main_expression_parse_failure(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["(* 2"]) == 1
    assert capsys.readouterr().out.startswith("[Parser error]")


def test_main_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    prompts: list[str] = []
    feed = iter(["(sub 1 2)"])

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    monkeypatch.setattr("sys.stdin", io.StringIO())
    assert main(["--prompt", "> "]) == 0
    assert prompts == ["> ", "> "]
    assert "-1\n" in capsys.readouterr().out


def test_run_survives_oversized_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    big_product = "(* " + "9223372036854775807 " * 300 + ")"
    reader = _reader(monkeypatch, ["9" * 5000, big_product, "(+ 1 2)"])
    out = io.StringIO()
    run(reader, out)
    assert out.getvalue().splitlines()[3:] == ["Error: Invalid number", "Error: Integer overflow!", "3", ""]


def test_run_writes_to_current_stdout(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    run(_reader(monkeypatch, ["(- 4 6)"]))
    assert "-2\n" in capsys.readouterr().out
