from __future__ import annotations

import json

from adapters.calculator.pipeline_calculator import PipelineCalculator
from decicalc import ReplSession, main


def test_eval_prints_result(capsys):
    assert main(["eval", "2+2"]) == 0

    assert capsys.readouterr().out.strip() == "4"


def test_eval_reports_error_on_stderr(capsys):
    assert main(["eval", "1/0"]) == 1

    captured = capsys.readouterr()
    assert "Error (DivisionByZero)" in captured.err


def test_eval_json_output(capsys):
    assert main(["eval", "--json", "5%"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["display"] == "0.05"
    assert payload["is_error"] is False


def test_preview_prints_empty_line_for_incomplete_input(capsys):
    assert main(["preview", "2+"]) == 0

    assert capsys.readouterr().out == "\n"


def test_rpn_prints_tables(capsys):
    assert main(["rpn", "1+2*3"]) == 0

    out = capsys.readouterr().out
    assert "Postfix" in out
    assert "7" in out


def test_repl_session_chains_from_last_result():
    session = ReplSession(PipelineCalculator())

    assert session.submit("2+3").display == "5"
    chained = session.submit("*2")

    assert chained.display == "10"
    assert chained.expression == "5×2"
    assert [item.expression for item in session.history] == ["5×2", "2+3"]


def test_repl_session_does_not_chain_after_error():
    session = ReplSession(PipelineCalculator())

    assert session.submit("1÷0").is_error
    assert session.submit("+1").is_error
    assert session.submit("4").display == "4"


def test_repl_session_clear():
    session = ReplSession(PipelineCalculator())
    session.submit("1+1")

    session.clear()

    assert session.history == []
    assert session.last_result is None
