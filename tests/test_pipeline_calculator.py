from __future__ import annotations

import re
from decimal import Decimal
from fractions import Fraction

import pytest

from adapters.calculator.pipeline_calculator import (
    PipelineCalculator,
    _calculator,
    safe_evaluate,
)
from adapters.evaluator.rpn_evaluator import DecimalRPNEvaluator
from adapters.postfix_converter.shunting_yard import to_postfix
from adapters.tokenizer.scanning_tokenizer import tokenize
from config import Settings
from contracts import ErrorKind
from ports.calculator import Calculator


@pytest.fixture
def calculator() -> PipelineCalculator:
    return PipelineCalculator(settings=Settings())


def test_pipeline_calculator_satisfies_port(calculator):
    assert isinstance(calculator, Calculator)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2+2", "4"),
        ("5%", "0.05"),
        ("200+10%", "220"),
        ("(1+2)×3", "9"),
        ("(1+2)*3", "9"),
        ("-5+3", "-2"),
        ("0.1+0.2", "0.3"),
        ("1÷3", "0.333333333333333"),
        ("1÷3×3", "1"),
        ("2×-3", "-6"),
        ("7.50×2", "15"),
    ],
)
def test_preview_scenarios(calculator, text, expected):
    assert calculator.preview(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "2+", "(1+2", "1..2+3", "10÷0", "2^3"])
def test_preview_collapses_failures_to_empty(calculator, text):
    assert calculator.preview(text) == ""


def test_commit_distinguishes_division_by_zero(calculator):
    outcome = calculator.commit("10/0")

    assert outcome.is_error is True
    assert outcome.error_kind == ErrorKind.DIVISION_BY_ZERO
    assert outcome.display == "Error"
    assert outcome.expression == "10÷0"


@pytest.mark.parametrize(
    "text,kind",
    [
        ("(1+2", ErrorKind.MISMATCHED_PARENTHESES),
        ("1..2+3", ErrorKind.INVALID_NUMBER),
        ("2^3", ErrorKind.INVALID_CHARACTER),
        ("2+", ErrorKind.MALFORMED_EXPRESSION),
        ("  ", ErrorKind.MALFORMED_EXPRESSION),
    ],
)
def test_commit_reports_other_failures_under_generic_label(calculator, text, kind):
    outcome = calculator.commit(text)

    assert outcome.is_error is True
    assert outcome.error_kind == kind
    assert outcome.display == "Malformed"


def test_commit_success(calculator):
    outcome = calculator.commit("2*2.5")

    assert outcome.is_error is False
    assert outcome.error_kind is None
    assert outcome.display == "5"
    assert outcome.expression == "2×2.5"


def test_evaluate_returns_display_and_error_flag(calculator):
    assert calculator.evaluate("1/4") == ("0.25", False)
    assert calculator.evaluate("1/0") == ("Error", True)
    assert calculator.evaluate("1+") == ("Malformed", True)


def test_failure_does_not_affect_following_call(calculator):
    assert calculator.commit("1÷0").is_error
    assert calculator.commit("1÷2").display == "0.5"


def test_error_labels_come_from_settings():
    calc = PipelineCalculator(
        settings=Settings(division_by_zero_label="Cannot divide by zero", malformed_label="?")
    )

    assert calc.evaluate("1÷0") == ("Cannot divide by zero", True)
    assert calc.evaluate("(") == ("?", True)


def test_display_digits_come_from_settings():
    calc = PipelineCalculator(settings=Settings(display_digits=5))

    assert calc.preview("2÷3") == "0.66667"


def test_stages_are_injectable():
    calc = PipelineCalculator(evaluator=DecimalRPNEvaluator(precision=50))

    assert calc.preview("1÷7") == "0.142857142857143"


def test_trace_exposes_tokens_postfix_and_value(calculator):
    trace = calculator.trace("2*-3")

    assert [t.value for t in trace.tokens] == ["2", "×", "-", "3"]
    assert [t.value for t in trace.postfix] == ["2", "0", "3", "-", "×"]
    assert Decimal(trace.value) == Decimal(-6)
    assert trace.display == "-6"
    assert trace.error_kind is None


def test_trace_stops_at_first_failure(calculator):
    trace = calculator.trace("(1+2")

    assert len(trace.tokens) == 4
    assert trace.postfix == []
    assert trace.value is None
    assert trace.error_kind == ErrorKind.MISMATCHED_PARENTHESES


def test_safe_evaluate_uses_default_calculator():
    assert safe_evaluate("0.1+0.2") == "0.3"
    assert safe_evaluate("1÷0") == ""


def test_safe_evaluate_reuses_one_calculator():
    assert _calculator() is _calculator()
    assert safe_evaluate("200+10%") == "220"
    assert safe_evaluate("1+2%3") == "1.06"


# Porównanie z niezależnym ewaluatorem na ułamkach (Fraction)

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def _reference(text: str) -> Fraction:
    source = text.replace("×", "*").replace("÷", "/")
    source = _NUMBER_RE.sub(lambda m: f"Fraction('{m.group()}')", source)
    return eval(source, {"Fraction": Fraction})


@pytest.mark.parametrize(
    "text",
    [
        "1+2×3",
        "(1+2)×3",
        "10-4-3",
        "64÷4÷2",
        "2×(3+4)×5",
        "1.5×(2-0.25)÷0.5",
        "((2))+((3)×(4))",
        "100-99.99",
        "7÷8+1÷16",
        "3-(4-(5-6))",
        "0.1×0.1×0.1",
        "123456789×987654321",
        "2×-3",
        "10÷-2×3",
        "5--3",
        "-(1+2)×4",
    ],
)
def test_pipeline_matches_reference_evaluator(text):
    value = DecimalRPNEvaluator().evaluate(to_postfix(tokenize(text)))

    assert Fraction(value) == _reference(text)
