#!/usr/bin/env python3
"""
decicalc.py — CLI narzędzie DeciCalc.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem DECICALC_
lub plik .env (np. DECICALC_PRECISION=100).

Podkomendy:
    eval     — oblicz wyrażenie (ścieżka "=", kod wyjścia 1 przy błędzie)
    preview  — podgląd na żywo (pusty wynik przy błędzie)
    rpn      — pokaż tokeny, notację postfiksową i wynik
    repl     — interaktywna sesja z historią i kontynuacją od wyniku

Użycie:
    python decicalc.py eval "(1+2)*3"
    python decicalc.py eval --json "10/0"
    python decicalc.py preview "200+10%"
    python decicalc.py rpn "2×-3"
    python decicalc.py repl
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.calculator.pipeline_calculator import PipelineCalculator
from config import Settings
from contracts import EvalOutcome, Token

# Linia zaczynająca się od operatora kontynuuje od ostatniego wyniku
_CHAIN_OPERATORS = ("+", "-", "*", "/", "×", "÷", "%")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        s = s.replace("×", "*").replace("÷", "/")
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _print_tokens_table(title: str, tokens: list[Token]) -> None:
    table = Table(title=f"{title} [{len(tokens)}]", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True, style="cyan")
    table.add_column("Type", no_wrap=True)
    table.add_column("Value")
    table.add_column("Prec", justify="right", no_wrap=True)
    for i, tok in enumerate(tokens):
        table.add_row(
            str(i),
            tok.type.value,
            _safe_terminal_text(tok.value),
            "" if tok.precedence is None else str(tok.precedence),
        )
    _console().print(table)


def _print_history_table(history: list[EvalOutcome]) -> None:
    table = Table(title=f"History [{len(history)}]", box=box.ASCII)
    table.add_column("Expression")
    table.add_column("Result", justify="right")
    for item in history:
        style = "red" if item.is_error else None
        table.add_row(
            _safe_terminal_text(item.expression),
            _safe_terminal_text(item.display),
            style=style,
        )
    _console().print(table)


def _calculator() -> PipelineCalculator:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    return PipelineCalculator(settings=settings)


# -- repl ------------------------------------------------------------------

class ReplSession:
    """Sesja interaktywna: historia (najnowsze pierwsze) i kontynuacja."""

    def __init__(self, calculator: PipelineCalculator) -> None:
        self._calculator = calculator
        self.history: list[EvalOutcome] = []
        self.last_result: str | None = None

    def submit(self, line: str) -> EvalOutcome:
        text = line.strip()
        if self.last_result is not None and text.startswith(_CHAIN_OPERATORS):
            text = self.last_result + text
        outcome = self._calculator.commit(text)
        if outcome.expression:
            self.history.insert(0, outcome)
        self.last_result = None if outcome.is_error else outcome.display
        return outcome

    def clear(self) -> None:
        self.history.clear()
        self.last_result = None


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace) -> int:
    outcome = _calculator().commit(args.expression)
    if args.json:
        print(outcome.model_dump_json(indent=2))
    elif outcome.is_error:
        print(f"{outcome.display} ({outcome.error_kind.value})", file=sys.stderr)
    else:
        print(outcome.display)
    return 1 if outcome.is_error else 0


def _preview(args: argparse.Namespace) -> int:
    print(_calculator().preview(args.expression))
    return 0


def _rpn(args: argparse.Namespace) -> int:
    trace = _calculator().trace(args.expression)
    _print_tokens_table("Tokens", trace.tokens)
    _print_tokens_table("Postfix", trace.postfix)
    rows: list[tuple[str, Any]] = [("expression", trace.expression)]
    if trace.error_kind is not None:
        rows.append(("error", trace.error_kind.value))
        rows.append(("message", trace.error_message))
    else:
        rows.append(("value", trace.value))
        rows.append(("display", trace.display))
    _print_kv_table("Result", rows)
    return 1 if trace.error_kind is not None else 0


def _repl(args: argparse.Namespace) -> int:
    session = ReplSession(_calculator())
    console = _console()
    console.print("DeciCalc — 'history', 'clear', 'quit'")
    while True:
        try:
            line = console.input("[bold cyan]> [/]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return 0

        command = line.strip().lower()
        if not command:
            continue
        if command in ("quit", "exit"):
            return 0
        if command == "history":
            _print_history_table(session.history)
            continue
        if command == "clear":
            session.clear()
            continue

        outcome = session.submit(line)
        style = "bold red" if outcome.is_error else "bold green"
        console.print(f"= {_safe_terminal_text(outcome.display)}", style=style)


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="decicalc",
        description="DeciCalc — kalkulator wyrażeń o dowolnej precyzji",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Oblicz wyrażenie (ścieżka '=')")
    p.add_argument("expression", help="Wyrażenie, np. '(1+2)*3'")
    p.add_argument("--json", action="store_true", help="Wynik jako JSON")

    # preview
    p = sub.add_parser("preview", help="Podgląd na żywo (pusty wynik przy błędzie)")
    p.add_argument("expression", help="Wyrażenie")

    # rpn
    p = sub.add_parser("rpn", help="Pokaż tokeny i notację postfiksową")
    p.add_argument("expression", help="Wyrażenie")

    # repl
    sub.add_parser("repl", help="Interaktywna sesja")

    args = parser.parse_args(argv)

    commands = {
        "eval":    _eval,
        "preview": _preview,
        "rpn":     _rpn,
        "repl":    _repl,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
