"""Tests for the logger stack and LaTeX formatting."""

from __future__ import annotations

import importlib

import pytest
import sympy

from linalg_engine.fmt import cformat, make_latex_augmented_matrix, pcformat
from linalg_engine.log import (
    RESULT,
    STEP,
    Logger,
    capture_logs,
    ignore_log,
    log,
    log_step,
    nest_appending_logger,
    nest_logger,
)

log_module = importlib.import_module("linalg_engine.log")


def test_capture_logs_restores_outer_logger() -> None:
    """Checks nested capture leaves the outer logger current."""
    outer = log_module.current_logger
    text: str = capture_logs(lambda: log(r"$%s$", 3))
    assert text == "$3$"
    assert log_module.current_logger is outer


def test_nested_appending_logger() -> None:
    """Checks inner logs are appended as one block."""
    collected: list[str] = []
    with nest_logger() as outer:
        with nest_appending_logger(collected):
            log("a")
            log("b")
        log("c")
    assert collected == ["a\nb"]
    assert outer.accum == ["c"]


def test_empty_nested_logger_appends_nothing() -> None:
    """Checks an empty block is not appended."""
    collected: list[str] = []
    with nest_appending_logger(collected):
        pass
    assert collected == []


def test_level_limit_drops_steps() -> None:
    """Checks step messages are filtered by the level limit."""
    quiet = Logger(level_limit=RESULT)
    with nest_logger(quiet):
        log("result")
        log_step("detail")
    assert quiet.accum == ["result"]
    verbose = Logger(level_limit=STEP)
    with nest_logger(verbose):
        log_step("detail")
    assert verbose.accum == ["detail"]


def test_ignore_log_returns_value() -> None:
    """Checks ignored logs still return the wrapped result."""
    with nest_logger() as lg:
        assert ignore_log(lambda: log("hidden") or 5) == 5
    assert lg.accum == []


def test_global_logger_cannot_be_popped() -> None:
    """Checks the bottom of the stack is protected."""
    with pytest.raises(ValueError):
        while True:
            log_module.pop_logger()
    assert log_module.current_logger is log_module.global_logger


def test_cformat() -> None:
    """Checks scalar rendering."""
    assert cformat("x") == "x"
    assert cformat(2.0) == "2"
    assert cformat(sympy.Rational(1, 3)) == r"\frac{1}{3}"
    assert cformat(-2, arg_of="*") == "(-2)"
    assert pcformat(r"%s + %s", 1, "y") == "1 + y"


def test_augmented_matrix_latex() -> None:
    """Checks the bar position in augmented matrices."""
    text: str = make_latex_augmented_matrix([[1, 2, 3], [4, 5, 6]], bar_col=2)
    assert text.startswith(r"\left(\begin{array}{cc|c}")
    assert text.endswith(r"\end{array}\right)")
