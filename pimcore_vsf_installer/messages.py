"""Terminal status messages."""
from __future__ import annotations

import sys
from typing import Iterable, TextIO, Union

GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
CYAN = "\033[96m"
BOLD = "\033[1m"
RESET = "\033[0m"

Lines = Union[str, Iterable[str]]


def _lines(text: Lines) -> list[str]:
    if isinstance(text, str):
        return [text]
    return [str(t) for t in text]


def _use_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _emit(text: Lines, *, color: str, prefix: str, stream: TextIO) -> None:
    on = _use_color(stream)
    for line in _lines(text):
        body = f"{prefix}{line}" if line else ""
        if on and body:
            body = f"{color}{body}{RESET}"
        print(body, file=stream)


def greeting(text: Lines, with_spacing: bool = False, *, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    if with_spacing:
        print(file=out)
    _emit(text, color=GREEN + BOLD, prefix="", stream=out)
    if with_spacing:
        print(file=out)


def info(text: Lines, *, stream: TextIO | None = None) -> None:
    _emit(text, color=CYAN, prefix="", stream=stream or sys.stdout)


def warning(text: Lines, *, stream: TextIO | None = None) -> None:
    _emit(text, color=YELLOW, prefix="WARNING: ", stream=stream or sys.stderr)


def error(text: Lines, *, stream: TextIO | None = None) -> None:
    _emit(text, color=RED, prefix="ERROR: ", stream=stream or sys.stderr)
