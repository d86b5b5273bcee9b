"""Line-oriented console prompts for integers, numbers and text."""

from __future__ import annotations

import re

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

_MAX_TEXT = 99


def _read_nonblank(prompt: str) -> str:
    line = input(prompt)
    while not line.strip():
        line = input()
    return line


def read_int(prompt: str) -> int:
    """Prompt for an integer; anything after the number on the line is ignored."""
    line = _read_nonblank(prompt)
    match = _INT.match(line)
    if match is None:
        raise ValueError(f"not an integer: {line!r}")
    return int(match.group(1))


def read_float(prompt: str) -> float:
    """Prompt for a number; anything after it on the line is ignored."""
    line = _read_nonblank(prompt)
    match = _FLOAT.match(line)
    if match is None:
        raise ValueError(f"not a number: {line!r}")
    return float(match.group(1))


def read_string(prompt: str) -> str:
    """Prompt for a line of text, at most 99 characters long."""
    return input(prompt)[:_MAX_TEXT]