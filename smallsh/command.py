"""Parsing of one line of shell input into a command."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field

MAX_ARGS = 512

_SEPARATORS = re.compile(r"[ \n]+")


@dataclass
class Command:
    """One command line: its words, redirections and whether it runs in the background."""

    argv: list[str] = field(default_factory=list)
    input_file: str | None = None
    output_file: str | None = None
    background: bool = False


def _operand(tokens: deque[str], operator: str) -> str:
    if not tokens:
        raise ValueError(f"missing file name after {operator!r}")
    return tokens.popleft()


def parse_line(line: str, foreground_only: bool) -> Command | None:
    """Parse a line of input.

    Returns None for blank lines and comments. Words are separated by spaces
    and newlines only. ``<`` and ``>`` take the next word as a file name, and a
    trailing ``&`` asks for background execution unless ``foreground_only`` is
    set; an ``&`` anywhere else is an ordinary word.
    """
    tokens = deque(token for token in _SEPARATORS.split(line) if token)
    if not tokens or tokens[0].startswith("#"):
        return None

    command = Command()
    while tokens:
        token = tokens.popleft()
        if token == "<":
            command.input_file = _operand(tokens, token)
        elif token == ">":
            command.output_file = _operand(tokens, token)
        elif token == "&" and not tokens:
            command.background = True
        else:
            if len(command.argv) >= MAX_ARGS:
                raise ValueError(f"too many arguments (at most {MAX_ARGS})")
            command.argv.append(token)

    if foreground_only:
        command.background = False
    return command