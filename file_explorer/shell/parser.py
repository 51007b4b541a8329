"""
Command line tokenizer.
"""

import shlex
from dataclasses import dataclass

from file_explorer.exceptions import CommandParseError


@dataclass(frozen=True)
class CommandInvocation:
    """Command name plus its arguments, built from one input line."""

    name: str
    args: tuple[str, ...] = ()

    def arg(self, index: int, default: str = "") -> str:
        """Return argument ``index`` or ``default`` when absent."""
        return self.args[index] if index < len(self.args) else default


def tokenize(line: str) -> list[str]:
    """
    Split a line into whitespace-separated tokens.

    Quoted substrings ("my file.txt" or 'my file.txt') become a single token
    with the quotes removed.

    Raises:
        CommandParseError: On an unterminated quote or dangling escape
    """
    if not line or not line.strip():
        return []
    try:
        return shlex.split(line, posix=True)
    except ValueError as e:
        raise CommandParseError(str(e))


def parse(line: str) -> CommandInvocation | None:
    """Tokenize a line into a CommandInvocation; None for blank input."""
    tokens = tokenize(line)
    if not tokens:
        return None
    return CommandInvocation(name=tokens[0], args=tuple(tokens[1:]))
