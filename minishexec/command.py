"""Token and parsed-command data structures shared by the shell."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class TokenType(enum.Enum):
    """Kinds of lexical tokens in a command line."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIRECT_IN = enum.auto()
    REDIRECT_OUT = enum.auto()
    REDIRECT_APPEND = enum.auto()
    HEREDOC = enum.auto()
    EOF = enum.auto()


@dataclass
class Token:
    """A single token: its kind and the text it was read from."""

    type: TokenType
    value: str | None = None


@dataclass
class Command:
    """One simple command with its arguments and redirections."""

    args: list[str] = field(default_factory=list)
    input_file: str | None = None
    output_file: str | None = None
    append_mode: bool = False
    heredoc_delimiter: str | None = None
    is_ambiguous: bool = False
    has_redirection: bool = False
    next: Command | None = None

    def name(self) -> str | None:
        """Return the program name (first argument), or None if there is none."""
        return self.args[0] if self.args else None