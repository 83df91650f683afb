"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from minishexec.command import Command
from minishexec.environment import Environment
from minishexec.errprint import eprintf
from minishexec.strutil import atoi

BUILTIN_NAMES = frozenset({"exit", "pwd", "env", "cd", "export", "unset", "echo"})

_LLONG_MAX_DIGITS = "9223372036854775807"
_LLONG_MIN_DIGITS = "9223372036854775808"
_DIGITS = frozenset("0123456789")


def _is_numeric(text: str) -> bool:
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return all(ch in _DIGITS for ch in body)


def _overflows_llong(text: str) -> bool:
    negative = text.startswith("-")
    digits = text[1:] if text[:1] in ("+", "-") else text
    digits = digits.lstrip("0")
    if len(digits) < len(_LLONG_MAX_DIGITS):
        return False
    if len(digits) > len(_LLONG_MAX_DIGITS):
        return True
    if negative and digits > _LLONG_MIN_DIGITS:
        return True
    return digits > _LLONG_MAX_DIGITS


def env_builtin(args: Sequence[str], env: Environment) -> int:
    """Print every variable that has a value; arguments are rejected."""
    if len(args) > 1:
        eprintf("minishell: env: '%s': No such file or directory\n", args[1])
        return 127
    for key, value in env:
        if value is not None:
            print(f"{key}={value}")
    return 0


def exit_builtin(args: Sequence[str]) -> int:
    """Leave the shell by raising SystemExit.

    Returns 1 without exiting when given more than one argument.
    """
    eprintf("exit\n")
    if len(args) < 2:
        raise SystemExit(0)
    arg = args[1]
    if not _is_numeric(arg) or _overflows_llong(arg):
        eprintf("minishell: exit: %s: numeric argument required\n", arg)
        raise SystemExit(2)
    if len(args) > 2:
        eprintf("minishell: exit: too many arguments\n")
        return 1
    raise SystemExit(atoi(arg) & 0xFF)


def pwd_builtin() -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print(f"minishell: pwd: {exc.strerror}", file=sys.stderr)
        return 1
    print(cwd)
    return 0


def is_builtin(cmd: Command | None) -> bool:
    """Tell whether the command names one of the shell's own commands."""
    if cmd is None:
        return False
    name = cmd.name()
    return name is not None and name in BUILTIN_NAMES


def execute_builtin(cmd: Command, env: Environment) -> int:
    """Run a builtin command and return its status.

    Builtins that are recognised but have no behaviour yet return 0.
    """
    name = cmd.name()
    if name == "exit":
        return exit_builtin(cmd.args)
    if name == "pwd":
        return pwd_builtin()
    if name == "env":
        return env_builtin(cmd.args, env)
    return 0