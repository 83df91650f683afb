"""Finding and starting external programs, with output redirection."""

from __future__ import annotations

import os
import stat
import subprocess
from collections.abc import Iterable, Mapping
from typing import IO, Union

from minishexec.builtins import execute_builtin, is_builtin
from minishexec.command import Command
from minishexec.environment import Environment
from minishexec.errprint import eprintf
from minishexec.strutil import split_words

EnvSource = Union[Mapping[str, str], Iterable[str], None]

_OUTPUT_FLAGS = os.O_CREAT | os.O_WRONLY | os.O_TRUNC
_OUTPUT_MODE = 0o644


def _env_mapping(envp: EnvSource) -> dict[str, str] | None:
    if envp is None:
        return None
    if isinstance(envp, Mapping):
        return dict(envp)
    result: dict[str, str] = {}
    for entry in envp:
        key, sep, value = entry.partition("=")
        if sep:
            result.setdefault(key, value)
    return result


def _truncate(path: str) -> None:
    try:
        os.close(os.open(path, _OUTPUT_FLAGS, _OUTPUT_MODE))
    except OSError:
        pass


def _run(path: str, args: list[str], envp: EnvSource, stdout: IO[bytes] | None = None) -> int:
    completed = subprocess.run(
        args, executable=path, env=_env_mapping(envp), stdout=stdout, check=False
    )
    return completed.returncode


def get_path(name: str, env: Environment) -> str | None:
    """Locate an executable: names with '/' are used as is, others searched in PATH."""
    if "/" in name:
        return name
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split_words(search, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def check_permission(cmd: Command | None, env: Environment) -> int:
    """Return 0 if the command can run, 126 if it may not be executed, 1 otherwise."""
    name = cmd.name() if cmd is not None else None
    if not name:
        return 1
    path = name if "/" in name else get_path(name, env)
    if path is None:
        return 1
    try:
        info = os.stat(path)
    except OSError:
        return 1
    if stat.S_ISDIR(info.st_mode):
        return 1
    if not os.access(path, os.X_OK):
        return 126
    return 0


def redirect_output(cmd: Command, env: Environment, envp: EnvSource) -> int:
    """Run the command with standard output sent to its output file; return its status."""
    target = cmd.output_file
    if target is None:
        eprintf("minishell: syntax error near unexpected token `newline`\n")
        return 2
    if os.path.isdir(target):
        eprintf("minishell: %s: Is a directory\n", target)
        return 1
    if cmd.is_ambiguous:
        eprintf("minishell: %s: ambiguous redirect\n", target)
        return 1
    status = check_permission(cmd, env)
    if status == 126:
        _truncate(target)
        eprintf("minishell: %s: Permission denied\n", cmd.name())
        return 126
    if status != 0:
        _truncate(target)
        eprintf("%s: command not found\n", cmd.name())
        return 127
    try:
        fd = os.open(target, _OUTPUT_FLAGS, _OUTPUT_MODE)
    except OSError as exc:
        eprintf("minishell: %s: %s\n", target, exc.strerror)
        return 1
    with os.fdopen(fd, "wb") as out:
        path = get_path(cmd.args[0], env)
        if path is None:
            eprintf("%s: command not found\n", cmd.args[0])
            return 127
        try:
            code = _run(path, cmd.args, envp, out)
        except OSError:
            eprintf("%s: execution failed\n", cmd.args[0])
            return 1
    return code if code >= 0 else 1


def execute_command(cmd: Command | None, envp: EnvSource, env: Environment) -> int:
    """Run one command, builtin or external, and return its exit status."""
    if cmd is None or not cmd.args:
        return 0
    if is_builtin(cmd):
        return execute_builtin(cmd, env)
    name = cmd.args[0]
    checker = check_permission(cmd, env)
    if checker == 1:
        eprintf("%s: command not found\n", name)
        return 127
    if checker == 126:
        eprintf("minishell: %s: Permission denied\n", name)
        return 126
    if cmd.output_file is not None:
        return redirect_output(cmd, env, envp)
    if cmd.has_redirection:
        eprintf("minishell: syntax error near unexpected token 'newline'\n")
        return 2
    path = get_path(name, env)
    if path is None:
        eprintf("%s: command not found\n", name)
        return 127
    try:
        code = _run(path, cmd.args, envp)
    except OSError as exc:
        eprintf("%s: %s\n", name, exc.strerror)
        return 1
    return code if code >= 0 else 128 - code