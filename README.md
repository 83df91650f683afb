# minishexec

The execution core of a small POSIX-style shell. It takes commands that have
already been parsed into `Command` objects and runs them: builtins in-process,
everything else as a child program found through `PATH`, with optional output
redirection to a file. Every runner returns the command's exit status.

## Modules

### `minishexec.environment`

- `parse_entry(entry)` splits a `KEY=VALUE` string into `(key, value)`. The
  value is `None` when there is no `=` or nothing follows it.
- `dup_env(entries)` builds an `Environment` from such strings. When a key
  appears twice, the first entry wins.
- `Environment` keeps variables in definition order. It has `get(key)`,
  `set(key, value)`, `keys()`, `in`, `len()` and iteration over
  `(key, value)` pairs. `render()` returns one line per variable: `KEY=VALUE`,
  or just `KEY` for a variable without a value.

### `minishexec.command`

- `Command` describes one parsed command. Its fields are `args`, `input_file`,
  `output_file`, `append_mode`, `heredoc_delimiter`, `is_ambiguous`,
  `has_redirection` and `next`. `name()` returns the first argument, or `None`.
- `TokenType` and `Token` describe lexer output (word, pipe, `<`, `>`, `>>`,
  `<<`, end of input).

### `minishexec.builtins`

- `env_builtin(args, env)` prints every variable that has a value as
  `KEY=VALUE`. With an argument it reports
  `minishell: env: '<arg>': No such file or directory` and returns 127.
- `exit_builtin(args)` writes `exit` to standard error and raises
  `SystemExit`. With no argument the status is 0. An argument that is not an
  integer, or does not fit in a signed 64-bit integer, gives status 2. With
  more than one argument it reports `too many arguments` and returns 1
  without exiting. Otherwise the status is the argument modulo 256.
- `pwd_builtin()` prints the current working directory.
- `is_builtin(cmd)` is true for `exit`, `pwd`, `env`, `cd`, `export`, `unset`
  and `echo`. `execute_builtin(cmd, env)` runs `exit`, `pwd` and `env`. For
  the other four it does nothing and returns 0.

### `minishexec.execution`

- `get_path(name, env)` returns `name` unchanged if it contains `/`. Otherwise
  it returns the first executable `<dir>/<name>` found in the `PATH`
  variable, or `None` if there is none.
- `check_permission(cmd, env)` returns 0 if the command can be run. It returns
  126 if the file exists but is not executable. It returns 1 if the command
  is missing, is not found, or is a directory.
- `execute_command(cmd, envp, env)` runs a builtin, or starts the program and
  waits for it. `envp` is the environment handed to the child: a mapping, an
  iterable of `KEY=VALUE` strings, or `None` to inherit the current one. A
  child killed by a signal gives 128 plus the signal number.
- `redirect_output(cmd, env, envp)` runs the command with standard output
  written to `cmd.output_file`. The file is created or truncated with mode
  0644. The file is still truncated if the command is not found or may not
  be executed. A directory target is refused, and so is a target marked
  `is_ambiguous`.

### `minishexec.errprint`

- `format_message(fmt, *args)` expands `%c %s %p %d %i %u %x %X %%`.
  - Numbers are wrapped to 32 bits.
  - `%s` of `None` gives `(null)`, and `%p` of 0 gives `(nil)`.
  - Unknown conversions are kept as written.
  - A lone trailing `%`, or a missing argument, raises `ValueError`.
- `eprintf(fmt, *args)` writes the message to standard error and returns its
  length. All diagnostics go through it.

### `minishexec.strutil`

- `atoi(text)` parses a leading integer the way C's `atoi` does and wraps the
  result to 32 bits.
- `split_words(text, sep)` splits on one character and drops empty words.
- `strtok(text, delims, index)` returns `(token, next_index)`, or
  `(None, end)` when only delimiters remain.

## Example

```python
from minishexec.command import Command
from minishexec.environment import dup_env
from minishexec.execution import execute_command, get_path
from minishexec.strutil import atoi, split_words

env = dup_env(["PATH=/usr/bin:/bin", "HOME=/home/user", "EMPTY="])
print(env.get("HOME"))          # /home/user
print(env.get("EMPTY"))         # None

print(get_path("ls", env))      # e.g. /usr/bin/ls, or None if not found

status = execute_command(Command(args=["ls", "-l"], output_file="out.txt"),
                         None, env)

print(atoi("  -42abc"))         # -42
print(split_words("/usr/bin::/bin", ":"))  # ['/usr/bin', '/bin']
```

## Exit statuses

| Status | Meaning |
| --- | --- |
| 127 | The command was not found, or `env` was given an argument. |
| 126 | The command was found but may not be executed. |
| 2 | `exit` was given a non-numeric argument, or a redirection has no target. |
| 1 | The output target is a directory or ambiguous, or the output file cannot be opened. |

## What it does not do

The package does not read or parse command lines. There is no prompt, no
lexer and no parser, so `TokenType` and `Token` are only data definitions,
and `Command` objects must be built by the caller. It has no installed
command.

It also leaves these out:

- It does not run pipelines: `Command.next` is not followed.
- It does not handle input redirection or here-documents.
- It ignores `append_mode`, so output redirection always truncates.
- `cd`, `export`, `unset` and `echo` are recognised as builtins but have no
  effect.