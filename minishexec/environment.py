"""The shell's private copy of the process environment."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def parse_entry(entry: str) -> tuple[str, str | None]:
    """Split a ``KEY=VALUE`` string; the value is None when absent or empty."""
    key, sep, value = entry.partition("=")
    if sep and value:
        return key, value
    return key, None


class Environment:
    """An ordered set of variables, each with a value or no value."""

    def __init__(self, entries: Iterable[tuple[str, str | None]] = ()) -> None:
        self._vars: dict[str, str | None] = {}
        for key, value in entries:
            self.set(key, value)

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None if unset or without value."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Define ``key``, replacing any previous value."""
        self._vars[key] = value

    def keys(self) -> list[str]:
        """Return the variable names in definition order."""
        return list(self._vars)

    def render(self) -> str:
        """Return every variable as a line, ``KEY=VALUE`` or just ``KEY``."""
        lines = (
            key if value is None else f"{key}={value}"
            for key, value in self._vars.items()
        )
        return "".join(f"{line}\n" for line in lines)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        return iter(list(self._vars.items()))

    def __len__(self) -> int:
        return len(self._vars)


def dup_env(entries: Iterable[str]) -> Environment:
    """Build an Environment from ``KEY=VALUE`` strings; the first of duplicates wins."""
    env = Environment()
    for entry in entries:
        key, value = parse_entry(entry)
        if key not in env:
            env.set(key, value)
    return env