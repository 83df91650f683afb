"""Command execution core of a small shell: environment, builtins, PATH lookup and output redirection."""

__version__ = "0.1.0"