[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishexec"
version = "0.1.0"
description = "Command execution core of a small interactive shell: environment, builtins, PATH lookup and output redirection"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "minishell", "builtins", "execution", "redirection", "environment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minishexec"]

[tool.pytest.ini_options]
addopts = "-ra"
