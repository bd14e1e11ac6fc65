"""phprunner: Run the right PHP version for every project.

php-runner stands in for the `php` command. For each invocation it picks
one of several installed PHP interpreters, based on the project the
command was run from, and hands it all arguments, streams and the exit
code.

Example:
    >>> from phprunner import run_php
    >>> status = run_php(["-r", "echo PHP_VERSION;"])
    8.2.12
    >>> status.code
    0

Main Components:
    - run_php: Resolve the interpreter for a directory and run it
    - resolve_interpreter: Resolve without running
    - list_versions: Show configured interpreters
    - ExitStatus / Resolution: Result dataclasses
"""

from .api import list_versions, resolve_interpreter, run_php
from .config import load_config, parse_config
from .exceptions import (
    ConfigNotFoundError,
    ConfigurationError,
    EmptyConfigError,
    LaunchError,
    MalformedEntryError,
    NoVersionAvailableError,
    PhpRunnerError,
)
from .resolver import DEFAULT_VERSION, resolve_version
from .result import ExitStatus, Resolution

__version__ = "0.1.0"

__all__ = [
    "run_php",
    "resolve_interpreter",
    "list_versions",
    "load_config",
    "parse_config",
    "resolve_version",
    "DEFAULT_VERSION",
    "ExitStatus",
    "Resolution",
    "PhpRunnerError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "MalformedEntryError",
    "EmptyConfigError",
    "NoVersionAvailableError",
    "LaunchError",
]
