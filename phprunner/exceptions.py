from pathlib import Path
from typing import List, Optional


class PhpRunnerError(Exception):
    """Base exception for all php-runner errors."""


class ConfigurationError(PhpRunnerError):
    """Raised when the interpreter configuration cannot be used."""


class ConfigNotFoundError(ConfigurationError):
    """Raised when no configuration file exists in any searched location."""

    def __init__(self, searched: List[Path]):
        self.searched = list(searched)
        locations = "\n".join(f"  - {path}" for path in self.searched)
        super().__init__(f"no configuration file found, searched:\n{locations}")


class MalformedEntryError(ConfigurationError):
    """Raised when a configuration line is not a `label: path` pair."""

    def __init__(self, line_number: int, line: str, source: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        self.source = source
        where = f"{source}, line {line_number}" if source else f"line {line_number}"
        super().__init__(f"malformed entry ({where}): {line!r}")


class EmptyConfigError(ConfigurationError):
    """Raised when no configured interpreter survived validation."""


class NoVersionAvailableError(PhpRunnerError):
    """Raised when no PHP version can be selected for the working directory."""


class LaunchError(PhpRunnerError):
    """Raised when the selected interpreter cannot be started."""

    def __init__(self, executable: str, reason: str):
        self.executable = executable
        super().__init__(f"cannot execute {executable}: {reason}")
