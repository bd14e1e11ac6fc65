from dataclasses import dataclass
from typing import Optional

SIGNAL_EXIT_CODE = 1


@dataclass(frozen=True)
class ExitStatus:
    """How a launched interpreter terminated.

    Attributes:
        exited: True if the process exited normally and reported a code
        code: Exit code to propagate (the child's own code, or 1 when the
            child was killed and no code could be extracted)
        signal: Signal number if the process was terminated by a signal
    """

    exited: bool
    code: int
    signal: Optional[int] = None

    @classmethod
    def from_returncode(cls, returncode: int) -> "ExitStatus":
        """Build from a subprocess return code (negative means killed on POSIX)."""
        if returncode < 0:
            return cls(exited=False, code=SIGNAL_EXIT_CODE, signal=-returncode)
        return cls(exited=True, code=returncode)


@dataclass(frozen=True)
class Resolution:
    """A PHP version selected for a working directory.

    Attributes:
        label: Version label, e.g. "8.2"
        path: Configured executable for that label
        source: Which rule picked it: "marker", "ambient", "default" or "fallback"
    """

    label: str
    path: str
    source: str
