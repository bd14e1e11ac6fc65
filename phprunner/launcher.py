import logging
import os
import subprocess
from typing import IO, Optional, Sequence, Union

from .exceptions import LaunchError
from .result import ExitStatus

logger = logging.getLogger(__name__)

Stream = Optional[Union[int, IO]]


def launch(
    executable: str,
    args: Sequence[str],
    *,
    stdin: Stream = None,
    stdout: Stream = None,
    stderr: Stream = None,
) -> ExitStatus:
    """Run executable with args and wait for it.

    Streams default to the caller's own, passed through untouched.

    Args:
        executable: Interpreter to run
        args: Argument vector, forwarded verbatim
        stdin: Override for the child's standard input
        stdout: Override for the child's standard output
        stderr: Override for the child's standard error

    Returns:
        ExitStatus of the child

    Raises:
        LaunchError: If the executable is missing or cannot be started
    """
    if not os.path.exists(executable):
        raise LaunchError(executable, "no such file")

    argv = [executable, *args]
    logger.debug("Executing %s", argv)

    try:
        proc = subprocess.Popen(argv, stdin=stdin, stdout=stdout, stderr=stderr)
    except OSError as exc:
        raise LaunchError(executable, exc.strerror or str(exc)) from exc

    with proc:
        while True:
            try:
                returncode = proc.wait()
                break
            except KeyboardInterrupt:
                # the child got the same interrupt; let it decide
                continue

    return ExitStatus.from_returncode(returncode)
