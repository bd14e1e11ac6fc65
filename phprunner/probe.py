import logging
import os
import re
import shutil
import subprocess
import sys
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

PHP_COMMAND = "php"
VERSION_FLAG = "--version"
VERSION_PATTERN = re.compile(r"PHP (\d+\.\d+)")


def find_ambient_php(
    environ: Optional[Mapping[str, str]] = None,
    launcher: Optional[str] = None,
) -> Optional[str]:
    """Locate the default `php` on the search path.

    Hits that resolve to the running launcher itself are skipped, so a
    launcher installed under the name `php` never probes itself.

    Args:
        environ: Environment providing PATH (default: os.environ)
        launcher: Path of the running launcher (default: sys.argv[0])

    Returns:
        Absolute path of the first other `php`, or None
    """
    if environ is None:
        environ = os.environ
    if launcher is None:
        launcher = sys.argv[0]
    own = os.path.realpath(launcher) if launcher else None

    search_path = environ.get("PATH", os.defpath)
    for directory in search_path.split(os.pathsep):
        if not directory:
            continue
        found = shutil.which(PHP_COMMAND, path=directory)
        if found is None:
            continue
        if own and os.path.realpath(found) == own:
            logger.debug("Skipping %s: it is this launcher", found)
            continue
        return found
    return None


def parse_php_version(output: str) -> Optional[str]:
    """Extract "major.minor" from `php --version` output.

    >>> parse_php_version("PHP 8.2.0 (cli) (built: Dec  6 2022)")
    '8.2'
    """
    match = VERSION_PATTERN.search(output)
    if match:
        return match.group(1)
    return None


def detect_ambient_version(
    environ: Optional[Mapping[str, str]] = None,
    launcher: Optional[str] = None,
) -> Optional[str]:
    """Ask the default `php` which version it is.

    Returns:
        Version label, or None if there is no ambient php, it cannot be
        started, it exits non-zero, or its output has no version
    """
    php = find_ambient_php(environ, launcher)
    if php is None:
        logger.debug("No ambient %s on the search path", PHP_COMMAND)
        return None

    try:
        completed = subprocess.run(
            [php, VERSION_FLAG],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        logger.debug("Could not run %s: %s", php, exc)
        return None

    if completed.returncode != 0:
        logger.debug("%s %s exited with %d", php, VERSION_FLAG, completed.returncode)
        return None

    output = completed.stdout.decode("utf-8", errors="replace")
    label = parse_php_version(output)
    logger.debug("Ambient %s reports version %s", php, label)
    return label
