"""Pick the PHP version for a working directory.

Signals are consulted in a fixed order; the first one naming a configured
version wins:

1. the nearest ``.php-version`` marker at or above the directory
2. the version of the ambient ``php`` on the search path
3. the built-in default version
4. the smallest configured label

Rules 2-4 also write the chosen label to a marker in the starting
directory, unless one is already there, so the next run in that project
takes rule 1.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from .config import ConfigMapping
from .exceptions import NoVersionAvailableError
from .marker import MARKER_FILE, find_version_marker, write_version_marker
from .probe import detect_ambient_version
from .result import Resolution

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "8.2"

VersionProbe = Callable[[], Optional[str]]


def resolve_version(
    start_dir: Union[str, Path],
    config: ConfigMapping,
    probe: Optional[VersionProbe] = detect_ambient_version,
) -> Resolution:
    """Select the configured interpreter for start_dir.

    Args:
        start_dir: Directory the launcher was invoked from
        config: Validated label -> executable mapping
        probe: Callable reporting the ambient version, or None to skip it

    Returns:
        Resolution with the label, its executable and the deciding rule

    Raises:
        NoVersionAvailableError: If the configuration is empty
    """
    start_dir = Path(start_dir)

    marker = find_version_marker(start_dir)
    if marker is not None:
        if marker in config:
            return _resolved(marker, config, "marker")
        logger.warning("PHP version %s from %s is not configured", marker, MARKER_FILE)

    if probe is not None:
        label = probe()
        if label is not None and label in config:
            return _choose(start_dir, label, config, "ambient")

    if DEFAULT_VERSION in config:
        return _choose(start_dir, DEFAULT_VERSION, config, "default")

    if config:
        return _choose(start_dir, min(config), config, "fallback")

    raise NoVersionAvailableError("no valid PHP version found")


def _choose(
    start_dir: Path, label: str, config: ConfigMapping, source: str
) -> Resolution:
    write_version_marker(start_dir, label)
    return _resolved(label, config, source)


def _resolved(label: str, config: ConfigMapping, source: str) -> Resolution:
    logger.debug("Using PHP %s (%s) from %s rule", label, config[label], source)
    return Resolution(label=label, path=config[label], source=source)
