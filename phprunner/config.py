"""Interpreter configuration: which executable serves which PHP version.

The configuration file holds one ``label: path`` pair per line::

    # php-runner.yaml
    7.4: /opt/php/7.4/bin/php
    8.2: /opt/php/8.2/bin/php

Blank lines and ``#`` comments are ignored. Entries pointing at a missing
executable are skipped with a warning; a later line for the same label
replaces an earlier one.
"""

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Union

from .exceptions import ConfigurationError, EmptyConfigError, MalformedEntryError

logger = logging.getLogger(__name__)

SEPARATOR = ":"
COMMENT = "#"

ConfigMapping = Mapping[str, str]


def parse_config(lines: Iterable[str], source: Optional[str] = None) -> ConfigMapping:
    """Build the label -> executable mapping from configuration lines.

    Args:
        lines: Raw configuration lines
        source: Name of the origin, used in messages only

    Returns:
        Read-only mapping of version label to executable path

    Raises:
        MalformedEntryError: If a line is not exactly two non-empty parts
        EmptyConfigError: If no entry points at an existing executable
    """
    entries: Dict[str, str] = {}

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT):
            continue

        label, sep, path = stripped.partition(SEPARATOR)
        label = label.strip()
        path = path.strip()
        if not sep or not label or not path:
            raise MalformedEntryError(line_number, line, source)

        if not os.path.exists(path):
            logger.warning(
                "PHP executable not found at %s (line %d), skipping version %s",
                path, line_number, label,
            )
            continue

        entries[label] = path

    if not entries:
        where = f" in {source}" if source else ""
        raise EmptyConfigError(f"no valid PHP versions found{where}")

    return MappingProxyType(entries)


def load_config(path: Union[str, Path]) -> ConfigMapping:
    """Read and parse a configuration file.

    Raises:
        ConfigurationError: If the file cannot be read or has no usable entry
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"cannot read config file {path}: {exc}") from exc

    logger.debug("Loading configuration from %s", path)
    return parse_config(text.splitlines(), source=str(path))

