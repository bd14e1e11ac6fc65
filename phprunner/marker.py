import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

MARKER_FILE = ".php-version"


def find_version_marker(start_dir: Union[str, Path]) -> Optional[str]:
    """Find the nearest .php-version label at or above start_dir.

    Walks towards the filesystem root and returns the trimmed content of
    the first non-empty marker file. Never writes anything.

    Returns:
        The version label, or None if the root is reached without a match
    """
    directory = Path(os.path.abspath(start_dir))
    while True:
        label = read_version_marker(directory)
        if label:
            logger.debug("Found %s in %s: %s", MARKER_FILE, directory, label)
            return label

        parent = directory.parent
        if parent == directory:
            return None
        directory = parent


def read_version_marker(directory: Union[str, Path]) -> Optional[str]:
    """Return the trimmed label stored in directory's marker file, if any."""
    path = Path(directory) / MARKER_FILE
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return content.strip() or None


def write_version_marker(directory: Union[str, Path], label: str) -> Optional[Path]:
    """Persist label as directory's marker file.

    An existing marker is never overwritten. A failed write is logged and
    reported as None; callers carry on with the label they already picked.
    """
    path = Path(directory) / MARKER_FILE
    try:
        with open(path, "x", encoding="utf-8") as fh:
            fh.write(label + "\n")
    except FileExistsError:
        logger.warning("%s already exists, leaving it unchanged", path)
        return None
    except OSError as exc:
        logger.warning("Could not create %s: %s", path, exc)
        return None
    logger.info("Created %s with PHP version %s", path, label)
    return path
