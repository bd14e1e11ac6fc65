import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from .exceptions import ConfigNotFoundError

CONFIG_FILE = "php-runner.yaml"
CONFIG_DIR = "php-runner"
CONFIG_ENV = "PHP_RUNNER_CONFIG"


def config_search_paths(
    environ: Optional[Mapping[str, str]] = None,
    executable: Optional[str] = None,
    windows: Optional[bool] = None,
) -> List[Path]:
    """List the locations probed for the configuration file, in priority order.

    Args:
        environ: Environment to read (default: os.environ)
        executable: Path of the running launcher (default: sys.argv[0])
        windows: Use Windows locations (default: detected from os.name)

    Returns:
        Candidate file paths without duplicates. Locations whose
        environment variable is unset are left out.

    Order:
        - $PHP_RUNNER_CONFIG (explicit override)
        - user profile directory (HOME / USERPROFILE)
        - per-user config directory (XDG_CONFIG_HOME / APPDATA)
        - system-wide directories
        - directory of the running executable
    """
    if environ is None:
        environ = os.environ
    if executable is None:
        executable = sys.argv[0]
    if windows is None:
        windows = os.name == "nt"

    candidates: List[Path] = []

    override = environ.get(CONFIG_ENV)
    if override:
        candidates.append(Path(override))

    if windows:
        home = environ.get("USERPROFILE") or environ.get("HOME")
    else:
        home = environ.get("HOME")
    if home:
        candidates.append(Path(home) / CONFIG_FILE)

    if windows:
        appdata = environ.get("APPDATA")
        if appdata:
            candidates.append(Path(appdata) / CONFIG_DIR / CONFIG_FILE)
        programdata = environ.get("PROGRAMDATA")
        if programdata:
            candidates.append(Path(programdata) / CONFIG_DIR / CONFIG_FILE)
    else:
        xdg = environ.get("XDG_CONFIG_HOME")
        if xdg:
            candidates.append(Path(xdg) / CONFIG_DIR / CONFIG_FILE)
        elif home:
            candidates.append(Path(home) / ".config" / CONFIG_DIR / CONFIG_FILE)
        candidates.append(Path("/usr/local/etc") / CONFIG_DIR / CONFIG_FILE)
        candidates.append(Path("/etc") / CONFIG_DIR / CONFIG_FILE)

    if executable:
        exe_dir = Path(os.path.realpath(executable)).parent
        candidates.append(exe_dir / CONFIG_FILE)

    unique: List[Path] = []
    for path in candidates:
        if path not in unique:
            unique.append(path)
    return unique


def find_config_file(
    environ: Optional[Mapping[str, str]] = None,
    executable: Optional[str] = None,
    windows: Optional[bool] = None,
) -> Path:
    """Return the first existing configuration file.

    Raises:
        ConfigNotFoundError: If none of the candidate locations exists
    """
    searched = config_search_paths(environ, executable, windows)
    for path in searched:
        if path.is_file():
            return path
    raise ConfigNotFoundError(searched)
