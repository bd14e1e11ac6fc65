import os
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .config import ConfigMapping, load_config
from .env import find_config_file
from .launcher import launch
from .probe import detect_ambient_version
from .resolver import VersionProbe, resolve_version
from .result import ExitStatus, Resolution


def run_php(
    args: Sequence[str],
    *,
    cwd: Optional[Union[str, Path]] = None,
    config: Optional[ConfigMapping] = None,
    probe: Optional[VersionProbe] = detect_ambient_version,
) -> ExitStatus:
    """Run the PHP interpreter selected for a directory.

    Args:
        args: Arguments forwarded verbatim to the interpreter
        cwd: Directory to resolve the version for (default: current directory)
        config: Label -> executable mapping (default: discovered config file)
        probe: Ambient version probe, or None to skip probing

    Returns:
        ExitStatus of the interpreter

    Raises:
        ConfigurationError: If no usable configuration is found
        NoVersionAvailableError: If no version can be selected
        LaunchError: If the interpreter cannot be started
    """
    resolution = resolve_interpreter(cwd=cwd, config=config, probe=probe)
    return launch(resolution.path, list(args))


def resolve_interpreter(
    *,
    cwd: Optional[Union[str, Path]] = None,
    config: Optional[ConfigMapping] = None,
    probe: Optional[VersionProbe] = detect_ambient_version,
) -> Resolution:
    """Resolve which configured interpreter serves a directory.

    May create a .php-version marker in cwd, see resolve_version().
    """
    if config is None:
        config = load_default_config()
    if cwd is None:
        cwd = os.getcwd()
    return resolve_version(cwd, config, probe=probe)


def load_default_config() -> ConfigMapping:
    """Load the first configuration file found in the standard locations."""
    return load_config(find_config_file())


def list_versions(config: Optional[ConfigMapping] = None) -> List[Dict[str, str]]:
    """List configured interpreters.

    Returns:
        List of dicts with 'label' and 'path' keys, sorted by label
    """
    if config is None:
        config = load_default_config()
    return [{"label": label, "path": config[label]} for label in sorted(config)]
