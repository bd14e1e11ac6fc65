import logging
import os
import sys
from typing import List, Mapping, Optional

import typer

from .api import run_php
from .exceptions import PhpRunnerError

PROG_NAME = "php-runner"
LOG_LEVEL_ENV = "PHP_RUNNER_LOG_LEVEL"
LOG_FORMAT = f"{PROG_NAME}: %(levelname)s: %(message)s"

app = typer.Typer(
    name=PROG_NAME,
    help="Run the PHP version selected for the current project",
    add_completion=False,
)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
def cli_run(
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Arguments passed to PHP unchanged"
    ),
):
    """Run PHP with the version chosen for the working directory.

    The version comes from the nearest .php-version file, else the php on
    PATH, else the default version, else any configured one. Every
    argument is handed to PHP as is; php-runner has no options of its own.

    Examples:

        $ php-runner --version

        $ php-runner artisan migrate --force
    """
    try:
        status = run_php(args or [])
    except PhpRunnerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not status.exited:
        typer.echo(f"Error: PHP was terminated by signal {status.signal}", err=True)

    raise typer.Exit(status.code)


def main():
    """Entry point for CLI."""
    configure_logging()
    # everything after "--" is positional, so no user argument is parsed here
    app(args=["--", *sys.argv[1:]], prog_name=PROG_NAME)


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> int:
    """Send log records to stderr at the level named by PHP_RUNNER_LOG_LEVEL."""
    if environ is None:
        environ = os.environ
    name = environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    return level


if __name__ == "__main__":
    main()
