import os
import stat
import sys
import textwrap

import pytest

POSIX_ONLY = pytest.mark.skipif(os.name != "posix", reason="POSIX-only")

FAKE_PHP = """\
#!{python}
import json
import os
import signal
import sys

args = sys.argv[1:]
if args[:1] == ["--version"]:
    print("PHP {version} (cli) (built: Jan  1 2024 00:00:00) (NTS)")
    print("Copyright (c) The PHP Group")
    sys.exit({version_exit})
if args[:1] == ["--exit"]:
    sys.exit(int(args[1]))
if args[:1] == ["--kill"]:
    os.kill(os.getpid(), signal.SIGTERM)
if args[:1] == ["--cat"]:
    sys.stdout.write(sys.stdin.read())
    sys.exit(0)
print(json.dumps(args))
"""


@pytest.fixture
def make_php(tmp_path):
    """Factory writing small executable stand-ins for php binaries."""

    def _make(name="php", version="8.2.12", version_exit=0, directory=None):
        directory = directory or tmp_path / "bin"
        directory.mkdir(parents=True, exist_ok=True)
        php = directory / name
        php.write_text(
            FAKE_PHP.format(
                python=sys.executable, version=version, version_exit=version_exit
            )
        )
        php.chmod(php.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return php

    return _make


@pytest.fixture
def project(tmp_path):
    """Nested project tree a/b/c, returned as the deepest directory."""
    deepest = tmp_path / "a" / "b" / "c"
    deepest.mkdir(parents=True)
    return deepest


@pytest.fixture
def write_config(tmp_path):
    """Factory writing a php-runner.yaml file from a text block."""

    def _write(text, name="php-runner.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text))
        return path

    return _write


def marker_files(root):
    """All .php-version files below root."""
    return sorted(root.rglob(".php-version"))
