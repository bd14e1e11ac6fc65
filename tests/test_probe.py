import pytest

from conftest import POSIX_ONLY
from phprunner.probe import detect_ambient_version, find_ambient_php, parse_php_version


class TestParsePhpVersion:
    @pytest.mark.parametrize(
        "output,expected",
        [
            ("PHP 8.2.0 (cli) (built: Dec  6 2022 15:31:23) (NTS)", "8.2"),
            ("PHP 8.3.0-dev (cli)", "8.3"),
            ("PHP 7.4.33 (cli)\nCopyright (c) The PHP Group\nZend Engine v3.4.0", "7.4"),
            ("PHP 10.12.1", "10.12"),
        ],
    )
    def test_extracts_major_minor(self, output, expected):
        """Only major.minor after the product name is kept."""
        assert parse_php_version(output) == expected

    @pytest.mark.parametrize("output", ["", "php 8.2.0", "Zend Engine v4.2.0", "PHP dev"])
    def test_no_match(self, output):
        """Output without "PHP x.y" yields None."""
        assert parse_php_version(output) is None


@POSIX_ONLY
class TestFindAmbientPhp:
    def test_found_on_path(self, make_php, tmp_path):
        """The first php on PATH is returned."""
        php = make_php()
        found = find_ambient_php(environ={"PATH": str(php.parent)}, launcher="")
        assert found == str(php)

    def test_missing(self, tmp_path):
        """No php on PATH yields None."""
        assert find_ambient_php(environ={"PATH": str(tmp_path)}, launcher="") is None

    def test_skips_the_launcher_itself(self, make_php, tmp_path):
        """A php that is this launcher is passed over."""
        shim = make_php(directory=tmp_path / "shims")
        real = make_php(directory=tmp_path / "real")
        path = f"{shim.parent}:{real.parent}"

        assert find_ambient_php(environ={"PATH": path}, launcher=str(shim)) == str(real)
        assert find_ambient_php(environ={"PATH": str(shim.parent)}, launcher=str(shim)) is None

    def test_skips_symlink_to_launcher(self, make_php, tmp_path):
        """Links resolving to the launcher are passed over too."""
        launcher = make_php(name="php-runner", directory=tmp_path / "opt")
        links = tmp_path / "links"
        links.mkdir()
        (links / "php").symlink_to(launcher)
        assert find_ambient_php(environ={"PATH": str(links)}, launcher=str(launcher)) is None


@POSIX_ONLY
class TestDetectAmbientVersion:
    def test_detects_version(self, make_php):
        """The ambient php's version is reported as major.minor."""
        php = make_php(version="8.1.27")
        assert detect_ambient_version(environ={"PATH": str(php.parent)}, launcher="") == "8.1"

    def test_nonzero_exit(self, make_php):
        """A failing version query yields None."""
        php = make_php(version_exit=2)
        assert detect_ambient_version(environ={"PATH": str(php.parent)}, launcher="") is None

    def test_unparsable_output(self, make_php):
        """Output without a version yields None."""
        php = make_php(version="unknown")
        assert detect_ambient_version(environ={"PATH": str(php.parent)}, launcher="") is None

    def test_no_ambient_php(self, tmp_path):
        """Nothing on PATH yields None."""
        assert detect_ambient_version(environ={"PATH": str(tmp_path)}, launcher="") is None

    def test_broken_interpreter(self, tmp_path):
        """An executable that cannot be started yields None."""
        bindir = tmp_path / "bin"
        bindir.mkdir()
        php = bindir / "php"
        php.write_text("#!/nonexistent/interpreter\n")
        php.chmod(0o755)
        assert detect_ambient_version(environ={"PATH": str(bindir)}, launcher="") is None
