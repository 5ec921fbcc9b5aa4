"""Shared pytest fixtures for dotnet-locator tests."""

from __future__ import annotations

import os
import stat
import sys
import textwrap

import pytest

from dotnet_locator.config import LocatorConfig
from dotnet_locator.mocks import MockEnvironment, MockFileSystem, MockLogger, MockProcessRunner


@pytest.fixture
def fs():
    return MockFileSystem()


@pytest.fixture
def env():
    return MockEnvironment()


@pytest.fixture
def runner():
    return MockProcessRunner()


@pytest.fixture
def diag():
    return MockLogger()


@pytest.fixture
def verbose_config():
    return LocatorConfig(verbose=True)


@pytest.fixture
def fake_dotnet(tmp_path):
    """Write an executable script that behaves like ``dotnet --list-sdks``.

    Returns a factory taking the lines to print; the script also echoes
    DOTNET_CLI_UI_LANGUAGE to stderr so stdout stays a pure listing.
    """
    if sys.platform == "win32":
        pytest.skip("shebang scripts are POSIX only")

    def _make(lines: list[str], name: str = "dotnet", subdir: str = "") -> str:
        folder = tmp_path / subdir if subdir else tmp_path
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        body = textwrap.dedent(
            f"""\
            #!{sys.executable}
            import os, sys
            if sys.argv[1:] != ["--list-sdks"]:
                sys.exit(3)
            sys.stderr.write(os.environ.get("DOTNET_CLI_UI_LANGUAGE", "") + "\\n")
            for line in {lines!r}:
                print(line)
            """
        )
        path.write_text(body)
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return os.fspath(path)

    return _make
