"""Resolve an installed .NET SDK by major version.

Runs ``dotnet --list-sdks`` and picks the highest listed SDK whose major
version equals the expected one. Listing lines look like::

    8.0.204 [/usr/share/dotnet/sdk]

Every failure (no executable, launch error, no match) is reported as
"not found" rather than raised.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .config import LocatorConfig
from .implementations import LoggingLogger, RealEnvironment, RealFileSystem, RealProcessRunner
from .interfaces import (
    EnvironmentInterface,
    FileSystemInterface,
    LoggerInterface,
    ProcessRunnerInterface,
)
from .locator import ExecutableLocator
from .version import SdkVersion, coerce_version

logger = logging.getLogger(__name__)

_FIRST_WS = re.compile(r"\s+")

ExpectedVersion = Union[SdkVersion, str, int]


@dataclass(frozen=True)
class SdkEntry:
    """One parsed listing line."""

    version: SdkVersion
    install_root: str

    @property
    def path(self) -> str:
        """Directory holding this SDK's files."""
        return os.path.join(self.install_root, str(self.version))


@dataclass(frozen=True)
class ResolvedSdk:
    """The winning SDK and the dotnet executable that listed it."""

    version: SdkVersion
    path: str
    executable: str


def _strip_brackets(token: str) -> str:
    if token.startswith("["):
        token = token[1:]
    if token.endswith("]"):
        token = token[:-1]
    return token


def parse_sdk_line(line: str) -> Optional[SdkEntry]:
    """Parse one ``<version> [<root>]`` line, or None if malformed."""
    parts = _FIRST_WS.split(line.strip(), maxsplit=1)
    if len(parts) != 2:
        return None
    version = SdkVersion.try_parse(parts[0])
    if version is None:
        return None
    return SdkEntry(version=version, install_root=_strip_brackets(parts[1].strip()))


def parse_sdk_listing(lines: Iterable[str]) -> list[SdkEntry]:
    """Parse every well-formed line, in order, skipping the rest."""
    entries = []
    for line in lines:
        entry = parse_sdk_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def best_entry_for_major(entries: Iterable[SdkEntry], expected_major: int) -> Optional[SdkEntry]:
    """Highest-versioned entry with *expected_major*.

    A later entry only wins if its version is strictly greater, so for
    duplicate versions the first entry's install root is kept.
    """
    best: Optional[SdkEntry] = None
    for entry in entries:
        if entry.version.major != expected_major:
            continue
        if best is None or entry.version > best.version:
            best = entry
    return best


def select_best_sdk(lines: Iterable[str], expected_major: int) -> Optional[SdkEntry]:
    """Pick the highest version with *expected_major* from raw listing lines."""
    return best_entry_for_major(parse_sdk_listing(lines), expected_major)


class SdkResolver:
    """Lists installed SDKs through the located dotnet executable."""

    def __init__(
        self,
        fs: Optional[FileSystemInterface] = None,
        env: Optional[EnvironmentInterface] = None,
        runner: Optional[ProcessRunnerInterface] = None,
        diagnostics: Optional[LoggerInterface] = None,
        config: Optional[LocatorConfig] = None,
    ):
        self._config = config or LocatorConfig()
        self._diagnostics = diagnostics or LoggingLogger()
        self._runner = runner or RealProcessRunner()
        self._locator = ExecutableLocator(
            fs=fs or RealFileSystem(),
            env=env or RealEnvironment(),
            diagnostics=self._diagnostics,
            config=self._config,
        )

    def _verbose(self, msg: str, warning: bool = False) -> None:
        if not self._config.verbose:
            return
        if warning:
            self._diagnostics.warning(msg)
        else:
            self._diagnostics.info(msg)

    def _read_listing(self, override: Optional[str]) -> Optional[tuple[str, list[str]]]:
        exe = self._locator.locate(override)
        if not exe:
            self._verbose(f"Could not find the {self._config.command} executable.")
            return None

        lines: list[str] = []

        def _collect(line: str) -> None:
            if line and not line.isspace():
                lines.append(line)

        # Popen resolves bare names through PATH, not the working directory.
        started = self._runner.run_streaming(
            [os.path.abspath(exe), self._config.list_sdks_arg],
            {self._config.ui_language_env_var: self._config.ui_language},
            _collect,
        )
        if not started:
            self._verbose(f"Failed to start {exe} {self._config.list_sdks_arg}.")
            return None
        logger.debug("%s %s printed %d lines", exe, self._config.list_sdks_arg, len(lines))
        return exe, lines

    def _check_format(self, exe: str, lines: list[str], entries: list[SdkEntry]) -> None:
        if lines and not entries:
            self._verbose(
                f"{exe} {self._config.list_sdks_arg} printed {len(lines)} lines "
                "but none could be parsed as an SDK entry.",
                warning=True,
            )

    def list_sdks(self, override: Optional[str] = None) -> Optional[list[SdkEntry]]:
        """Every parsed SDK entry, or None if dotnet could not be run."""
        listing = self._read_listing(override)
        if listing is None:
            return None
        exe, lines = listing
        entries = parse_sdk_listing(lines)
        self._check_format(exe, lines, entries)
        return entries

    def resolve(self, expected_version: ExpectedVersion, override: Optional[str] = None) -> Optional[ResolvedSdk]:
        """Find the newest installed SDK sharing *expected_version*'s major.

        Args:
            expected_version: Version (or version string / major number)
                whose major component must match exactly.
            override: Explicit dotnet executable path.

        Returns:
            The resolved SDK, or None when dotnet is missing, cannot be
            started, or lists no SDK with that major version.
        """
        expected = coerce_version(expected_version)
        listing = self._read_listing(override)
        if listing is None:
            return None
        exe, lines = listing

        entries = parse_sdk_listing(lines)
        self._check_format(exe, lines, entries)
        best = best_entry_for_major(entries, expected.major)
        if best is None:
            self._verbose(f"No .NET SDK with major version {expected.major} is installed.")
            return None
        return ResolvedSdk(version=best.version, path=best.path, executable=exe)


def try_find_dotnet_sdk(
    expected_version: ExpectedVersion,
    override: Optional[str] = None,
    *,
    fs: Optional[FileSystemInterface] = None,
    env: Optional[EnvironmentInterface] = None,
    runner: Optional[ProcessRunnerInterface] = None,
    diagnostics: Optional[LoggerInterface] = None,
    config: Optional[LocatorConfig] = None,
) -> tuple[bool, Optional[SdkVersion], Optional[str]]:
    """Return ``(found, version, path)``; ``(False, None, None)`` on failure."""
    resolver = SdkResolver(fs=fs, env=env, runner=runner, diagnostics=diagnostics, config=config)
    sdk = resolver.resolve(expected_version, override)
    if sdk is None:
        return False, None, None
    return True, sdk.version, sdk.path
