"""Locate the dotnet host executable.

Strategies, in order, first hit wins:

1. Explicit override path, if it is an existing file.
2. ``$DOTNET_ROOT`` joined with the platform's executable name.
3. Platform well-known install paths (see :mod:`dotnet_locator.toolchain`).
4. Plain PATH lookup.

Not finding anything is a normal outcome and yields ``None``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import LocatorConfig
from .implementations import LoggingLogger, RealEnvironment, RealFileSystem
from .interfaces import EnvironmentInterface, FileSystemInterface, LoggerInterface
from .toolchain import find_in_well_known_paths

logger = logging.getLogger(__name__)


class ExecutableLocator:
    """Finds the dotnet executable using layered fallbacks.

    Holds no state between calls; every ``locate`` re-reads the
    environment and file system.
    """

    def __init__(
        self,
        fs: Optional[FileSystemInterface] = None,
        env: Optional[EnvironmentInterface] = None,
        diagnostics: Optional[LoggerInterface] = None,
        config: Optional[LocatorConfig] = None,
    ):
        self._fs = fs or RealFileSystem()
        self._env = env or RealEnvironment()
        self._diagnostics = diagnostics or LoggingLogger()
        self._config = config or LocatorConfig()

    def _verbose(self, msg: str) -> None:
        if self._config.verbose:
            self._diagnostics.info(msg)

    def locate(self, override: Optional[str] = None) -> Optional[str]:
        """Return the best-guess path to dotnet, or None.

        Args:
            override: Explicit executable path. Used verbatim when it
                names an existing file; otherwise ignored.
        """
        if override:
            if self._fs.file_exists(override):
                logger.debug("Using override executable %s", override)
                return override
            logger.debug("Override %s does not exist, searching", override)

        from_root = self._from_root_env()
        if from_root:
            return from_root

        entry = find_in_well_known_paths(self._env, self._fs)
        if entry is not None:
            logger.debug("Found %s install at %s", entry.description, entry.path)
            return entry.path

        found = self._env.which(self._config.command)
        logger.debug("PATH lookup for %s: %s", self._config.command, found)
        return found or None

    def _from_root_env(self) -> Optional[str]:
        var = self._config.root_env_var
        root = self._env.get_env(var)
        if not root:
            return None

        if not self._fs.dir_exists(root):
            self._verbose(f'Environment Variable "{var}" = "{root}" but is not a directory.')
            return None

        # PATH lookup supplies the platform's file name (dotnet vs dotnet.exe).
        default_exe = self._env.which(self._config.command)
        if not default_exe:
            self._verbose(
                f'No default {self._config.command} to use as method to connect "{var}" '
                "with correct executable name for platform."
            )
            return None

        candidate = os.path.join(root, os.path.basename(default_exe))
        if self._fs.file_exists(candidate):
            logger.debug("Using %s from %s", candidate, var)
            return candidate

        self._verbose(
            f'Environment Variable "{var}" = "{root}" but does not contain a valid path to "{candidate}".'
        )
        return None


def find_dotnet_executable(
    override: Optional[str] = None,
    *,
    fs: Optional[FileSystemInterface] = None,
    env: Optional[EnvironmentInterface] = None,
    diagnostics: Optional[LoggerInterface] = None,
    config: Optional[LocatorConfig] = None,
) -> Optional[str]:
    """Locate dotnet with the given (or real) host seams."""
    return ExecutableLocator(fs=fs, env=env, diagnostics=diagnostics, config=config).locate(override)
