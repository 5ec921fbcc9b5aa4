"""
Real implementations of interfaces for production use.

These classes wrap actual system resources (files, environment,
processes, logging) and implement the abstract interfaces.
"""

from typing import Mapping, Optional, Sequence
import logging
import os
import platform
import shutil
import subprocess
import sys
import threading

from .interfaces import (
    FileSystemInterface, EnvironmentInterface, ProcessRunnerInterface,
    LoggerInterface, LineCallback
)

logger = logging.getLogger(__name__)


class RealFileSystem(FileSystemInterface):
    """
    Real file system implementation.
    """

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def dir_exists(self, path: str) -> bool:
        return os.path.isdir(path)


class RealEnvironment(EnvironmentInterface):
    """
    Real process environment.

    ``which`` defers to shutil.which, which applies PATHEXT on Windows so
    the returned file name carries the platform's executable suffix.
    """

    def get_env(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def which(self, command: str) -> Optional[str]:
        return shutil.which(command)

    def platform(self) -> str:
        return sys.platform

    def machine(self) -> str:
        return platform.machine().lower()


class RealProcessRunner(ProcessRunnerInterface):
    """
    Runs a process with stdout piped to a reader thread.

    The reader pushes each decoded line to the callback as it arrives
    while the calling thread waits for exit. The reader is joined before
    returning so no trailing output is lost. There is no timeout.
    """

    def run_streaming(
        self,
        argv: Sequence[str],
        env_overrides: Mapping[str, str],
        on_line: LineCallback,
    ) -> bool:
        env = os.environ.copy()
        env.update(env_overrides)
        try:
            proc = subprocess.Popen(
                list(argv),
                stdout=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                env=env,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.debug("Failed to start %s: %s", argv[0] if argv else "?", exc)
            return False

        def _pump() -> None:
            if proc.stdout is None:
                return
            with proc.stdout:
                for raw in proc.stdout:
                    on_line(raw.rstrip("\r\n"))

        reader = threading.Thread(target=_pump, name="stdout-reader", daemon=True)
        reader.start()
        proc.wait()
        reader.join()
        logger.debug("%s exited with code %s", argv[0], proc.returncode)
        return True


class LoggingLogger(LoggerInterface):
    """
    Forwards diagnostics to a standard library logger.
    """

    def __init__(self, name: str = "dotnet_locator"):
        self._logger = logging.getLogger(name)

    def debug(self, msg: str) -> None:
        self._logger.debug(msg)

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warning(self, msg: str) -> None:
        self._logger.warning(msg)

    def error(self, msg: str) -> None:
        self._logger.error(msg)
