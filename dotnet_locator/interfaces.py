"""
Interfaces for dotnet-locator

Abstract base classes for every host resource the locator and resolver
touch. Real implementations live in implementations.py, in-memory fakes
in mocks.py, so discovery logic can be tested without a .NET install.
"""

from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional, Sequence


class FileSystemInterface(ABC):
    """
    Abstract interface for file system existence checks.

    Implementations:
    - RealFileSystem: os.path checks
    - MockFileSystem: In-memory sets of files and directories
    """

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Return True if path is an existing regular file."""
        pass

    @abstractmethod
    def dir_exists(self, path: str) -> bool:
        """Return True if path is an existing directory."""
        pass


class EnvironmentInterface(ABC):
    """
    Abstract interface for process environment and platform queries.

    Implementations:
    - RealEnvironment: os.environ, shutil.which, sys.platform
    - MockEnvironment: Fixed values set by the test
    """

    @abstractmethod
    def get_env(self, name: str) -> Optional[str]:
        """Read an environment variable. Returns None if unset."""
        pass

    @abstractmethod
    def which(self, command: str) -> Optional[str]:
        """Resolve a bare command name on the search path."""
        pass

    @abstractmethod
    def platform(self) -> str:
        """Platform identifier in sys.platform form (darwin, linux, win32)."""
        pass

    @abstractmethod
    def machine(self) -> str:
        """Architecture of the running process, lower-cased (x86_64, arm64)."""
        pass


LineCallback = Callable[[str], None]


class ProcessRunnerInterface(ABC):
    """
    Abstract interface for spawning a process and streaming its stdout.

    Implementations:
    - RealProcessRunner: subprocess.Popen with a reader thread
    - MockProcessRunner: Replays scripted output lines
    """

    @abstractmethod
    def run_streaming(
        self,
        argv: Sequence[str],
        env_overrides: Mapping[str, str],
        on_line: LineCallback,
    ) -> bool:
        """
        Run argv to completion, calling on_line for each stdout line.

        Blocks until the process exits and every line has been delivered.
        Returns False if the process could not be started.
        """
        pass


class LoggerInterface(ABC):
    """
    Abstract interface for diagnostic output.

    Separates discovery logic from where its messages end up.
    """

    @abstractmethod
    def debug(self, msg: str) -> None:
        """Log debug message."""
        pass

    @abstractmethod
    def info(self, msg: str) -> None:
        """Log info message."""
        pass

    @abstractmethod
    def warning(self, msg: str) -> None:
        """Log warning message."""
        pass

    @abstractmethod
    def error(self, msg: str) -> None:
        """Log error message."""
        pass
