"""
Mock implementations for testing.

These classes implement the abstract interfaces with in-memory behavior
suitable for unit testing without a .NET installation.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from .interfaces import (
    FileSystemInterface, EnvironmentInterface, ProcessRunnerInterface,
    LoggerInterface, LineCallback
)


class MockFileSystem(FileSystemInterface):
    """
    In-memory file system for testing.

    Files and directories only exist once a test registers them.
    """

    def __init__(self):
        self._files: set = set()
        self._dirs: set = set()
        self._checked: List[str] = []

    def file_exists(self, path: str) -> bool:
        self._checked.append(path)
        return path in self._files

    def dir_exists(self, path: str) -> bool:
        self._checked.append(path)
        return path in self._dirs

    # Test helper methods

    def add_file(self, path: str) -> None:
        """Register a regular file."""
        self._files.add(path)

    def add_dir(self, path: str) -> None:
        """Register a directory."""
        self._dirs.add(path)

    def get_checked(self) -> List[str]:
        """Get every path passed to an existence check, in order."""
        return self._checked.copy()


class MockEnvironment(EnvironmentInterface):
    """
    Fixed environment for testing.

    ``which`` answers from a command -> path table instead of PATH.
    """

    def __init__(
        self,
        env: Optional[Dict[str, str]] = None,
        platform: str = "linux",
        machine: str = "x86_64",
    ):
        self._env: Dict[str, str] = dict(env or {})
        self._which: Dict[str, str] = {}
        self._platform = platform
        self._machine = machine
        self._which_calls: List[str] = []

    def get_env(self, name: str) -> Optional[str]:
        return self._env.get(name)

    def which(self, command: str) -> Optional[str]:
        self._which_calls.append(command)
        return self._which.get(command)

    def platform(self) -> str:
        return self._platform

    def machine(self) -> str:
        return self._machine

    # Test helper methods

    def set_env(self, name: str, value: str) -> None:
        """Set an environment variable."""
        self._env[name] = value

    def set_which(self, command: str, path: str) -> None:
        """Make which(command) return path."""
        self._which[command] = path

    def set_platform(self, platform: str, machine: str) -> None:
        """Change the reported platform and architecture."""
        self._platform = platform
        self._machine = machine

    def get_which_calls(self) -> List[str]:
        """Get every command passed to which()."""
        return self._which_calls.copy()


class MockProcessRunner(ProcessRunnerInterface):
    """
    Process runner that replays scripted stdout.

    Records every invocation so tests can assert on argv and environment.
    """

    def __init__(self, lines: Optional[List[str]] = None):
        self._lines: List[str] = list(lines or [])
        self._fail_on_start = False
        self._calls: List[tuple] = []

    def run_streaming(
        self,
        argv: Sequence[str],
        env_overrides: Mapping[str, str],
        on_line: LineCallback,
    ) -> bool:
        self._calls.append((list(argv), dict(env_overrides)))
        if self._fail_on_start:
            return False
        for line in self._lines:
            on_line(line)
        return True

    # Test helper methods

    def set_output(self, lines: List[str]) -> None:
        """Set the stdout lines the next run will emit."""
        self._lines = list(lines)

    def set_fail_on_start(self, fail: bool) -> None:
        """Make run_streaming() report a launch failure."""
        self._fail_on_start = fail

    def get_calls(self) -> List[tuple]:
        """Get (argv, env_overrides) for every run."""
        return self._calls.copy()


class MockLogger(LoggerInterface):
    """
    Logger that captures all messages for testing.
    """

    def __init__(self):
        self._messages: List[tuple] = []

    def debug(self, msg: str) -> None:
        self._messages.append(("DEBUG", msg))

    def info(self, msg: str) -> None:
        self._messages.append(("INFO", msg))

    def warning(self, msg: str) -> None:
        self._messages.append(("WARNING", msg))

    def error(self, msg: str) -> None:
        self._messages.append(("ERROR", msg))

    # Test helper methods

    def get_messages(self, level: Optional[str] = None) -> List[tuple]:
        """Get logged messages, optionally filtered by level."""
        if level:
            return [(lvl, m) for lvl, m in self._messages if lvl == level]
        return self._messages.copy()

    def clear(self) -> None:
        """Clear all logged messages."""
        self._messages.clear()

    def contains(self, substring: str, level: Optional[str] = None) -> bool:
        """Check if any message contains substring."""
        messages = self.get_messages(level)
        return any(substring in m for _, m in messages)
