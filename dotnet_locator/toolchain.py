"""Well-known install locations for the dotnet host.

Installers drop ``dotnet`` in fixed places that are not always on PATH.
Each entry pairs a platform predicate with a path; entries are tried in
order and the first existing file wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .interfaces import EnvironmentInterface, FileSystemInterface

X86_64_MACHINES = frozenset({"x86_64", "amd64", "x64"})


def _is_macos(platform: str, machine: str) -> bool:
    return platform == "darwin"


def _is_macos_x64(platform: str, machine: str) -> bool:
    return platform == "darwin" and machine in X86_64_MACHINES


@dataclass(frozen=True)
class WellKnownPath:
    """A fixed install location, tried only when ``applies`` holds."""

    description: str
    applies: Callable[[str, str], bool]
    path: str


WELL_KNOWN_PATHS: tuple[WellKnownPath, ...] = (
    # x64 install alongside a native one, used when running under Rosetta 2.
    WellKnownPath("macOS x64", _is_macos_x64, "/usr/local/share/dotnet/x64/dotnet"),
    WellKnownPath("macOS native", _is_macos, "/usr/local/share/dotnet/dotnet"),
)


def find_in_well_known_paths(
    env: EnvironmentInterface,
    fs: FileSystemInterface,
    table: Sequence[WellKnownPath] = WELL_KNOWN_PATHS,
) -> Optional[WellKnownPath]:
    """Return the first applicable table entry whose file exists.

    Args:
        env: Supplies the platform and process architecture.
        fs: Used for the existence check.
        table: Entries to try, in order.

    Returns:
        The matching entry, or None if no entry applies or exists.
    """
    platform = env.platform()
    machine = env.machine()
    for entry in table:
        if entry.applies(platform, machine) and fs.file_exists(entry.path):
            return entry
    return None
