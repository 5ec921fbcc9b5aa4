"""
dotnet-locator: command line front-end.

Commands:
- find-exe: Print the dotnet executable that discovery settles on
- find-sdk: Resolve the newest installed SDK for a major version
- list-sdks: Show every SDK dotnet reports

Entry points:
- dotnet-locator: installed via pip
- Can also be imported and called programmatically via main(argv)
"""

from __future__ import annotations

from dotnet_locator.cli.commands import (
    cmd_find_exe,
    cmd_find_sdk,
    cmd_list_sdks,
)
from dotnet_locator.cli.dispatch import main
from dotnet_locator.cli.parser import _build_parser, _preprocess_argv

__all__ = [
    "main",
    "cmd_find_exe",
    "cmd_find_sdk",
    "cmd_list_sdks",
    "_build_parser",
    "_preprocess_argv",
]
