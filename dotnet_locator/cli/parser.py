"""Argument parser for the dotnet-locator CLI."""

from __future__ import annotations

import argparse

from dotnet_locator import __version__

_GLOBAL_SWITCHES = ("--json", "--verbose", "-v")


def _preprocess_argv(argv: list[str]) -> list[str]:
    """Reorder global flags (--json, --verbose, --config) before the subcommand.

    argparse only accepts top-level flags ahead of the subcommand, but
    callers tend to append them, so we move them to the front.

    Args:
        argv: Raw argument list (without ``sys.argv[0]``).

    Returns:
        Reordered argument list with global flags moved to the front.
    """
    global_args: list[str] = []
    rest: list[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in _GLOBAL_SWITCHES:
            global_args.append(token)
            i += 1
            continue
        if token.startswith("--config="):
            global_args.append(token)
            i += 1
            continue
        if token == "--config":
            # Needs a value.
            if i + 1 >= len(argv):
                rest.append(token)
                i += 1
                continue
            global_args.extend([token, argv[i + 1]])
            i += 2
            continue
        rest.append(token)
        i += 1

    return global_args + rest


def _add_override(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--override",
        default=None,
        metavar="PATH",
        help="Explicit dotnet executable; used as-is when the file exists",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the full argparse parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="dotnet-locator",
        description="Find the dotnet executable and installed .NET SDKs",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--json", action="store_true", help="Output machine-parseable JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print discovery diagnostics to stderr")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (only read when given)",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_exe = sub.add_parser("find-exe", help="Print the path of the dotnet executable")
    _add_override(p_exe)

    p_sdk = sub.add_parser("find-sdk", help="Resolve the newest SDK for a major version")
    p_sdk.add_argument("expected_version", help="Expected version, e.g. 8 or 8.0.100 (only the major is matched)")
    _add_override(p_sdk)

    p_list = sub.add_parser("list-sdks", help="List every SDK reported by dotnet --list-sdks")
    _add_override(p_list)

    return parser
