"""Command dispatch for the dotnet-locator CLI."""

from __future__ import annotations

import sys
from typing import Optional

from dotnet_locator.cli.helpers import _configure_logging, _print
from dotnet_locator.cli.parser import _build_parser, _preprocess_argv
from dotnet_locator.config import ConfigError, load_config


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``dotnet-locator`` CLI.

    Parses arguments, loads configuration, and dispatches to the
    appropriate command handler.

    Args:
        argv: Argument list to parse.  Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: 0 on success, 1 when nothing was found, 2 on usage or
        config errors.
    """
    if argv is None:
        argv = sys.argv[1:]

    argv = _preprocess_argv(argv)

    # Late import to allow tests to monkeypatch dotnet_locator.cli.cmd_xxx
    import dotnet_locator.cli as cli

    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        _print({"error": str(exc)}, json_mode=args.json)
        return 2
    if args.verbose:
        config = config.replace(verbose=True)
    _configure_logging(config.verbose)

    if args.cmd == "find-exe":
        return cli.cmd_find_exe(config=config, override=args.override, json_mode=args.json)
    if args.cmd == "find-sdk":
        return cli.cmd_find_sdk(
            config=config,
            expected_version=args.expected_version,
            override=args.override,
            json_mode=args.json,
        )
    if args.cmd == "list-sdks":
        return cli.cmd_list_sdks(config=config, override=args.override, json_mode=args.json)

    parser.error(f"unknown command: {args.cmd}")
    return 2
