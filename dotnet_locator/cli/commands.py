"""Command handlers for the dotnet-locator CLI."""

from __future__ import annotations

from typing import Any, Optional

from dotnet_locator.cli.helpers import SCHEMA_VERSION, _effective_override, _print
from dotnet_locator.config import LocatorConfig
from dotnet_locator.locator import ExecutableLocator
from dotnet_locator.sdk_resolver import SdkResolver
from dotnet_locator.version import coerce_version


def cmd_find_exe(*, config: LocatorConfig, override: Optional[str], json_mode: bool) -> int:
    """Print the located dotnet executable.

    Returns:
        Exit code: 0 if found, 1 otherwise.
    """
    exe = ExecutableLocator(config=config).locate(_effective_override(override, config))
    if json_mode:
        _print({"schema_version": SCHEMA_VERSION, "found": exe is not None, "executable": exe}, json_mode=True)
    else:
        _print(exe if exe else f"{config.command} executable not found", json_mode=False)
    return 0 if exe else 1


def cmd_find_sdk(
    *,
    config: LocatorConfig,
    expected_version: str,
    override: Optional[str],
    json_mode: bool,
) -> int:
    """Resolve the newest installed SDK sharing the expected major version.

    Returns:
        Exit code: 0 if an SDK was resolved, 1 if not, 2 on a bad version.
    """
    try:
        expected = coerce_version(expected_version)
    except (TypeError, ValueError) as exc:
        _print({"error": str(exc)}, json_mode=json_mode)
        return 2

    sdk = SdkResolver(config=config).resolve(expected, _effective_override(override, config))
    payload: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "expected_major": expected.major,
        "found": sdk is not None,
        "version": str(sdk.version) if sdk else None,
        "path": sdk.path if sdk else None,
        "executable": sdk.executable if sdk else None,
    }
    if json_mode:
        _print(payload, json_mode=True)
    elif sdk:
        _print(f"{sdk.version} {sdk.path}", json_mode=False)
    else:
        _print(f"No .NET SDK {expected.major}.x found", json_mode=False)
    return 0 if sdk else 1


def cmd_list_sdks(*, config: LocatorConfig, override: Optional[str], json_mode: bool) -> int:
    """List every SDK reported by the located dotnet.

    Returns:
        Exit code: 0 if dotnet ran, 1 if it could not be found or started.
    """
    entries = SdkResolver(config=config).list_sdks(_effective_override(override, config))
    if entries is None:
        _print(
            {"schema_version": SCHEMA_VERSION, "error": f"could not run {config.command} {config.list_sdks_arg}"},
            json_mode=json_mode,
        )
        return 1

    if json_mode:
        _print(
            {
                "schema_version": SCHEMA_VERSION,
                "sdks": [{"version": str(e.version), "path": e.path} for e in entries],
            },
            json_mode=True,
        )
    else:
        for e in entries:
            _print(f"{e.version} {e.path}", json_mode=False)
    return 0
