"""Shared utilities for dotnet-locator CLI commands."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional

from dotnet_locator.config import LocatorConfig

SCHEMA_VERSION = 1


def _print(obj: Any, *, json_mode: bool) -> None:
    if json_mode:
        print(json.dumps(obj, indent=2, sort_keys=True))
    else:
        if isinstance(obj, str):
            print(obj)
        else:
            print(json.dumps(obj, indent=2, sort_keys=True))


def _configure_logging(verbose: bool) -> None:
    # stderr keeps stdout clean for --json consumers.
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO if verbose else logging.WARNING,
        format="[dotnet-locator] %(levelname)s: %(message)s",
    )


def _effective_override(override: Optional[str], config: LocatorConfig) -> Optional[str]:
    """CLI --override beats the config file's ``executable``."""
    return override or config.executable
