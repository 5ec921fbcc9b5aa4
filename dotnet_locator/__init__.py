"""
dotnet-locator

Finds the dotnet host executable and resolves the newest installed
.NET SDK for an expected major version.
"""

__version__ = "1.0.0"

from .interfaces import (
    FileSystemInterface,
    EnvironmentInterface,
    ProcessRunnerInterface,
    LoggerInterface,
)
from .config import ConfigError, LocatorConfig, load_config
from .version import SdkVersion
from .locator import ExecutableLocator, find_dotnet_executable
from .sdk_resolver import (
    ResolvedSdk,
    SdkEntry,
    SdkResolver,
    parse_sdk_line,
    select_best_sdk,
    try_find_dotnet_sdk,
)

__all__ = [
    "__version__",
    "FileSystemInterface",
    "EnvironmentInterface",
    "ProcessRunnerInterface",
    "LoggerInterface",
    "ConfigError",
    "LocatorConfig",
    "load_config",
    "SdkVersion",
    "ExecutableLocator",
    "find_dotnet_executable",
    "ResolvedSdk",
    "SdkEntry",
    "SdkResolver",
    "parse_sdk_line",
    "select_best_sdk",
    "try_find_dotnet_sdk",
]
