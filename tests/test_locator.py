"""Tests for dotnet_locator/locator.py using mock host seams."""

from __future__ import annotations

import os

from dotnet_locator.config import LocatorConfig
from dotnet_locator.locator import ExecutableLocator, find_dotnet_executable

MAC_X64 = "/usr/local/share/dotnet/x64/dotnet"
MAC_NATIVE = "/usr/local/share/dotnet/dotnet"


def _locator(fs, env, diag, config=None):
    return ExecutableLocator(fs=fs, env=env, diagnostics=diag, config=config or LocatorConfig())


class TestOverride:
    def test_existing_override_returned_verbatim(self, fs, env, diag):
        fs.add_file("./tools/dotnet")
        env.set_env("DOTNET_ROOT", "/root-dir")
        fs.add_dir("/root-dir")
        fs.add_file("/root-dir/dotnet")
        env.set_which("dotnet", "/usr/bin/dotnet")
        assert _locator(fs, env, diag).locate("./tools/dotnet") == "./tools/dotnet"

    def test_existing_override_wins_on_macos(self, fs, env, diag):
        env.set_platform("darwin", "x86_64")
        fs.add_file(MAC_X64)
        fs.add_file("/custom/dotnet")
        assert _locator(fs, env, diag).locate("/custom/dotnet") == "/custom/dotnet"

    def test_missing_override_falls_through(self, fs, env, diag):
        env.set_which("dotnet", "/usr/bin/dotnet")
        assert _locator(fs, env, diag).locate("/nope/dotnet") == "/usr/bin/dotnet"

    def test_missing_override_never_returned(self, fs, env, diag):
        assert _locator(fs, env, diag).locate("/nope/dotnet") is None

    def test_empty_override_ignored(self, fs, env, diag):
        env.set_which("dotnet", "/usr/bin/dotnet")
        assert _locator(fs, env, diag).locate("") == "/usr/bin/dotnet"
        assert "" not in fs.get_checked()

    def test_directory_override_is_not_a_file(self, fs, env, diag):
        fs.add_dir("/opt/dotnet")
        assert _locator(fs, env, diag).locate("/opt/dotnet") is None


class TestDotnetRoot:
    def test_root_with_executable(self, fs, env, diag):
        env.set_env("DOTNET_ROOT", "/opt/dotnet")
        env.set_which("dotnet", "/usr/bin/dotnet")
        fs.add_dir("/opt/dotnet")
        fs.add_file("/opt/dotnet/dotnet")
        assert _locator(fs, env, diag).locate(None) == os.path.join("/opt/dotnet", "dotnet")

    def test_executable_name_comes_from_path_lookup(self, fs, env, diag):
        env.set_env("DOTNET_ROOT", "/opt/dotnet")
        env.set_which("dotnet", "/usr/bin/dotnet.exe")
        fs.add_dir("/opt/dotnet")
        fs.add_file("/opt/dotnet/dotnet.exe")
        fs.add_file("/opt/dotnet/dotnet")
        assert _locator(fs, env, diag).locate(None) == "/opt/dotnet/dotnet.exe"

    def test_root_missing_executable_not_returned(self, fs, env, diag, verbose_config):
        env.set_env("DOTNET_ROOT", "/opt/dotnet")
        env.set_which("dotnet", "/usr/bin/dotnet")
        fs.add_dir("/opt/dotnet")
        result = _locator(fs, env, diag, verbose_config).locate(None)
        assert result == "/usr/bin/dotnet"
        assert not result.startswith("/opt/dotnet")
        assert diag.contains("does not contain a valid path", level="INFO")

    def test_root_not_a_directory(self, fs, env, diag, verbose_config):
        env.set_env("DOTNET_ROOT", "/not/here")
        assert _locator(fs, env, diag, verbose_config).locate(None) is None
        assert diag.contains("is not a directory")

    def test_root_without_path_lookup(self, fs, env, diag, verbose_config):
        env.set_env("DOTNET_ROOT", "/opt/dotnet")
        fs.add_dir("/opt/dotnet")
        fs.add_file("/opt/dotnet/dotnet")
        assert _locator(fs, env, diag, verbose_config).locate(None) is None
        assert diag.contains("No default dotnet")

    def test_empty_root_skipped_silently(self, fs, env, diag, verbose_config):
        env.set_env("DOTNET_ROOT", "")
        env.set_which("dotnet", "/usr/bin/dotnet")
        assert _locator(fs, env, diag, verbose_config).locate(None) == "/usr/bin/dotnet"
        assert diag.get_messages() == []

    def test_diagnostics_quiet_unless_verbose(self, fs, env, diag):
        env.set_env("DOTNET_ROOT", "/not/here")
        _locator(fs, env, diag).locate(None)
        assert diag.get_messages() == []

    def test_architecture_variants_ignored(self, fs, env, diag):
        env.set_env("DOTNET_ROOT_X64", "/opt/x64")
        env.set_which("dotnet", "/usr/bin/dotnet")
        fs.add_dir("/opt/x64")
        fs.add_file("/opt/x64/dotnet")
        assert _locator(fs, env, diag).locate(None) == "/usr/bin/dotnet"

    def test_custom_root_variable(self, fs, env, diag):
        env.set_env("MY_DOTNET", "/opt/mine")
        env.set_which("dotnet", "/usr/bin/dotnet")
        fs.add_dir("/opt/mine")
        fs.add_file("/opt/mine/dotnet")
        config = LocatorConfig(root_env_var="MY_DOTNET")
        assert _locator(fs, env, diag, config).locate(None) == "/opt/mine/dotnet"


class TestWellKnownPaths:
    def test_macos_x64_prefers_rosetta_install(self, fs, env, diag):
        env.set_platform("darwin", "x86_64")
        fs.add_file(MAC_X64)
        fs.add_file(MAC_NATIVE)
        assert _locator(fs, env, diag).locate(None) == MAC_X64

    def test_macos_x64_falls_back_to_native(self, fs, env, diag):
        env.set_platform("darwin", "x86_64")
        fs.add_file(MAC_NATIVE)
        assert _locator(fs, env, diag).locate(None) == MAC_NATIVE

    def test_macos_arm64_skips_x64_install(self, fs, env, diag):
        env.set_platform("darwin", "arm64")
        fs.add_file(MAC_X64)
        fs.add_file(MAC_NATIVE)
        assert _locator(fs, env, diag).locate(None) == MAC_NATIVE

    def test_macos_known_path_beats_path_lookup(self, fs, env, diag):
        env.set_platform("darwin", "arm64")
        env.set_which("dotnet", "/opt/homebrew/bin/dotnet")
        fs.add_file(MAC_NATIVE)
        assert _locator(fs, env, diag).locate(None) == MAC_NATIVE

    def test_linux_ignores_mac_paths(self, fs, env, diag):
        env.set_platform("linux", "x86_64")
        fs.add_file(MAC_NATIVE)
        assert _locator(fs, env, diag).locate(None) is None

    def test_root_env_beats_known_paths(self, fs, env, diag):
        env.set_platform("darwin", "arm64")
        env.set_env("DOTNET_ROOT", "/opt/dotnet")
        env.set_which("dotnet", "/usr/local/bin/dotnet")
        fs.add_dir("/opt/dotnet")
        fs.add_file("/opt/dotnet/dotnet")
        fs.add_file(MAC_NATIVE)
        assert _locator(fs, env, diag).locate(None) == "/opt/dotnet/dotnet"


class TestPathFallback:
    def test_path_lookup(self, fs, env, diag):
        env.set_which("dotnet", "/usr/bin/dotnet")
        assert _locator(fs, env, diag).locate(None) == "/usr/bin/dotnet"
        assert env.get_which_calls() == ["dotnet"]

    def test_nothing_found(self, fs, env, diag):
        assert _locator(fs, env, diag).locate(None) is None

    def test_custom_command(self, fs, env, diag):
        env.set_which("dotnet-nightly", "/usr/bin/dotnet-nightly")
        config = LocatorConfig(command="dotnet-nightly")
        assert _locator(fs, env, diag, config).locate(None) == "/usr/bin/dotnet-nightly"


class TestFindDotnetExecutable:
    def test_keyword_seams(self, fs, env, diag):
        env.set_which("dotnet", "/usr/bin/dotnet")
        assert find_dotnet_executable(fs=fs, env=env, diagnostics=diag) == "/usr/bin/dotnet"

    def test_real_host_override(self, tmp_path):
        exe = tmp_path / "dotnet"
        exe.write_text("")
        assert find_dotnet_executable(str(exe)) == str(exe)
