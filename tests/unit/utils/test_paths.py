"""Unit tests for volt path resolution."""

from pathlib import Path

import pytest

from voltlock.config import VoltConfig
from voltlock.utils._paths import PathResolver, VoltPaths, get_default_volt_dir


class TestVoltPaths:
    def test_lock_json(self) -> None:
        paths = VoltPaths(Path("/volt"))

        assert paths.lock_json == Path("/volt/lock.json")
        assert paths.repos_dir == Path("/volt/repos")

    def test_full_repos_path_of(self) -> None:
        paths = VoltPaths(Path("/volt"))

        assert paths.full_repos_path_of("github.com/tyru/caw.vim") == Path(
            "/volt/repos/github.com/tyru/caw.vim"
        )

    def test_full_repos_path_ignores_extra_slashes(self) -> None:
        paths = VoltPaths(Path("/volt"))

        assert paths.full_repos_path_of("/localhost//local/a/") == Path(
            "/volt/repos/localhost/local/a"
        )

    def test_satisfies_protocol(self) -> None:
        assert isinstance(VoltPaths(Path("/volt")), PathResolver)


class TestFromConfig:
    def test_uses_volt_path(self) -> None:
        paths = VoltPaths.from_config(VoltConfig(volt_path="/data/volt"))

        assert paths.root == Path("/data/volt")

    def test_expands_user(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", "/home/tester")

        paths = VoltPaths.from_config(VoltConfig(volt_path="~/myvolt"))

        assert paths.root == Path("/home/tester/myvolt")

    def test_defaults_to_home_volt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", "/home/tester")

        paths = VoltPaths.from_config(VoltConfig())

        assert paths.root == Path("/home/tester/volt")
        assert get_default_volt_dir() == Path("/home/tester/volt")


class TestFromEnv:
    def test_reads_voltpath(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLTPATH", "/env/volt")

        assert VoltPaths.from_env().lock_json == Path("/env/volt/lock.json")
