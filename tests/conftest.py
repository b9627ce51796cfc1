"""Shared test fixtures for voltlock tests."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog
from structlog.testing import CapturingLogger

from voltlock.lockjson import LockJSON, LockStore, Profile, Repos, ReposType
from voltlock.utils._paths import VoltPaths

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem
    from structlog.typing import FilteringBoundLogger


@dataclass(frozen=True, slots=True)
class VoltDir:
    """Paths for a volt root on the fake filesystem."""

    root: Path
    repos_dir: Path
    lock_json: Path
    paths: VoltPaths


@pytest.fixture
def volt_dir(fs: "FakeFilesystem") -> VoltDir:
    """Create an empty volt root on the fake filesystem.

    Structure:
        /volt/
            repos/
    """
    root = Path("/volt")
    paths = VoltPaths(root)
    _ = fs.create_dir(paths.repos_dir)
    return VoltDir(
        root=root,
        repos_dir=paths.repos_dir,
        lock_json=paths.lock_json,
        paths=paths,
    )


@pytest.fixture
def make_repos_dir(fs: "FakeFilesystem", volt_dir: VoltDir) -> Callable[[str], Path]:
    """Return a function creating repos directories under /volt/repos."""

    def _make(repos_path: str) -> Path:
        full_path = volt_dir.paths.full_repos_path_of(repos_path)
        _ = fs.create_dir(full_path)
        return full_path

    return _make


@pytest.fixture
def capturing_logger() -> CapturingLogger:
    return CapturingLogger()


@pytest.fixture
def logger(capturing_logger: CapturingLogger) -> "FilteringBoundLogger":
    """Logger recording every call on capturing_logger."""
    return structlog.wrap_logger(
        capturing_logger,
        processors=[],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
    )


@pytest.fixture
def store(volt_dir: VoltDir, logger: "FilteringBoundLogger") -> LockStore:
    return LockStore(volt_dir.paths, logger=logger)


def build_lock_json(
    repos: list[tuple[str, int]] | None = None,
    profiles: dict[str, list[str]] | None = None,
    *,
    trx_id: int = 1,
    active_profile: str = "default",
) -> LockJSON:
    """Build a lock file from compact descriptions.

    Args:
        repos: (path, trx_id) pairs; each becomes a git repos at "v1".
        profiles: Profile name to repos_path mapping. Defaults to a single
            "default" profile listing every repos.
        trx_id: Root transaction ID.
        active_profile: Active profile name.
    """
    repos = repos or []
    if profiles is None:
        profiles = {"default": [path for path, _ in repos]}
    return LockJSON(
        version=1,
        trx_id=trx_id,
        active_profile=active_profile,
        load_vimrc=True,
        load_gvimrc=True,
        repos=[
            Repos(type=ReposType.GIT, trx_id=repos_trx_id, path=path, version="v1")
            for path, repos_trx_id in repos
        ],
        profiles=[
            Profile(name=name, repos_path=list(members), load_vimrc=True, load_gvimrc=True)
            for name, members in profiles.items()
        ],
    )


@pytest.fixture
def lock_json_factory() -> Callable[..., LockJSON]:
    return build_lock_json
