# ruff: noqa: TC003  # Path needed at runtime for Protocol and dataclass fields
"""Volt directory layout and lock file path resolution.

The volt root holds ``lock.json`` and the ``repos/`` tree. It comes from
the ``VOLTPATH`` environment variable (through the configuration) and
defaults to ``~/volt``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from voltlock.config import VoltConfig

LOCK_JSON_NAME = "lock.json"
REPOS_DIR_NAME = "repos"


@runtime_checkable
class PathResolver(Protocol):
    """Protocol for mapping logical lock file names to filesystem locations.

    VoltPaths implements this protocol; tests may pass any object with the
    same shape.
    """

    @property
    def lock_json(self) -> Path:
        """Location of the lock file."""
        ...

    def full_repos_path_of(self, repos_path: str) -> Path:
        """Resolve a repos path (e.g. "github.com/user/plugin") to a directory.

        Args:
            repos_path: Slash-separated repos path as stored in the lock file.

        Returns:
            The absolute directory path for the repos.
        """
        ...


def get_default_volt_dir() -> Path:
    """Get the default volt root directory (~/volt)."""
    return Path.home() / "volt"


@dataclass(frozen=True, slots=True)
class VoltPaths:
    """Filesystem layout rooted at a volt directory.

    Attributes:
        root: The volt root directory.

    Example:
        >>> paths = VoltPaths(Path("/home/user/volt"))
        >>> paths.lock_json
        PosixPath('/home/user/volt/lock.json')
        >>> paths.full_repos_path_of("github.com/tyru/caw.vim")
        PosixPath('/home/user/volt/repos/github.com/tyru/caw.vim')
    """

    root: Path

    @classmethod
    def from_config(cls, config: "VoltConfig") -> Self:
        """Create paths from configuration, falling back to ~/volt."""
        if config.volt_path:
            return cls(Path(config.volt_path).expanduser())
        return cls(get_default_volt_dir())

    @classmethod
    def from_env(cls) -> Self:
        """Create paths from the environment (VOLTPATH), falling back to ~/volt."""
        # Deferred import to avoid circular dependency
        from voltlock.config import load_config  # noqa: PLC0415

        return cls.from_config(load_config())

    @property
    def lock_json(self) -> Path:
        """Get the path to lock.json inside the volt root."""
        return self.root / LOCK_JSON_NAME

    @property
    def repos_dir(self) -> Path:
        """Get the path to the repos/ directory inside the volt root."""
        return self.root / REPOS_DIR_NAME

    def full_repos_path_of(self, repos_path: str) -> Path:
        """Get the directory of a repos inside repos/.

        Args:
            repos_path: Slash-separated repos path as stored in the lock file.

        Returns:
            Path to the repos directory.
        """
        return self.repos_dir.joinpath(*(part for part in repos_path.split("/") if part))
