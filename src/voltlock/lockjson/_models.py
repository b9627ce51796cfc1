"""Data models for lock.json.

Field names are the persisted keys. The models are mutable so callers can
load a lock file, edit it in place and save it back; every save re-validates
the whole document. ``None`` for ``repos``, ``profiles`` and
``repos_path`` means the key was absent (or null), which is distinct from
an empty list.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, field_validator

from voltlock.exceptions import (
    ProfileNotFoundError,
    ReposNotFoundError,
    ReposPathNotFoundError,
)

DEFAULT_PROFILE_NAME = "default"


class ReposType(StrEnum):
    """Kinds of repos tracked in the lock file."""

    GIT = "git"
    STATIC = "static"


class Repos(BaseModel):
    """A single installed repos.

    Attributes:
        type: Repos kind. Unknown values are kept as-is and rejected by
            validation.
        trx_id: Transaction ID of the last change to this repos.
        path: Repos path (e.g. "github.com/tyru/caw.vim"), unique in the
            lock file.
        version: Pinned version. Required for git repos; null reads as
            empty.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    type: str = ""
    trx_id: StrictInt = 0
    path: str = ""
    version: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def null_version_is_empty(cls, value: object) -> object:
        # version is optional for static repos; null reads as unset
        return "" if value is None else value


class Profile(BaseModel):
    """A named selection of repos.

    Attributes:
        name: Profile name, unique in the lock file.
        repos_path: Ordered repos paths that belong to the profile.
        load_vimrc: Whether the profile loads vimrc.
        load_gvimrc: Whether the profile loads gvimrc.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    name: str = ""
    repos_path: list[str] | None = None
    load_vimrc: StrictBool = False
    load_gvimrc: StrictBool = False

    def index_of_repos_path(self, repos_path: str) -> int:
        """Get the index of a repos path in this profile, or -1."""
        for i, path in enumerate(self.repos_path or ()):
            if path == repos_path:
                return i
        return -1

    def contains_repos_path(self, repos_path: str) -> bool:
        """Check whether this profile lists a repos path."""
        return self.index_of_repos_path(repos_path) >= 0


class LockJSON(BaseModel):
    """Root of the lock file.

    Attributes:
        version: Lock file schema version.
        trx_id: Latest transaction ID; no repos may have a newer one.
        active_profile: Name of the profile currently in use.
        load_vimrc: Whether vimrc is loaded.
        load_gvimrc: Whether gvimrc is loaded.
        repos: Installed repos.
        profiles: Defined profiles.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    version: StrictInt = 0
    trx_id: StrictInt = 0
    active_profile: str = ""
    load_vimrc: StrictBool = False
    load_gvimrc: StrictBool = False
    repos: list[Repos] | None = None
    profiles: list[Profile] | None = None

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    def find_profile_by_name(self, name: str) -> Profile:
        """Get the profile with the given name.

        Args:
            name: Profile name.

        Returns:
            The profile itself, so changes to it are kept on save.

        Raises:
            ProfileNotFoundError: If no profile has that name.
        """
        for profile in self.profiles or ():
            if profile.name == name:
                return profile
        msg = f"profile '{name}' does not exist"
        raise ProfileNotFoundError(msg, name=name)

    def find_profile_index_by_name(self, name: str) -> int:
        """Get the index of the profile with the given name, or -1."""
        for i, profile in enumerate(self.profiles or ()):
            if profile.name == name:
                return i
        return -1

    def remove_first_repos_path(self, repos_path: str) -> None:
        """Remove the first occurrence of a repos path across all profiles.

        Profiles are searched in order, then each profile's repos_path in
        order. Only the first match is removed; later occurrences in other
        profiles are left alone.

        Args:
            repos_path: Repos path to remove.

        Raises:
            ReposPathNotFoundError: If no profile lists the repos path.
        """
        for profile in self.profiles or ():
            index = profile.index_of_repos_path(repos_path)
            if index >= 0:
                profile.repos_path = [
                    path
                    for i, path in enumerate(profile.repos_path or ())
                    if i != index
                ]
                return
        msg = f"no matching profiles[]/repos_path[]: {repos_path}"
        raise ReposPathNotFoundError(msg, repos_path=repos_path)

    # -------------------------------------------------------------------------
    # Repos
    # -------------------------------------------------------------------------

    def find_repos_by_path(self, repos_path: str) -> Repos:
        """Get the repos with the given path.

        Args:
            repos_path: Repos path.

        Returns:
            The repos itself, so changes to it are kept on save.

        Raises:
            ReposNotFoundError: If no repos has that path.
        """
        for repos in self.repos or ():
            if repos.path == repos_path:
                return repos
        msg = f"repos '{repos_path}' does not exist"
        raise ReposNotFoundError(msg, repos_path=repos_path)

    def remove_repos_by_path(self, repos_path: str) -> None:
        """Remove the first repos with the given path.

        Raises:
            ReposNotFoundError: If no repos has that path.
        """
        repos_list = self.repos or []
        for index, repos in enumerate(repos_list):
            if repos.path == repos_path:
                self.repos = [r for i, r in enumerate(repos_list) if i != index]
                return
        msg = f"no matching repos[]/path: {repos_path}"
        raise ReposNotFoundError(msg, repos_path=repos_path)

    def get_repos_list_by_profile(self, profile: Profile) -> list[Repos]:
        """Resolve every repos path of a profile to its repos.

        Args:
            profile: The profile to resolve.

        Returns:
            Repos in the profile's repos_path order.

        Raises:
            ReposNotFoundError: If any repos path has no matching repos.
        """
        return [self.find_repos_by_path(path) for path in profile.repos_path or ()]


def initial_lock_json() -> LockJSON:
    """Create the lock file used when none exists yet.

    Each call returns a new instance.

    Returns:
        A valid LockJSON with no repos and a single "default" profile.
    """
    return LockJSON(
        version=1,
        trx_id=1,
        active_profile=DEFAULT_PROFILE_NAME,
        load_vimrc=True,
        load_gvimrc=True,
        repos=[],
        profiles=[
            Profile(
                name=DEFAULT_PROFILE_NAME,
                repos_path=[],
                load_vimrc=True,
                load_gvimrc=True,
            )
        ],
    )
