"""lock.json models, validation and storage.

Example:
    >>> from voltlock.lockjson import LockStore
    >>> store = LockStore()
    >>> lock_json = store.load()
    >>> profile = lock_json.find_profile_by_name(lock_json.active_profile)
    >>> repos_list = lock_json.get_repos_list_by_profile(profile)
"""

from voltlock.lockjson._codec import dumps_lock_json, loads_lock_json
from voltlock.lockjson._models import (
    DEFAULT_PROFILE_NAME,
    LockJSON,
    Profile,
    Repos,
    ReposType,
    initial_lock_json,
)
from voltlock.lockjson._store import LockStore, load_lock_json, save_lock_json
from voltlock.lockjson._validation import (
    get_lock_json_schema,
    is_valid,
    validate,
    validate_missing,
)

__all__ = [
    "DEFAULT_PROFILE_NAME",
    "LockJSON",
    "LockStore",
    "Profile",
    "Repos",
    "ReposType",
    "dumps_lock_json",
    "get_lock_json_schema",
    "initial_lock_json",
    "is_valid",
    "load_lock_json",
    "loads_lock_json",
    "save_lock_json",
    "validate",
    "validate_missing",
]
