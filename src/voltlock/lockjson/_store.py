"""Loading and saving lock.json.

The store is the only way lock.json is read or written. Loaded files are
validated before they are returned and every save re-validates the whole
document, so an inconsistent lock file is never written.
"""

from typing import TYPE_CHECKING

from voltlock.config import LoggingConfig, load_config
from voltlock.exceptions import ConfigValidationError, LockIOError, LockValidationError
from voltlock.lockjson._codec import dumps_lock_json, loads_lock_json
from voltlock.lockjson._models import LockJSON, initial_lock_json
from voltlock.lockjson._validation import validate
from voltlock.utils._logging import create_logger_from_config
from voltlock.utils._paths import PathResolver, VoltPaths

if TYPE_CHECKING:
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger


def _default_logger() -> "FilteringBoundLogger":
    # Only the logging section is needed here; invalid settings use the defaults
    try:
        logging_config = load_config().logging
    except ConfigValidationError as e:
        logger = create_logger_from_config(LoggingConfig())
        logger.warning("config_invalid", key=e.key, error=str(e))
        return logger
    return create_logger_from_config(logging_config)


class LockStore:
    """Reads, validates and writes lock.json.

    Attributes:
        paths: Resolver for the lock file and repos directories.
        logger: Structured logger for store events.

    Example:
        >>> store = LockStore(VoltPaths(Path("/home/user/volt")))
        >>> lock_json = store.load()
        >>> lock_json.trx_id += 1
        >>> store.save(lock_json)
    """

    def __init__(
        self,
        paths: PathResolver | None = None,
        *,
        logger: "FilteringBoundLogger | None" = None,
    ) -> None:
        """Initialize the store.

        Args:
            paths: Path resolver. Built from the configuration (VOLTPATH)
                when not given.
            logger: Logger to use. Built from the logging configuration
                when not given. Without explicit paths an invalid
                configuration raises ConfigValidationError; with them,
                invalid logging settings fall back to the defaults.
        """
        if paths is None:
            config = load_config()
            paths = VoltPaths.from_config(config)
            if logger is None:
                logger = create_logger_from_config(config.logging)
        elif logger is None:
            logger = _default_logger()
        self.paths: PathResolver = paths
        self.logger: "FilteringBoundLogger" = logger

    @property
    def lock_json_path(self) -> "Path":
        """Location of lock.json."""
        return self.paths.lock_json

    def validate(self, lock_json: LockJSON) -> None:
        """Validate a lock file against this store's filesystem layout.

        Raises:
            LockValidationError: The first violated invariant.
        """
        validate(lock_json, self.paths)

    def load(self) -> LockJSON:
        """Load and validate lock.json.

        A missing lock file is not an error: the initial lock file is
        returned without validation.

        Returns:
            The validated lock file.

        Raises:
            LockIOError: If the file exists but cannot be read.
            LockParseError: If the content is not a well-formed lock file.
            LockValidationError: If the content violates an invariant.
        """
        path = self.lock_json_path
        if not path.exists():
            self.logger.debug("lock_json_missing", path=str(path))
            return initial_lock_json()

        try:
            content = path.read_bytes()
        except OSError as e:
            msg = f"Failed to read lock file: {e}"
            raise LockIOError(msg, path=path, operation="read", cause=e) from e

        lock_json = loads_lock_json(content, path=path)
        try:
            self.validate(lock_json)
        except LockValidationError as e:
            self.logger.warning(
                "lock_json_invalid", path=str(path), field=e.field, error=str(e)
            )
            raise

        self.logger.debug(
            "lock_json_loaded",
            path=str(path),
            trx_id=lock_json.trx_id,
            repos=len(lock_json.repos or ()),
            profiles=len(lock_json.profiles or ()),
        )
        return lock_json

    def save(self, lock_json: LockJSON) -> None:
        """Validate and write lock.json.

        The parent directory is created if needed and any existing content
        is replaced. Nothing is written when validation fails.

        Args:
            lock_json: The lock file to save.

        Raises:
            LockValidationError: If the lock file violates an invariant.
            LockIOError: If the directory or file cannot be written.
        """
        path = self.lock_json_path
        try:
            self.validate(lock_json)
        except LockValidationError as e:
            self.logger.warning(
                "lock_json_not_saved", path=str(path), field=e.field, error=str(e)
            )
            raise

        content = dumps_lock_json(lock_json)

        if not path.parent.exists():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                msg = f"Failed to create lock file directory: {e}"
                raise LockIOError(
                    msg, path=path.parent, operation="mkdir", cause=e
                ) from e

        try:
            _ = path.write_bytes(content)
        except OSError as e:
            msg = f"Failed to write lock file: {e}"
            raise LockIOError(msg, path=path, operation="write", cause=e) from e

        self.logger.debug("lock_json_saved", path=str(path), trx_id=lock_json.trx_id)


def load_lock_json(paths: PathResolver | None = None) -> LockJSON:
    """Load lock.json with a default store.

    See LockStore.load.
    """
    return LockStore(paths).load()


def save_lock_json(lock_json: LockJSON, paths: PathResolver | None = None) -> None:
    """Save lock.json with a default store.

    See LockStore.save.
    """
    LockStore(paths).save(lock_json)
