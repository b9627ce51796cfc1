"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be fed to deep_merge. The merge
functions create copies, so the original is never mutated.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "volt_path": "",
    "logging": {
        "level": "warning",
        "format": "text",
        "file": "",
    },
}
