from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.property)


class ExistingDirResolver:
    """Resolve every repos path to a directory that is known to exist."""

    def __init__(self, directory: Path) -> None:
        self.directory: Path = directory

    @property
    def lock_json(self) -> Path:
        return self.directory / "lock.json"

    def full_repos_path_of(self, repos_path: str) -> Path:  # noqa: ARG002
        return self.directory


@pytest.fixture(scope="session")
def resolver() -> ExistingDirResolver:
    return ExistingDirResolver(Path(__file__).parent)
