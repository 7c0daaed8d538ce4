"""State repositories.

The store loads the whole blob once at startup and saves it back after every
mutation. Repository I/O errors propagate to the caller.
"""

import copy
import json
from pathlib import Path
from typing import Any, Protocol

from loguru import logger

DEFAULT_STORAGE_KEY = "fittrack-store"


class StateRepository(Protocol):
    def load(self) -> dict[str, Any] | None: ...

    def save(self, blob: dict[str, Any]) -> None: ...


class InMemoryStateRepository:
    """Keeps the blob in memory; used for tests and ephemeral sessions."""

    def __init__(self, blob: dict[str, Any] | None = None):
        self._blob = copy.deepcopy(blob)
        self.save_count = 0

    def load(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._blob)

    def save(self, blob: dict[str, Any]) -> None:
        self._blob = copy.deepcopy(blob)
        self.save_count += 1


class JsonFileStateRepository:
    """Stores the blob under a fixed key in a JSON file.

    Other top-level keys in the file are preserved on save. Writes go to a
    temporary file that replaces the target, so a crash mid-write leaves the
    previous state intact.
    """

    def __init__(self, path: Path | str, storage_key: str = DEFAULT_STORAGE_KEY):
        self.path = Path(path)
        self.storage_key = storage_key

    def _read_file(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            logger.warning("Ignoring state file with unexpected layout", path=str(self.path))
            return {}
        return data

    def load(self) -> dict[str, Any] | None:
        """Load the stored blob.

        Returns:
            The blob, or None if the file or key does not exist

        Raises:
            OSError: If the file cannot be read
            json.JSONDecodeError: If the file is not valid JSON
        """
        blob = self._read_file().get(self.storage_key)
        if blob is not None and not isinstance(blob, dict):
            logger.warning("Ignoring stored state that is not an object", storage_key=self.storage_key)
            return None
        return blob

    def save(self, blob: dict[str, Any]) -> None:
        data = self._read_file()
        data[self.storage_key] = blob

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self.path)
        logger.debug("Saved tracker state", path=str(self.path), storage_key=self.storage_key)
