"""Key-value persistence providers.

The repository and settings store only ever talk to a ``KeyValueStore``;
swapping the provider (memory for tests, a JSON file for the CLI) never
touches the calculation engine.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from workdaycalc.domain.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Abstract string key-value surface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the stored value, or None if the key is absent.

        Raises:
            StorageError: If the medium cannot be read.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one.

        Raises:
            StorageError: If the medium cannot be written.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key; removing an absent key is a no-op."""
        pass


class InMemoryStore(KeyValueStore):
    """Dictionary-backed store for tests and ephemeral sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStore(KeyValueStore):
    """Store every key as a string member of one JSON object on disk.

    The whole document is rewritten on each ``set``/``delete``; there is no
    locking, so concurrent writers race and the last write wins.

    Example:
        >>> store = JsonFileStore("~/.workdaycalc.json")
        >>> store.set("workday-last-sync", "2025-01-01T00:00:00+00:00")
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not contain a JSON object")
        return data

    def _write(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug("Wrote %d keys to %s", len(data), self.path)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
