"""Key/value storage backends for persisted CRM state."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from estate_matcher.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Minimal persistent key/value interface (values are JSON-safe)."""

    def get(self, key: str, default: Any = None) -> Any: ...
    def put(self, key: str, value: Any) -> None: ...
    def delete(self, key: str) -> None: ...
    def keys(self) -> list[str]: ...


class InMemoryStorage:
    """Dictionary-backed storage; contents vanish with the process."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStorage:
    """Storage kept as a single JSON document on disk.

    The whole document is rewritten on every ``put`` and ``delete``.

    Parameters
    ----------
    path : str | Path
        JSON file location. Missing files start empty; parent directories
        are created on first write.
    pretty : bool
        Indent the written JSON.

    Raises
    ------
    StorageError
        If an existing file is not a JSON object.
    """

    def __init__(self, path: str | Path, pretty: bool = False) -> None:
        self.path = Path(path)
        self.pretty = pretty
        self._data = self._read()

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._flush()

    def delete(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._flush()

    def keys(self) -> list[str]:
        return list(self._data)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise StorageError(f"Storage file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} must contain a JSON object")
        logger.debug("Loaded %d keys from %s", len(data), self.path)
        return data

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        indent = 2 if self.pretty else None
        try:
            self.path.write_text(
                json.dumps(self._data, indent=indent, ensure_ascii=False, default=str),
                encoding="utf-8",
            )
        except OSError as exc:
            raise StorageError(f"Cannot write storage file {self.path}: {exc}") from exc
