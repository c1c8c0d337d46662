"""Synchronous key-value stores backing pantry persistence.

Each store maps a string key to one serialized string value. Writes are
all-or-nothing: a reader never observes a partially written value.
"""
import os
import tempfile
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

from pantrypal.utilities.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class JsonFileStore:
    """Stores each key as ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}_", suffix=".json")
        except OSError as e:
            raise PersistenceError(f"Could not write {path.name}: {e}", details={"key": key}) from e
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                tmp.write(value)
            os.replace(tmp_path, path)
        except OSError as e:
            raise PersistenceError(f"Could not write {path.name}: {e}", details={"key": key}) from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)


class MemoryStore:
    """In-process store; ``quota`` caps the total size of stored values in characters."""

    def __init__(self, initial: Optional[Dict[str, str]] = None, quota: Optional[int] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.quota = quota

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota is not None:
            used = sum(len(v) for k, v in self._data.items() if k != key)
            if used + len(value) > self.quota:
                raise PersistenceError("Storage quota exceeded", details={"key": key, "quota": self.quota})
        self._data[key] = value
