from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Text key-value store holding one JSON document per key."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, text: str) -> None:
        raise NotImplementedError


class MemoryStore:
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, text: str) -> None:
        self._data[key] = text


class JsonFileStore:
    """One UTF-8 ``<key>.json`` file per key under ``data_dir``.

    Writes go to a temp file in the same folder and are moved into place, so a
    crash mid-write never leaves a half-written document behind.
    """

    def __init__(self, data_dir: os.PathLike | str):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set(self, key: str, text: str) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, self._path(key))
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
