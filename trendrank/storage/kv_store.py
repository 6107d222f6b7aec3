"""
Key-value persistence behind the interaction and query logs.

Blobs are JSON-like values (lists/dicts of primitives). Readers treat a missing
or undecodable blob as absent; the log stores decide what absent means.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional, Protocol

from trendrank.utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    def read(self, key: str) -> Optional[Any]: ...

    def write(self, key: str, blob: Any) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def read(self, key: str) -> Optional[Any]:
        with self._lock:
            raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Undecodable blob for key=%s: %s", key, exc)
            return None

    def write(self, key: str, blob: Any) -> None:
        # stored as text so callers never share mutable state with the store
        raw = json.dumps(blob, ensure_ascii=False)
        with self._lock:
            self._data[key] = raw


class JsonFileKeyValueStore:
    """One `<key>.json` file per key inside `directory`."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)
        self._lock = threading.Lock()

    def _path(self, key: str) -> Path:
        safe = "".join(ch if ch.isalnum() or ch in "-_." else "_" for ch in key)
        return self.directory / f"{safe}.json"

    def read(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Unreadable blob for key=%s path=%s: %s", key, path, exc)
            return None

    def write(self, key: str, blob: Any) -> None:
        path = self._path(key)
        payload = json.dumps(blob, ensure_ascii=False)
        with self._lock:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{path.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, path)
            except OSError:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        logger.debug("Wrote key=%s bytes=%d", key, len(payload))
