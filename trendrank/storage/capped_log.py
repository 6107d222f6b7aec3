from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from trendrank.storage.kv_store import InMemoryKeyValueStore, KeyValueStore
from trendrank.utils.clock import Clock, now_ms
from trendrank.utils.logger import get_logger

logger = get_logger(__name__)

EntryT = TypeVar("EntryT", bound=BaseModel)


class CappedLog(Generic[EntryT]):
    """
    Append-only log persisted as one JSON list under a single key.

    Every append reads the whole log, appends, drops the oldest entries beyond
    `max_entries` and writes the whole log back. One writer per process.
    """

    entry_type: type[EntryT]

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        clock: Optional[Clock] = None,
        *,
        key: str,
        max_entries: int,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.store = store if store is not None else InMemoryKeyValueStore()
        self.clock = clock or now_ms
        self.key = key
        self.max_entries = max_entries
        self._adapter = TypeAdapter(list[self.entry_type])

    def _load(self) -> list[EntryT]:
        blob = self.store.read(self.key)
        if blob is None:
            return []
        try:
            return self._adapter.validate_python(blob)
        except ValidationError as exc:
            logger.warning(
                "Malformed %s log under key=%s, starting empty (%d errors)",
                self.entry_type.__name__,
                self.key,
                exc.error_count(),
            )
            return []

    def _save(self, entries: list[EntryT]) -> None:
        self.store.write(self.key, [entry.model_dump(mode="json", exclude_none=True) for entry in entries])

    def append(self, entry: EntryT) -> None:
        entries = self._load()
        entries.append(entry)
        surplus = len(entries) - self.max_entries
        if surplus > 0:
            del entries[:surplus]
            logger.debug("Evicted %d oldest entries from key=%s", surplus, self.key)
        self._save(entries)

    def entries(self) -> list[EntryT]:
        return self._load()

    def clear(self) -> None:
        self._save([])
