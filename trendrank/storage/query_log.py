from __future__ import annotations

from collections import Counter
from typing import Optional

from trendrank.config import settings
from trendrank.schemas import QueryLogEntry
from trendrank.storage.capped_log import CappedLog
from trendrank.storage.kv_store import KeyValueStore
from trendrank.utils.clock import Clock

MIN_POPULAR_QUERY_LENGTH = 3


class QueryLog(CappedLog[QueryLogEntry]):
    entry_type = QueryLogEntry

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        clock: Optional[Clock] = None,
        max_entries: int | None = None,
        key: str | None = None,
    ) -> None:
        super().__init__(
            store,
            clock,
            key=key or settings.query_log_key,
            max_entries=settings.query_log_max if max_entries is None else max_entries,
        )

    def record_query(
        self,
        text: str,
        timestamp: int | None = None,
        result_count: int = 0,
        item_id: str | None = None,
    ) -> QueryLogEntry:
        entry = QueryLogEntry(
            query=text,
            timestamp=self.clock() if timestamp is None else timestamp,
            result_count=result_count,
            item_id=item_id,
        )
        self.append(entry)
        return entry

    def history(self) -> list[QueryLogEntry]:
        return self.entries()

    def popular_queries(self, limit: int = 10) -> list[str]:
        """Most frequent queries, grouped by exact text. Ties keep first-seen order."""
        counts = Counter(
            entry.query for entry in self.history() if len(entry.query.strip()) >= MIN_POPULAR_QUERY_LENGTH
        )
        ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)
        return [query for query, _ in ranked[: max(0, limit)]]

    def recent_queries(self, limit: int = 5) -> list[str]:
        """Distinct queries from the last `limit` entries, newest first."""
        if limit <= 0:
            return []
        recent: list[str] = []
        for entry in reversed(self.history()[-limit:]):
            if entry.query not in recent:
                recent.append(entry.query)
        return recent

    def suggest_queries(self, text: str, limit: int = 5) -> list[str]:
        """Earlier queries containing `text` that returned at least one result."""
        if not (text or "").strip():
            return []

        needle = text.lower()
        suggestions: list[str] = []
        for entry in self.history():
            if len(suggestions) >= limit:
                break
            if entry.query == text or entry.result_count <= 0:
                continue
            if needle in entry.query.lower() and entry.query not in suggestions:
                suggestions.append(entry.query)
        return suggestions
