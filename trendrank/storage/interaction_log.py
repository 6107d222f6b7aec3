from __future__ import annotations

from typing import Optional

from trendrank.config import settings
from trendrank.schemas import InteractionEvent, InteractionKind
from trendrank.storage.capped_log import CappedLog
from trendrank.storage.kv_store import KeyValueStore
from trendrank.utils.clock import Clock

SEARCH_ID_PREFIX = "search_"


class InteractionLog(CappedLog[InteractionEvent]):
    entry_type = InteractionEvent

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        clock: Optional[Clock] = None,
        max_events: int | None = None,
        key: str | None = None,
    ) -> None:
        super().__init__(
            store,
            clock,
            key=key or settings.interaction_log_key,
            max_entries=settings.interaction_log_max if max_events is None else max_events,
        )

    def all(self) -> list[InteractionEvent]:
        return self.entries()

    def _track(self, item_id: str, kind: InteractionKind, value: float | None = None) -> InteractionEvent:
        event = InteractionEvent(item_id=item_id, kind=kind, timestamp=self.clock(), value=value)
        self.append(event)
        return event

    def track_view(self, item_id: str) -> InteractionEvent:
        return self._track(item_id, "view")

    def track_like(self, item_id: str) -> InteractionEvent:
        return self._track(item_id, "like")

    def track_purchase(self, item_id: str, quantity: float = 1) -> InteractionEvent:
        return self._track(item_id, "purchase", value=quantity)

    def track_search(self, query_text: str) -> InteractionEvent:
        # prefixed so free-text searches never collide with catalog ids
        return self._track(f"{SEARCH_ID_PREFIX}{query_text}", "search")
