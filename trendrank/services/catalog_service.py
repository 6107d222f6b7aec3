from __future__ import annotations

from typing import Callable, Optional, Sequence

from trendrank.config import settings
from trendrank.schemas import (
    AutoCompleteSuggestion,
    BrowseFilters,
    CatalogItem,
    InteractionEvent,
    SortType,
    TrendingSnapshot,
)
from trendrank.search import fuzzy
from trendrank.storage.interaction_log import InteractionLog
from trendrank.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from trendrank.storage.query_log import QueryLog
from trendrank.trending import scorer
from trendrank.utils.clock import Clock, now_ms
from trendrank.utils.logger import get_logger

logger = get_logger(__name__)

_SORT_KEYS: dict[str, Callable[[CatalogItem], object]] = {
    "best-seller": lambda item: -item.purchases,
    "most-purchased": lambda item: -item.purchases,
    "most-liked": lambda item: -item.likes,
    "rating": lambda item: -item.rating,
    "newest": lambda item: -item.published_year,
    "alphabetical": lambda item: item.title.lower(),
}


class CatalogService:
    """Search, browse, tracking and trending over a caller-supplied catalog."""

    def __init__(self, store: Optional[KeyValueStore] = None, clock: Optional[Clock] = None) -> None:
        self.store = store if store is not None else InMemoryKeyValueStore()
        self.clock = clock or now_ms
        self.interactions = InteractionLog(self.store, self.clock)
        self.queries = QueryLog(self.store, self.clock)
        self.threshold = settings.search_threshold

    @classmethod
    def from_settings(cls, clock: Optional[Clock] = None) -> "CatalogService":
        return cls(JsonFileKeyValueStore(settings.storage_dir), clock)

    # ---------------- search ----------------

    def search(self, catalog: Sequence[CatalogItem], query: str, threshold: float | None = None) -> list[CatalogItem]:
        results = fuzzy.search(catalog, query, self.threshold if threshold is None else threshold)
        if query.strip():
            logger.debug("search query=%r results=%d catalog=%d", query, len(results), len(catalog))
            self.queries.record_query(query, result_count=len(results))
            self.interactions.track_search(query)
        return results

    def autocomplete(
        self, catalog: Sequence[CatalogItem], query: str, limit: int | None = None
    ) -> list[AutoCompleteSuggestion]:
        return fuzzy.autocomplete(catalog, query, settings.autocomplete_limit if limit is None else limit)

    def select_suggestion(
        self, catalog: Sequence[CatalogItem], suggestion: AutoCompleteSuggestion | str
    ) -> None:
        """Record a picked suggestion; plain strings come from recent or popular searches."""
        if isinstance(suggestion, str):
            text, item_id = suggestion, None
        else:
            text, item_id = suggestion.text, suggestion.item.id if suggestion.item else None
        matched = fuzzy.search(catalog, text, self.threshold)
        self.queries.record_query(text, result_count=len(matched), item_id=item_id)

    def browse(self, catalog: Sequence[CatalogItem], filters: BrowseFilters) -> list[CatalogItem]:
        items = self.search(catalog, filters.search) if filters.search else list(catalog)

        if filters.category and filters.category != "All":
            items = [item for item in items if item.category == filters.category]
        if filters.age_rating and filters.age_rating != "All":
            items = [item for item in items if item.age_rating == filters.age_rating]

        return self._sort(catalog, items, filters.sort_by)

    def _sort(self, catalog: Sequence[CatalogItem], items: list[CatalogItem], sort_by: SortType) -> list[CatalogItem]:
        if sort_by == "trending":
            lookup = scorer.score_lookup(self.trending_scores(catalog))
            return sorted(items, key=lambda item: lookup.get(item.id, 0.0), reverse=True)
        key = _SORT_KEYS.get(sort_by)
        if key is None:
            return items
        return sorted(items, key=key)

    # ---------------- tracking ----------------

    def track_view(self, item_id: str) -> InteractionEvent:
        return self.interactions.track_view(item_id)

    def track_like(self, item_id: str) -> InteractionEvent:
        return self.interactions.track_like(item_id)

    def track_purchase(self, item_id: str, quantity: float = 1) -> InteractionEvent:
        return self.interactions.track_purchase(item_id, quantity)

    # ---------------- trending ----------------

    def trending_scores(self, catalog: Sequence[CatalogItem]):
        return scorer.compute_scores(catalog, self.interactions.all(), self.clock())

    def trending(self, catalog: Sequence[CatalogItem]) -> TrendingSnapshot:
        scores = self.trending_scores(catalog)
        trending_ids = set(scorer.trending_item_ids(scores))
        return TrendingSnapshot(
            scores=scores,
            items=[item for item in catalog if item.id in trending_ids],
            categories=scorer.trending_categories(scores),
        )

    # ---------------- query history ----------------

    def popular_queries(self, limit: int = 10) -> list[str]:
        return self.queries.popular_queries(limit)

    def recent_queries(self, limit: int = 5) -> list[str]:
        return self.queries.recent_queries(limit)

    def suggest_queries(self, text: str, limit: int = 5) -> list[str]:
        return self.queries.suggest_queries(text, limit)
