from __future__ import annotations

from typing import Iterable, Sequence

from trendrank.schemas import AutoCompleteSuggestion, CatalogItem
from trendrank.search.similarity import similarity

TITLE_WEIGHT = 1.0
AUTHOR_WEIGHT = 0.8
CATEGORY_WEIGHT = 0.6
DESCRIPTION_WEIGHT = 0.4

SUGGESTION_CUTOFF = 0.4
AUTHOR_SUGGESTION_WEIGHT = 0.9
CATEGORY_SUGGESTION_WEIGHT = 0.8


def score_item(item: CatalogItem, query: str) -> float:
    return max(
        similarity(query, item.title) * TITLE_WEIGHT,
        similarity(query, item.author) * AUTHOR_WEIGHT,
        similarity(query, item.category) * CATEGORY_WEIGHT,
        similarity(query, item.description) * DESCRIPTION_WEIGHT,
    )


def search(catalog: Sequence[CatalogItem], query: str, threshold: float = 0.3) -> list[CatalogItem]:
    """
    Rank catalog items against a free-text query.

    An empty query returns the catalog as given. Otherwise each item scores the
    best of its weighted field similarities; items under `threshold` are dropped
    and the rest come back best first, keeping catalog order among ties.
    """
    if not (query or "").strip():
        return list(catalog)

    scored: list[tuple[float, CatalogItem]] = []
    for item in catalog:
        score = score_item(item, query)
        if score >= threshold:
            scored.append((score, item))

    ranked = sorted(scored, key=lambda x: x[0], reverse=True)
    return [entry[1] for entry in ranked]


def _distinct(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def autocomplete(catalog: Sequence[CatalogItem], query: str, limit: int = 8) -> list[AutoCompleteSuggestion]:
    """
    Suggest titles, authors and categories for a partial query.

    Titles are scanned first, then authors, then categories. A display text
    seen once (case-insensitively) is never suggested again, so a title
    shadows an author or category with the same text.
    """
    if not (query or "").strip():
        return []

    results: list[AutoCompleteSuggestion] = []
    seen: set[str] = set()

    def offer(kind, text: str, weight: float, item: CatalogItem | None = None) -> None:
        raw = similarity(query, text)
        key = text.lower()
        if raw > SUGGESTION_CUTOFF and key not in seen:
            results.append(AutoCompleteSuggestion(kind=kind, text=text, item=item, score=raw * weight))
            seen.add(key)

    for item in catalog:
        offer("item", item.title, TITLE_WEIGHT, item)
    for item in catalog:
        offer("author", item.author, AUTHOR_SUGGESTION_WEIGHT, item)
    for category in _distinct(item.category for item in catalog):
        offer("category", category, CATEGORY_SUGGESTION_WEIGHT)

    ranked = sorted(results, key=lambda s: s.score, reverse=True)
    return ranked[: max(0, limit)]
