"""
Time-decayed trending scores over the interaction log.

Interactions older than the trending window are ignored. Inside the window each
view, like or purchase adds its weight scaled by exp(-hours_ago * decay / window),
so an interaction right now counts in full and one at the window edge counts
exp(-0.5) of its weight.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from trendrank.schemas import CatalogItem, InteractionEvent, TrendingScore
from trendrank.utils.clock import MS_PER_HOUR

TRENDING_WINDOW_HOURS = 72
VIEW_WEIGHT = 1
LIKE_WEIGHT = 3
PURCHASE_WEIGHT = 5
RECENCY_DECAY = 0.5

MAX_TRENDING_ITEMS = 10
MAX_TRENDING_CATEGORIES = 5
MIN_TRENDING_SCORE = 1.0
TOP_SCORE_SHARE = 0.1


def recency_factor(hours_ago: float) -> float:
    return math.exp(-hours_ago * RECENCY_DECAY / TRENDING_WINDOW_HOURS)


def compute_scores(
    catalog: Sequence[CatalogItem],
    interactions: Iterable[InteractionEvent],
    now: int,
) -> list[TrendingScore]:
    window_start = now - TRENDING_WINDOW_HOURS * MS_PER_HOUR

    scores: dict[str, TrendingScore] = {}
    for item in catalog:
        scores[item.id] = TrendingScore(item_id=item.id, category=item.category)

    for event in interactions:
        if event.timestamp < window_start:
            continue
        score = scores.get(event.item_id)
        if score is None:
            continue

        if event.kind == "view":
            weight = VIEW_WEIGHT
            score.recent_views += 1
        elif event.kind == "like":
            weight = LIKE_WEIGHT
            score.recent_likes += 1
        elif event.kind == "purchase":
            quantity = event.value or 1
            weight = PURCHASE_WEIGHT * quantity
            score.recent_purchases += quantity
        else:
            continue

        hours_ago = (now - event.timestamp) / MS_PER_HOUR
        score.score += weight * recency_factor(hours_ago)

    return sorted(scores.values(), key=lambda s: s.score, reverse=True)


def trending_item_ids(scores: Sequence[TrendingScore]) -> list[str]:
    top_score = scores[0].score if scores else 0.0
    threshold = max(MIN_TRENDING_SCORE, top_score * TOP_SCORE_SHARE)

    trending = [s.item_id for s in scores if s.score >= threshold and s.has_activity]
    return trending[:MAX_TRENDING_ITEMS]


def trending_categories(scores: Sequence[TrendingScore]) -> list[str]:
    totals: dict[str, float] = {}
    for s in scores:
        totals[s.category] = totals.get(s.category, 0.0) + s.score

    ranked = sorted(totals.items(), key=lambda x: x[1], reverse=True)
    return [category for category, _ in ranked[:MAX_TRENDING_CATEGORIES]]


def score_lookup(scores: Iterable[TrendingScore]) -> dict[str, float]:
    return {s.item_id: s.score for s in scores}
