import math

import pytest

from trendrank.schemas import CatalogItem, InteractionEvent, TrendingScore
from trendrank.trending.scorer import compute_scores, trending_categories, trending_item_ids
from trendrank.utils.clock import MS_PER_HOUR

NOW = 1_700_000_000_000

CATALOG = [
    CatalogItem(id="a", title="A", author="x", category="Fantasy"),
    CatalogItem(id="b", title="B", author="x", category="Thriller"),
    CatalogItem(id="c", title="C", author="x", category="Fantasy"),
]


def _event(item_id, kind, hours_ago=0.0, value=None):
    return InteractionEvent(item_id=item_id, kind=kind, timestamp=int(NOW - hours_ago * MS_PER_HOUR), value=value)


def _by_id(scores):
    return {s.item_id: s for s in scores}


def test_every_catalog_item_gets_a_score():
    scores = compute_scores(CATALOG, [], NOW)
    assert [s.item_id for s in scores] == ["a", "b", "c"]
    assert all(s.score == 0 for s in scores)
    assert _by_id(scores)["b"].category == "Thriller"


def test_like_and_purchase_now():
    scores = compute_scores(CATALOG, [_event("a", "like"), _event("a", "purchase", value=2)], NOW)
    top = scores[0]
    assert top.item_id == "a"
    assert top.score == pytest.approx(13.0)
    assert top.recent_likes == 1
    assert top.recent_purchases == 2
    assert top.recent_views == 0


def test_recency_decay_and_window_edge():
    events = [_event("a", "view", hours_ago=72), _event("b", "view", hours_ago=73), _event("c", "like", hours_ago=36)]
    scores = _by_id(compute_scores(CATALOG, events, NOW))
    assert scores["a"].score == pytest.approx(math.exp(-0.5))
    assert scores["a"].recent_views == 1
    assert scores["b"].score == 0
    assert scores["b"].recent_views == 0
    assert scores["c"].score == pytest.approx(3 * math.exp(-0.25))


def test_unknown_items_and_search_events_ignored():
    events = [_event("zzz", "purchase", value=5), _event("search_dune", "search"), _event("a", "search")]
    scores = compute_scores(CATALOG, events, NOW)
    assert all(s.score == 0 for s in scores)


def test_scores_sorted_descending_with_catalog_order_ties():
    events = [_event("c", "view"), _event("b", "view"), _event("b", "like")]
    scores = compute_scores(CATALOG, events, NOW)
    assert [s.item_id for s in scores] == ["b", "c", "a"]


def test_trending_item_ids_threshold_and_activity():
    scores = [
        TrendingScore(item_id="top", category="x", score=50.0, recent_likes=10),
        TrendingScore(item_id="mid", category="x", score=5.5, recent_views=5),
        TrendingScore(item_id="low", category="x", score=4.9, recent_views=5),
        TrendingScore(item_id="residue", category="x", score=6.0),
    ]
    assert trending_item_ids(scores) == ["top", "mid"]


def test_trending_item_ids_minimum_threshold_of_one():
    scores = [
        TrendingScore(item_id="a", category="x", score=0.9, recent_views=1),
        TrendingScore(item_id="b", category="x", score=0.0),
    ]
    assert trending_item_ids(scores) == []
    assert trending_item_ids([]) == []


def test_trending_item_ids_capped_at_ten():
    scores = [TrendingScore(item_id=str(n), category="x", score=10.0, recent_views=1) for n in range(15)]
    assert trending_item_ids(scores) == [str(n) for n in range(10)]


def test_trending_categories_sum_and_cap():
    scores = compute_scores(CATALOG, [_event("a", "view"), _event("c", "view"), _event("b", "like")], NOW)
    assert trending_categories(scores) == ["Thriller", "Fantasy"]

    many = [TrendingScore(item_id=str(n), category=f"cat{n}", score=float(n)) for n in range(8)]
    assert trending_categories(many) == ["cat7", "cat6", "cat5", "cat4", "cat3"]
    assert trending_categories([]) == []


def test_purchase_without_quantity_counts_one_unit():
    scores = _by_id(compute_scores(CATALOG, [_event("b", "purchase")], NOW))
    assert scores["b"].score == pytest.approx(5.0)
    assert scores["b"].recent_purchases == 1
