import pytest

from trendrank.schemas import InteractionEvent
from trendrank.storage.interaction_log import InteractionLog
from trendrank.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore
from trendrank.storage.query_log import QueryLog
from trendrank.utils.clock import FixedClock


def test_trackers_stamp_clock_and_kind():
    clock = FixedClock(1_000)
    log = InteractionLog(InMemoryKeyValueStore(), clock)
    log.track_view("b1")
    clock.advance(5)
    log.track_like("b1")
    log.track_purchase("b2", quantity=3)
    log.track_search("space opera")

    events = log.all()
    assert [(e.item_id, e.kind, e.timestamp) for e in events] == [
        ("b1", "view", 1_000),
        ("b1", "like", 1_005),
        ("b2", "purchase", 1_005),
        ("search_space opera", "search", 1_005),
    ]
    assert events[2].value == 3
    assert events[0].value is None


def test_interaction_log_evicts_oldest_beyond_cap():
    store = InMemoryKeyValueStore()
    log = InteractionLog(store, FixedClock(0))
    store.write(log.key, [{"item_id": f"i{n}", "kind": "view", "timestamp": n} for n in range(10_000)])

    for n in range(10_000, 10_005):
        log.append(InteractionEvent(item_id=f"i{n}", kind="view", timestamp=n))

    events = log.all()
    assert len(events) == 10_000
    assert events[0].item_id == "i5"
    assert events[-1].item_id == "i10004"
    assert [e.timestamp for e in events] == list(range(5, 10_005))


def test_small_cap_keeps_suffix_in_order():
    log = InteractionLog(InMemoryKeyValueStore(), FixedClock(0), max_events=3)
    for n in range(5):
        log.append(InteractionEvent(item_id=str(n), kind="like", timestamp=n))
    assert [e.item_id for e in log.all()] == ["2", "3", "4"]


def test_malformed_blobs_read_as_empty_log():
    store = InMemoryKeyValueStore()
    log = InteractionLog(store, FixedClock(0))

    store.write(log.key, {"not": "a list"})
    assert log.all() == []

    store.write(log.key, [{"item_id": "x", "kind": "teleport", "timestamp": 1}])
    assert log.all() == []

    store._data[log.key] = "{broken json"
    assert log.all() == []

    log.track_view("b1")
    assert [e.item_id for e in log.all()] == ["b1"]


def test_json_file_store_round_trips_and_recovers(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "state")
    assert store.read("missing") is None

    log = QueryLog(store, FixedClock(42))
    log.record_query("dune", result_count=2)
    reopened = QueryLog(JsonFileKeyValueStore(tmp_path / "state"), FixedClock(0))
    assert [(e.query, e.timestamp, e.result_count) for e in reopened.history()] == [("dune", 42, 2)]

    (tmp_path / "state" / f"{log.key}.json").write_text("not json", encoding="utf-8")
    assert reopened.history() == []


def test_query_log_cap_and_history_order():
    log = QueryLog(InMemoryKeyValueStore(), FixedClock(0), max_entries=2)
    log.record_query("one", timestamp=1, result_count=1)
    log.record_query("two", timestamp=2, result_count=0, item_id="b2")
    log.record_query("three", timestamp=3, result_count=4)
    history = log.history()
    assert [e.query for e in history] == ["two", "three"]
    assert history[0].item_id == "b2"


def test_popular_queries_counts_and_excludes_short():
    log = QueryLog(InMemoryKeyValueStore(), FixedClock(0))
    for text in ["dune", "ab", "ab", "ab", "hobbit", "dune", " x ", "hobbit", "tolkien", "dune"]:
        log.record_query(text)
    assert log.popular_queries() == ["dune", "hobbit", "tolkien"]
    assert log.popular_queries(limit=1) == ["dune"]


def test_popular_queries_ties_keep_first_seen_order():
    log = QueryLog(InMemoryKeyValueStore(), FixedClock(0))
    for text in ["beta", "alpha", "alpha", "beta", "gamma"]:
        log.record_query(text)
    assert log.popular_queries() == ["beta", "alpha", "gamma"]


def test_recent_queries_most_recent_first_distinct():
    log = QueryLog(InMemoryKeyValueStore(), FixedClock(0))
    for text in ["a1", "b2", "c3", "b2", "d4", "d4", "e5", "f6"]:
        log.record_query(text)
    assert log.recent_queries() == ["f6", "e5", "d4", "b2"]
    assert log.recent_queries(limit=2) == ["f6", "e5"]


def test_suggest_queries_from_history():
    log = QueryLog(InMemoryKeyValueStore(), FixedClock(0))
    log.record_query("Dune Messiah", result_count=2)
    log.record_query("dune", result_count=3)
    log.record_query("dune road", result_count=0)
    log.record_query("Dune Messiah", result_count=2)
    log.record_query("children of dune", result_count=1)
    assert log.suggest_queries("dune") == ["Dune Messiah", "children of dune"]
    assert log.suggest_queries("  ") == []


def test_recent_queries_only_look_at_the_tail():
    log = QueryLog(InMemoryKeyValueStore(), FixedClock(0))
    for text in ["old", "x", "x", "x", "x", "x"]:
        log.record_query(text)
    assert log.recent_queries() == ["x"]
    assert log.recent_queries(limit=6) == ["x", "old"]
    assert log.recent_queries(limit=0) == []


def test_query_log_default_cap_keeps_last_thousand():
    store = InMemoryKeyValueStore()
    log = QueryLog(store, FixedClock(0))
    assert log.max_entries == 1_000
    store.write(log.key, [{"query": f"q{n}", "timestamp": n} for n in range(1_000)])

    for n in range(1_000, 1_005):
        log.record_query(f"q{n}", timestamp=n)

    history = log.history()
    assert len(history) == 1_000
    assert [e.timestamp for e in history] == list(range(5, 1_005))


def test_zero_capacity_is_rejected():
    with pytest.raises(ValueError):
        InteractionLog(InMemoryKeyValueStore(), FixedClock(0), max_events=0)
    with pytest.raises(ValueError):
        QueryLog(InMemoryKeyValueStore(), FixedClock(0), max_entries=0)
