import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from trendrank.data.sample_catalog import CATALOG
from trendrank.services.catalog_service import CatalogService
from trendrank.utils.clock import MS_PER_HOUR, FixedClock, now_ms


def main() -> None:
    clock = FixedClock(now_ms() - 80 * MS_PER_HOUR)
    service = CatalogService(clock=clock)

    # one stale burst outside the trending window, then fresh activity
    for _ in range(20):
        service.track_view("b004")
    clock.advance(78 * MS_PER_HOUR)
    service.track_purchase("b001", quantity=2)
    service.track_like("b001")
    service.track_like("b006")
    service.track_view("b003")
    clock.advance(2 * MS_PER_HOUR)
    service.track_view("b002")

    for term in ["dune", "hobit", "fantasy", "thriller", "du"]:
        results = service.search(CATALOG, term)
        print(f"query={term} results={[item.title for item in results]}")
        suggestions = service.autocomplete(CATALOG, term, limit=4)
        print(f"  suggestions={[(s.kind, s.text, round(s.score, 3)) for s in suggestions]}")

    snapshot = service.trending(CATALOG)
    print("---")
    for score in snapshot.scores[:5]:
        print(
            f"- {score.item_id} score={score.score:.3f} views={score.recent_views} "
            f"likes={score.recent_likes} purchases={score.recent_purchases}"
        )
    print(f"trending_items={[item.title for item in snapshot.items]}")
    print(f"trending_categories={snapshot.categories}")
    print(f"popular_queries={service.popular_queries()}")
    print(f"recent_queries={service.recent_queries()}")


if __name__ == "__main__":
    main()
