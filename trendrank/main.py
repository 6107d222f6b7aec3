import gradio as gr

from trendrank.config import settings
from trendrank.data.sample_catalog import CATALOG
from trendrank.schemas import BrowseFilters
from trendrank.services.catalog_service import CatalogService

service = CatalogService.from_settings()

SORT_CHOICES = ["trending", "best-seller", "most-liked", "most-purchased", "newest", "rating", "alphabetical"]
CATEGORY_CHOICES = ["All"] + sorted({item.category for item in CATALOG})
AGE_CHOICES = ["All", "Children", "Young Adult", "Adult", "All Ages"]


def _rows(items) -> list[list]:
    return [[item.id, item.title, item.author, item.category, item.rating, item.price] for item in items]


def browse_fn(query: str, category: str, age_rating: str, sort_by: str) -> list[list]:
    filters = BrowseFilters(search=query or "", category=category, age_rating=age_rating, sort_by=sort_by)
    return _rows(service.browse(CATALOG, filters))


def suggest_fn(query: str) -> str:
    suggestions = service.autocomplete(CATALOG, query or "")
    history = service.suggest_queries(query or "")
    lines = [f"- {s.text} ({s.kind}, {s.score:.2f})" for s in suggestions]
    lines += [f"- {text} (earlier search)" for text in history]
    return "\n".join(lines) or "_No suggestions._"


def track_fn(item_id: str, action: str, quantity: float) -> str:
    item_id = (item_id or "").strip()
    if not item_id:
        return "Enter an item id."
    if action == "like":
        service.track_like(item_id)
    elif action == "purchase":
        service.track_purchase(item_id, quantity or 1)
    else:
        service.track_view(item_id)
    return f"Tracked {action} on {item_id}."


def trending_fn() -> str:
    snapshot = service.trending(CATALOG)
    lines = ["### Trending now"]
    lines += [f"- {item.title} by {item.author}" for item in snapshot.items] or ["- nothing yet"]
    lines.append("")
    lines.append("**Categories:** " + (", ".join(snapshot.categories) or "none"))
    lines.append("**Popular searches:** " + (", ".join(service.popular_queries(5)) or "none"))
    lines.append("**Recent searches:** " + (", ".join(service.recent_queries()) or "none"))
    return "\n".join(lines)


def build_demo() -> gr.Blocks:
    with gr.Blocks(title="trendrank") as demo:
        gr.Markdown(
            """
            # Catalog search and trending
            Fuzzy search with autocomplete over a sample book catalog, plus time-decayed trending
            rankings built from the views, likes and purchases you record below.
            """
        )
        with gr.Row():
            query = gr.Textbox(label="Search", placeholder="Try 'dune', 'hobit' or 'fantasy'")
            category = gr.Dropdown(CATEGORY_CHOICES, value="All", label="Category")
            age_rating = gr.Dropdown(AGE_CHOICES, value="All", label="Age rating")
            sort_by = gr.Dropdown(SORT_CHOICES, value="trending", label="Sort by")
        suggestions = gr.Markdown()
        results = gr.Dataframe(headers=["id", "title", "author", "category", "rating", "price"])
        query.change(suggest_fn, inputs=query, outputs=suggestions)
        gr.Button("Search").click(browse_fn, inputs=[query, category, age_rating, sort_by], outputs=results)

        with gr.Row():
            item_id = gr.Textbox(label="Item id", placeholder="b001")
            action = gr.Radio(["view", "like", "purchase"], value="view", label="Action")
            quantity = gr.Number(value=1, label="Quantity", precision=0)
        status = gr.Markdown()
        trending = gr.Markdown()
        gr.Button("Track").click(track_fn, inputs=[item_id, action, quantity], outputs=status).then(
            trending_fn, outputs=trending
        )
        demo.load(trending_fn, outputs=trending)
    return demo


if __name__ == "__main__":
    app = build_demo()
    app.launch(server_name=settings.gradio_server_name, server_port=settings.gradio_server_port)
