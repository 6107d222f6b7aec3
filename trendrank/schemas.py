from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


InteractionKind = Literal["view", "like", "purchase", "search"]
SuggestionKind = Literal["item", "author", "category"]
AgeRating = Literal["Children", "Young Adult", "Adult", "All Ages"]
SortType = Literal[
    "trending",
    "best-seller",
    "most-liked",
    "most-purchased",
    "newest",
    "rating",
    "alphabetical",
]


class CatalogItem(BaseModel):
    id: str
    title: str
    author: str
    category: str
    description: str = ""
    rating: float = 0.0
    price: float = 0.0
    published_year: int = 0
    likes: int = 0
    purchases: int = 0
    age_rating: AgeRating = "All Ages"
    cover_image: str = ""


class InteractionEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_id: str
    kind: InteractionKind
    timestamp: int
    value: Optional[float] = None


class QueryLogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    timestamp: int
    result_count: int = Field(default=0, ge=0)
    item_id: Optional[str] = None


class TrendingScore(BaseModel):
    item_id: str
    score: float = 0.0
    category: str
    recent_views: int = 0
    recent_likes: int = 0
    recent_purchases: float = 0

    @property
    def has_activity(self) -> bool:
        return self.recent_views > 0 or self.recent_likes > 0 or self.recent_purchases > 0


class AutoCompleteSuggestion(BaseModel):
    kind: SuggestionKind
    text: str
    item: Optional[CatalogItem] = None
    score: float


class BrowseFilters(BaseModel):
    search: str = ""
    category: str = "All"
    age_rating: str = "All"
    sort_by: SortType = "trending"


class TrendingSnapshot(BaseModel):
    scores: list[TrendingScore] = Field(default_factory=list)
    items: list[CatalogItem] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
