from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..extraction.models import CitationLink, PlaceRecord

ALL_CATEGORIES = "All"


class UserLocation(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=200, description="Business category, e.g. Gym")
    location: UserLocation | None = Field(
        default=None, description="Optional geographic bias for the search"
    )
    min_rating: float = Field(default=0.0, ge=0.0, le=5.0)
    category: str = Field(default=ALL_CATEGORIES)

    @field_validator("query")
    @classmethod
    def _strip_query(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query must not be blank")
        return value


class SearchResult(BaseModel):
    places: list[PlaceRecord]
    summary: str
    grounding_links: list[CitationLink]
    categories: list[str]
    total_places: int
    fallback_used: bool = False
    cache_hit: bool = False
