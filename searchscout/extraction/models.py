from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CitationLink(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    uri: str = Field(..., min_length=1, description="Absolute URL of the grounding source")


class PlaceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    category: str
    rating: float = Field(..., ge=0.0, allow_inf_nan=False)
    review_count: int | None = None
    address: str
    distance: str | None = None
    image_url: str
    maps_url: str = Field(..., min_length=1)
    is_open: bool = True
    snippet: str


class SearchResponse(BaseModel):
    places: list[PlaceRecord]
    summary: str = Field(default="", description="Raw provider answer, display only")
    grounding_links: list[CitationLink] = Field(default_factory=list)
    fallback_used: bool = False
