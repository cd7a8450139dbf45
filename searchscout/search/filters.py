from __future__ import annotations

from collections.abc import Iterable

from ..extraction.models import PlaceRecord
from .models import ALL_CATEGORIES

SUGGESTED_CATEGORIES = ["Saloon", "Restaurant", "Shopping Mall", "Pharmacy", "Gym"]


def unique_categories(places: Iterable[PlaceRecord]) -> list[str]:
    """``"All"`` followed by each distinct place category in first-seen order."""
    categories = [ALL_CATEGORIES]
    for place in places:
        if place.category not in categories:
            categories.append(place.category)
    return categories


def filter_places(
    places: Iterable[PlaceRecord],
    min_rating: float = 0.0,
    category: str = ALL_CATEGORIES,
) -> list[PlaceRecord]:
    return [
        place
        for place in places
        if place.rating >= min_rating
        and (category == ALL_CATEGORIES or place.category == category)
    ]
