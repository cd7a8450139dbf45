from __future__ import annotations

from urllib.parse import quote

MAPS_SEARCH_URL = "https://www.google.com/maps/search/{}"
IMAGE_URL = "https://picsum.photos/seed/{}/600/400"


def _encode(name: str) -> str:
    return quote(name, safe="")


def maps_search_url(name: str) -> str:
    """Generic map-search URL for a place with no citation link."""
    return MAPS_SEARCH_URL.format(_encode(name))


def image_url_for(name: str) -> str:
    """Illustrative image URL seeded by the place name (same name, same image)."""
    return IMAGE_URL.format(_encode(name))
