from __future__ import annotations

from collections.abc import Sequence

from .models import CitationLink
from .urls import maps_search_url


def find_matching_link(name: str, links: Sequence[CitationLink]) -> CitationLink | None:
    """First link whose title contains the name, or is contained in it (case-insensitive)."""
    name_lower = name.lower()
    for link in links:
        title_lower = link.title.lower()
        if name_lower in title_lower or title_lower in name_lower:
            return link
    return None


def reconcile_link(name: str, links: Sequence[CitationLink], index: int) -> str:
    """
    Pick the map URL for a place.

    ``index`` is the position of the place's block among all segmented blocks,
    discarded ones included. Without a title match the link at that position
    (wrapping around) is used; without any links a map-search URL is built.
    """
    link = find_matching_link(name, links)
    if link is None and links:
        link = links[index % len(links)]
    if link is not None:
        return link.uri
    return maps_search_url(name)
