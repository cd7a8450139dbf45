from __future__ import annotations

import logging
from collections.abc import Sequence

from .fallback import synthesize_from_links
from .fields import extract_fields
from .models import CitationLink, PlaceRecord, SearchResponse
from .reconciler import reconcile_link
from .segmenter import segment_blocks
from .urls import image_url_for

logger = logging.getLogger(__name__)


def _extract(
    text: str,
    links: Sequence[CitationLink],
    query: str,
) -> tuple[list[PlaceRecord], bool]:
    blocks = segment_blocks(text)

    places: list[PlaceRecord] = []
    # The link index follows the block position, not the count of valid places.
    for index, block in enumerate(blocks):
        fields = extract_fields(block, query)
        if fields is None:
            continue
        name = fields["name"]
        places.append(
            PlaceRecord(
                **fields,
                maps_url=reconcile_link(name, links, index),
                image_url=image_url_for(name),
                is_open=True,
            )
        )

    logger.debug(
        "Extracted %d places from %d blocks (%d links)",
        len(places), len(blocks), len(links),
    )

    if not places and links:
        logger.debug("No structured places recovered, synthesizing from %d links", len(links))
        return synthesize_from_links(links, query), True

    return places, False


def extract_places(
    text: str,
    links: Sequence[CitationLink],
    query: str,
) -> list[PlaceRecord]:
    """
    Turn a free-text provider answer into structured places.

    Pure and single-pass: the same inputs always give the same list. Malformed
    text never raises; it yields fewer or less specific places, and when no
    block is usable the citation links themselves become the places.
    """
    places, _ = _extract(text, links, query)
    return places


def build_search_response(
    text: str,
    links: Sequence[CitationLink],
    query: str,
) -> SearchResponse:
    """Extracted places plus the raw answer and links passed through for display."""
    places, fallback_used = _extract(text, links, query)
    return SearchResponse(
        places=places,
        summary=text,
        grounding_links=list(links),
        fallback_used=fallback_used,
    )
