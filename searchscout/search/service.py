from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.search_client import SearchProviderError, find_nearby_places
from .cache import get_cached_response, store_response
from .filters import filter_places, unique_categories
from .models import SearchRequest, SearchResult

logger = logging.getLogger(__name__)


def search_places(
    request: SearchRequest,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> SearchResult:
    """
    Run one search: cached provider answer or a fresh provider call, then the
    rating/category filters.

    ``SearchProviderError`` propagates to the caller; nothing is cached for a
    failed call.
    """
    start_time = time.time()

    response = get_cached_response(request.query, request.location)
    cache_hit = response is not None

    if response is None:
        try:
            response = find_nearby_places(request.query, request.location, config=config)
        except SearchProviderError:
            elapsed_ms = round((time.time() - start_time) * 1000, 1)
            record_event("search_failed", {
                "query": request.query,
                "location_provided": request.location is not None,
                "response_time_ms": elapsed_ms,
            })
            raise
        store_response(request.query, request.location, response)

    visible = filter_places(response.places, request.min_rating, request.category)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "query": request.query,
        "location_provided": request.location is not None,
        "min_rating": request.min_rating,
        "category": request.category,
        "total_places": len(response.places),
        "results_returned": len(visible),
        "fallback_used": response.fallback_used,
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })

    if response.fallback_used:
        logger.info("Search for %r used citation-link fallback", request.query)

    return SearchResult(
        places=visible,
        summary=response.summary,
        grounding_links=response.grounding_links,
        categories=unique_categories(response.places),
        total_places=len(response.places),
        fallback_used=response.fallback_used,
        cache_hit=cache_hit,
    )
