from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .llm.search_client import SearchProviderError
from .search.cache import get_cache_stats
from .search.filters import SUGGESTED_CATEGORIES
from .search.models import SearchRequest, SearchResult
from .search.service import search_places

logger = logging.getLogger(__name__)

SEARCH_FAILED_DETAIL = "Search failed. Please try a different category."

app = FastAPI(title="Search Scout API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/categories")
def categories() -> dict[str, list[str]]:
    return {"suggested": SUGGESTED_CATEGORIES}


@app.post("/search", response_model=SearchResult)
def search(body: SearchRequest) -> SearchResult:
    try:
        return search_places(body)
    except SearchProviderError:
        logger.warning("Search for %r failed upstream", body.query)
        raise HTTPException(status_code=502, detail=SEARCH_FAILED_DETAIL)


# ── Operational endpoints ────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
