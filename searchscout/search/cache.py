from __future__ import annotations

import hashlib
import json
import threading
import time

from ..extraction.models import SearchResponse
from .models import UserLocation

# key -> (stored_at, response), in insertion order
_responses: dict[str, tuple[float, SearchResponse]] = {}
_lock = threading.Lock()
_hits: int = 0
_misses: int = 0
_DEFAULT_TTL = 300  # 5 minutes
_MAX_ENTRIES = 1_000
# Coordinates closer than ~100 m share cached answers.
_COORD_PRECISION = 3


def _response_key(query: str, location: UserLocation | None) -> str:
    coords = None
    if location is not None:
        coords = [
            round(location.latitude, _COORD_PRECISION),
            round(location.longitude, _COORD_PRECISION),
        ]
    payload = json.dumps({"query": query, "coords": coords}, sort_keys=True)
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def _prune(now: float) -> None:
    """Drop expired entries, then the oldest ones until there is room for one more."""
    expired = [k for k, (stored_at, _) in _responses.items() if now - stored_at >= _DEFAULT_TTL]
    for key in expired:
        del _responses[key]
    while len(_responses) >= _MAX_ENTRIES:
        del _responses[next(iter(_responses))]


def get_cached_response(
    query: str,
    location: UserLocation | None,
) -> SearchResponse | None:
    global _hits, _misses
    key = _response_key(query, location)
    with _lock:
        entry = _responses.get(key)
        if entry is not None:
            stored_at, response = entry
            if time.time() - stored_at < _DEFAULT_TTL:
                _hits += 1
                return response
            _responses.pop(key, None)
        _misses += 1
        return None


def store_response(
    query: str,
    location: UserLocation | None,
    response: SearchResponse,
) -> None:
    key = _response_key(query, location)
    now = time.time()
    with _lock:
        _responses.pop(key, None)
        _prune(now)
        _responses[key] = (now, response)


def get_cache_stats() -> dict:
    with _lock:
        lookups = _hits + _misses
        return {
            "size": len(_responses),
            "hits": _hits,
            "misses": _misses,
            "hit_rate": round(_hits / lookups * 100, 1) if lookups else 0.0,
            "ttl_seconds": _DEFAULT_TTL,
        }


def clear_cache() -> None:
    global _hits, _misses
    with _lock:
        _responses.clear()
        _hits = 0
        _misses = 0
