from __future__ import annotations

from collections import Counter
from typing import Any


def _rate(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    failures = [e for e in events if e["type"] == "search_failed"]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top queries, case-folded so "gym" and "Gym" count together
    query_counter: Counter[str] = Counter()
    for s in searches:
        query_counter[str(s.get("query", "unknown")).lower()] += 1
    top_queries = [{"name": n, "count": c} for n, c in query_counter.most_common(10)]

    returned = [s.get("results_returned", 0) for s in searches]
    avg_results = round(sum(returned) / total, 1) if total else 0.0

    fallback_count = sum(1 for s in searches if s.get("fallback_used"))
    empty_count = sum(1 for s in searches if s.get("total_places", 0) == 0)
    location_count = sum(1 for s in searches if s.get("location_provided"))
    filtered_count = sum(
        1 for s in searches if s.get("min_rating", 0) > 0 or s.get("category", "All") != "All"
    )

    cache_hits = sum(1 for s in searches if s.get("cache_hit"))

    return {
        "total_searches": total,
        "failed_searches": len(failures),
        "avg_response_time_ms": avg_time,
        "avg_results_returned": avg_results,
        "top_queries": top_queries,
        "fallback_rate": _rate(fallback_count, total),
        "empty_result_rate": _rate(empty_count, total),
        "location_usage_rate": _rate(location_count, total),
        "filter_usage_rate": _rate(filtered_count, total),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": _rate(cache_hits, total),
        },
    }
