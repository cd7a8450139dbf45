from __future__ import annotations

import logging
from typing import Any

from groq import Groq

from ..extraction.engine import build_search_response
from ..extraction.models import CitationLink, SearchResponse
from ..search.models import UserLocation
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a local business finder. Use web search to find real, currently "
    "operating places and answer only in the exact plain-text format requested. "
    "Do not add introductions, numbering or markdown tables."
)


class SearchProviderError(RuntimeError):
    """Raised when the search provider cannot produce an answer."""


def build_search_prompt(
    query: str,
    location: UserLocation | None = None,
    max_places: int = 10,
) -> str:
    lines = [
        f'Find the best and highest-rated "{query}" near my current location.',
        f"Provide a list of the top {max(1, max_places - 2)}-{max_places} options.",
        "For each place, provide exactly these details in this format:",
        "Place Name: [Name]",
        "Category: [Category]",
        "Address: [Full Street Address, City, State]",
        "Rating: [Rating]",
        "Review: [Short snippet]",
        "---",
        "Focus on places with high ratings (4.0+) and ensure you include the "
        "real city names in the address.",
    ]
    if location is not None:
        lines.append(
            f"My current location is latitude {location.latitude}, "
            f"longitude {location.longitude}."
        )
    return "\n".join(lines)


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_citation_links(message: Any) -> list[CitationLink]:
    """
    Collect ``{title, url}`` pairs from the web-search results attached to a
    Groq message, in the order the provider returned them.
    """
    links: list[CitationLink] = []
    for tool in _field(message, "executed_tools") or []:
        search_results = _field(tool, "search_results")
        for result in _field(search_results, "results") or []:
            title = (_field(result, "title") or "").strip()
            uri = (_field(result, "url") or "").strip()
            if title and uri:
                links.append(CitationLink(title=title, uri=uri))
    return links


def find_nearby_places(
    query: str,
    location: UserLocation | None = None,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> SearchResponse:
    """
    Ask the search model for places matching ``query`` and extract them.

    Raises ``SearchProviderError`` when the provider is disabled, has no
    credentials, or the request fails. The extraction engine only runs on a
    successful answer.
    """
    if not config.enabled or not config.api_key:
        raise SearchProviderError("Search provider is not configured")

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": build_search_prompt(query, location, config.max_places),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
        message = response.choices[0].message
    except Exception as exc:
        logger.warning("Groq search call failed for query %r", query, exc_info=True)
        raise SearchProviderError("Search request failed") from exc

    text = message.content or ""
    links = extract_citation_links(message)
    logger.info("Search for %r returned %d chars and %d links", query, len(text), len(links))

    return build_search_response(text, links, query)
