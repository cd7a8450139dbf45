from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from searchscout.llm.config import LLMConfig
from searchscout.llm.search_client import (
    SearchProviderError,
    build_search_prompt,
    extract_citation_links,
    find_nearby_places,
)
from searchscout.search.models import UserLocation

ENABLED_CONFIG = LLMConfig(api_key="test-key", enabled=True)
DISABLED_CONFIG = LLMConfig(api_key="test-key", enabled=False)

ANSWER = (
    "Place Name: Acme Gym\n"
    "Category: Gym\n"
    "Address: 5 Oak Rd, Tenkasi\n"
    "Rating: 4.8\n"
    "Review: Clean and friendly.\n"
    "---\n"
    "Place Name: Iron Temple\n"
    "Category: Gym\n"
    "Address: 9 Pine Rd, Tenkasi\n"
    "Rating: 4.4\n"
    "Review: Great equipment.\n"
    "---"
)


def _search_tool(*results):
    return {"type": "search", "search_results": {"results": list(results)}}


def _mock_groq_response(content, executed_tools=None) -> MagicMock:
    message = MagicMock()
    message.content = content
    message.executed_tools = executed_tools or []
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


# ── Prompt ───────────────────────────────────────────────────────────────


def test_prompt_contains_labelled_format():
    prompt = build_search_prompt("Pharmacy")
    assert '"Pharmacy"' in prompt
    for label in ("Place Name:", "Category:", "Address:", "Rating:", "Review:", "---"):
        assert label in prompt
    assert "latitude" not in prompt


def test_prompt_includes_location_bias():
    prompt = build_search_prompt("Gym", UserLocation(latitude=8.96, longitude=77.3))
    assert "latitude 8.96" in prompt
    assert "longitude 77.3" in prompt


# ── Citation links ───────────────────────────────────────────────────────


def test_links_from_dict_results_preserve_order():
    message = {
        "executed_tools": [
            _search_tool(
                {"title": "Acme Gym", "url": "https://maps.example/acme"},
                {"title": "Iron Temple", "url": "https://maps.example/iron"},
            ),
            _search_tool({"title": "Gyms in Tenkasi", "url": "https://example.com/list"}),
        ]
    }
    links = extract_citation_links(message)
    assert [(l.title, l.uri) for l in links] == [
        ("Acme Gym", "https://maps.example/acme"),
        ("Iron Temple", "https://maps.example/iron"),
        ("Gyms in Tenkasi", "https://example.com/list"),
    ]


def test_links_from_sdk_objects():
    result = SimpleNamespace(title=" Acme Gym ", url="https://maps.example/acme")
    tool = SimpleNamespace(search_results=SimpleNamespace(results=[result]))
    message = SimpleNamespace(executed_tools=[tool])
    links = extract_citation_links(message)
    assert links[0].title == "Acme Gym"


def test_links_skip_incomplete_results_and_other_tools():
    message = {
        "executed_tools": [
            {"type": "python", "search_results": None},
            _search_tool({"title": "", "url": "https://x"}, {"title": "No url"}),
        ]
    }
    assert extract_citation_links(message) == []


def test_links_when_message_has_no_tools():
    assert extract_citation_links(SimpleNamespace(executed_tools=None)) == []


# ── Provider call ────────────────────────────────────────────────────────


@patch("searchscout.llm.search_client.Groq")
def test_find_nearby_places_extracts_places(mock_groq_cls):
    tools = [
        _search_tool(
            {"title": "Iron Temple - Tenkasi", "url": "https://maps.example/iron"},
            {"title": "Acme Gym", "url": "https://maps.example/acme"},
        )
    ]
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(ANSWER, tools)

    response = find_nearby_places("Gym", config=ENABLED_CONFIG)

    assert [p.name for p in response.places] == ["Acme Gym", "Iron Temple"]
    assert response.places[0].maps_url == "https://maps.example/acme"
    assert response.places[1].maps_url == "https://maps.example/iron"
    assert response.summary == ANSWER
    assert len(response.grounding_links) == 2
    assert response.fallback_used is False


@patch("searchscout.llm.search_client.Groq")
def test_find_nearby_places_sends_prompt(mock_groq_cls):
    create = mock_groq_cls.return_value.chat.completions.create
    create.return_value = _mock_groq_response(ANSWER)

    find_nearby_places("Gym", UserLocation(latitude=1.5, longitude=2.5), config=ENABLED_CONFIG)

    kwargs = create.call_args.kwargs
    assert kwargs["model"] == ENABLED_CONFIG.model
    user_message = kwargs["messages"][-1]["content"]
    assert '"Gym"' in user_message
    assert "latitude 1.5" in user_message


@patch("searchscout.llm.search_client.Groq")
def test_empty_answer_uses_link_fallback(mock_groq_cls):
    tools = [_search_tool({"title": "Acme Gym", "url": "https://maps.example/acme"})]
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(None, tools)

    response = find_nearby_places("Gym", config=ENABLED_CONFIG)

    assert response.fallback_used is True
    assert response.places[0].address == "Near your location"
    assert response.summary == ""


@patch("searchscout.llm.search_client.Groq")
def test_api_error_raises(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")

    with pytest.raises(SearchProviderError):
        find_nearby_places("Gym", config=ENABLED_CONFIG)


@patch("searchscout.llm.search_client.Groq")
def test_disabled_provider_raises(mock_groq_cls):
    with pytest.raises(SearchProviderError):
        find_nearby_places("Gym", config=DISABLED_CONFIG)
    mock_groq_cls.assert_not_called()


def test_missing_api_key_raises():
    with pytest.raises(SearchProviderError):
        find_nearby_places("Gym", config=LLMConfig(api_key="", enabled=True))
