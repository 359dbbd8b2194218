"""Tests for MCP tool dispatch."""

import pytest

from petfinder.mcp_server import _dispatch
from petfinder.seed import seeded_shelter


@pytest.fixture
def shelter():
    return seeded_shelter()


def test_list_available_pets(shelter):
    result = _dispatch("list_available_pets", {}, shelter)
    assert len(result) == 8
    assert result[0] == {
        "name": "Luna",
        "type": "dog",
        "breed": "Golden Retriever",
        "available": True,
    }


def test_search_pets(shelter):
    result = _dispatch("search_pets", {"type": "cat", "breed": "Shorthair"}, shelter)
    assert [p["name"] for p in result["pets"]] == ["Goldie", "Oliver"]


def test_search_pets_no_results_message(shelter):
    result = _dispatch("search_pets", {"breed": "Poodle"}, shelter)
    assert result["pets"] == []
    assert result["message"] == "No pets are available for selected breed (Poodle)."


def test_adopt_pet_updates_shared_shelter(shelter):
    assert _dispatch("adopt_pet", {"name": "teddy"}, shelter) == {
        "name": "teddy",
        "adopted": True,
    }
    assert _dispatch("adopt_pet", {"name": "teddy"}, shelter)["adopted"] is False
    names = [p["name"] for p in _dispatch("list_available_pets", {}, shelter)]
    assert "Teddy" not in names


def test_adopt_pet_missing_name(shelter):
    assert _dispatch("adopt_pet", {}, shelter)["adopted"] is False


def test_unknown_tool(shelter):
    with pytest.raises(ValueError, match="Unknown tool"):
        _dispatch("feed_pet", {}, shelter)
