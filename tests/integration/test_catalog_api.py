"""Integration tests for /catalog endpoints."""

from decimal import Decimal

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_locations(api_client: AsyncClient) -> None:
    """Test the seeded catalog is listed in id order."""
    response = await api_client.get("/catalog/locations")

    assert response.status_code == 200
    locations = response.json()["locations"]
    assert [loc["id"] for loc in locations] == list(range(1, 11))
    assert locations[0]["category"] == "Boat"
    assert Decimal(locations[0]["price_per_person"]) == Decimal("80.00")


@pytest.mark.asyncio
async def test_list_locations_by_category(api_client: AsyncClient) -> None:
    """Test the category filter."""
    response = await api_client.get("/catalog/locations", params={"category": "Pub"})

    assert response.status_code == 200
    assert [loc["id"] for loc in response.json()["locations"]] == [8, 9, 10]


@pytest.mark.asyncio
async def test_list_locations_unknown_category_is_empty(api_client: AsyncClient) -> None:
    """Test an unknown category matches nothing."""
    response = await api_client.get("/catalog/locations", params={"category": "Opera"})

    assert response.status_code == 200
    assert response.json()["locations"] == []


@pytest.mark.asyncio
async def test_list_categories(api_client: AsyncClient) -> None:
    """Test distinct categories are sorted."""
    response = await api_client.get("/catalog/categories")

    assert response.status_code == 200
    assert response.json()["categories"] == ["Boat", "Food", "Pub", "Tour"]


@pytest.mark.asyncio
async def test_list_premade_templates(api_client: AsyncClient) -> None:
    """Test templates are listed with their per-person price."""
    response = await api_client.get("/catalog/premade")

    assert response.status_code == 200
    templates = response.json()["templates"]
    assert [t["name"] for t in templates] == ["Boat Trip", "Restaurant Trip", "Pub Trip"]
    assert Decimal(templates[1]["price_per_person"]) == Decimal("115.00")
    assert templates[0]["description"] == "Explore the beautiful canals of Venice."
