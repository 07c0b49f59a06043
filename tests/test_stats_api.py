"""
Stats API tests - counts and the visible room rating.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_stats_empty_room(client: AsyncClient, alice_headers: dict):
    response = await client.get("/api/stats", headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {
        "totalHunts": 0,
        "totalTrophies": 0,
        "speciesCollected": 0,
        "recentSpecies": None,
        "roomRating": None,
        "roomRatingSource": None,
        "roomRatingCount": 0,
    }


@pytest.mark.asyncio
async def test_only_scored_trophies_qualify(client: AsyncClient, alice_headers: dict, trophy_data: dict):
    for score in ("165 B&C", "", None):
        await client.post("/api/trophies", headers=alice_headers, json={**trophy_data, "score": score})

    data = (await client.get("/api/stats", headers=alice_headers)).json()
    assert data["totalHunts"] == 3
    assert data["totalTrophies"] == 1
    assert data["speciesCollected"] == 1
    assert data["recentSpecies"] == "Whitetail Deer"


@pytest.mark.asyncio
async def test_heuristic_rating_without_votes(client: AsyncClient, alice_headers: dict, trophy_data: dict):
    await client.post(
        "/api/trophies",
        headers=alice_headers,
        json={**trophy_data, "imageUrl": "/img/a.jpg", "score": "150 SCI"},
    )
    await client.post(
        "/api/trophies",
        headers=alice_headers,
        json={**trophy_data, "species": "Elk", "imageUrl": "/img/b.jpg", "notes": "   "},
    )

    data = (await client.get("/api/stats", headers=alice_headers)).json()
    assert data["roomRating"] == 2.88
    assert data["roomRatingSource"] == "auto"
    assert data["roomRatingCount"] == 0
    assert data["speciesCollected"] == 2


@pytest.mark.asyncio
async def test_heuristic_floor(client: AsyncClient, alice_headers: dict, trophy_data: dict):
    await client.post("/api/trophies", headers=alice_headers, json=trophy_data)
    data = (await client.get("/api/stats", headers=alice_headers)).json()
    assert data["roomRating"] == 0.5
    assert data["roomRatingSource"] == "auto"


@pytest.mark.asyncio
async def test_community_votes_override_heuristic(
    client: AsyncClient, alice_headers: dict, bob_headers: dict, carol_headers: dict, trophy_data: dict
):
    await client.post("/api/trophies", headers=alice_headers, json=trophy_data)
    await client.get("/api/auth/user", headers=carol_headers)
    await client.post("/api/community/rate", headers=bob_headers, json={"roomOwnerId": "user-alice", "score": 5})
    await client.post("/api/community/rate", headers=carol_headers, json={"roomOwnerId": "user-alice", "score": 4})
    await client.post("/api/community/rate", headers=carol_headers, json={"roomOwnerId": "user-alice", "score": 2})

    data = (await client.get("/api/stats", headers=alice_headers)).json()
    assert data["roomRating"] == 3.5
    assert data["roomRatingSource"] == "community"
    assert data["roomRatingCount"] == 2


@pytest.mark.asyncio
async def test_recent_species_is_newest_trophy(client: AsyncClient, alice_headers: dict, trophy_data: dict):
    for name in ("Elk", "Moose", "Kudu", "Elk", "Impala"):
        await client.post("/api/trophies", headers=alice_headers, json={**trophy_data, "species": name})

    data = (await client.get("/api/stats", headers=alice_headers)).json()
    assert data["recentSpecies"] == "Impala"
    assert data["speciesCollected"] == 4
    assert data["totalHunts"] == 5
