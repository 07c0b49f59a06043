"""
Community API tests - public room listing, room detail and rating upsert.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.room_rating import RoomRating
from app.db.repositories.user_repository import UserRepository


async def _make_public(client: AsyncClient, headers: dict, **prefs) -> None:
    response = await client.put("/api/preferences", headers=headers, json={"roomVisibility": "public", **prefs})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_rooms_listing_follows_visibility(
    client: AsyncClient, alice_headers: dict, bob_headers: dict, trophy_data: dict
):
    await _make_public(client, alice_headers, theme="manor")
    await client.put("/api/preferences", headers=bob_headers, json={"theme": "minimal"})
    await client.post("/api/trophies", headers=alice_headers, json=trophy_data)
    await client.post("/api/trophies", headers=alice_headers, json={**trophy_data, "species": "Elk"})

    response = await client.get("/api/community/rooms")
    assert response.status_code == 200
    rooms = response.json()
    assert [r["userId"] for r in rooms] == ["user-alice"]
    room = rooms[0]
    assert room["firstName"] == "Alice"
    assert room["theme"] == "manor"
    assert room["trophyCount"] == 2
    assert room["avgScore"] == 0
    assert room["totalRatings"] == 0

    await client.put("/api/preferences", headers=alice_headers, json={"roomVisibility": "private"})
    assert (await client.get("/api/community/rooms")).json() == []


@pytest.mark.asyncio
async def test_rooms_listing_includes_community_average(
    client: AsyncClient, alice_headers: dict, bob_headers: dict, carol_headers: dict
):
    await _make_public(client, alice_headers)
    await client.get("/api/auth/user", headers=carol_headers)
    await client.post("/api/community/rate", headers=bob_headers, json={"roomOwnerId": "user-alice", "score": 5})
    await client.post("/api/community/rate", headers=carol_headers, json={"roomOwnerId": "user-alice", "score": 4})

    rooms = (await client.get("/api/community/rooms")).json()
    assert rooms[0]["avgScore"] == 4.5
    assert rooms[0]["totalRatings"] == 2


@pytest.mark.asyncio
async def test_room_detail_public_only(
    client: AsyncClient, alice_headers: dict, bob_headers: dict, trophy_data: dict
):
    await client.post("/api/trophies", headers=alice_headers, json=trophy_data)
    await client.put("/api/preferences", headers=alice_headers, json={"theme": "manor"})

    for owner in ("user-alice", "nobody"):
        response = await client.get(f"/api/community/room/{owner}")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
        assert response.json()["message"] == "Room not found or is private"

    await _make_public(client, alice_headers)
    await client.post("/api/community/rate", headers=bob_headers, json={"roomOwnerId": "user-alice", "score": 3})

    response = await client.get("/api/community/room/user-alice")
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == "user-alice"
    assert "email" not in data["user"]
    assert data["preferences"]["theme"] == "manor"
    assert [t["species"] for t in data["trophies"]] == ["Whitetail Deer"]
    assert data["rating"] == {"avgScore": 3.0, "totalRatings": 1}


@pytest.mark.asyncio
async def test_rerating_keeps_single_row_with_latest_score(
    client: AsyncClient, session: AsyncSession, alice_headers: dict, bob_headers: dict
):
    await client.get("/api/auth/user", headers=alice_headers)

    first = await client.post("/api/community/rate", headers=bob_headers, json={"roomOwnerId": "user-alice", "score": 2})
    assert first.status_code == 200
    for score in (4, 5, 3):
        response = await client.post(
            "/api/community/rate", headers=bob_headers, json={"roomOwnerId": "user-alice", "score": score}
        )
        assert response.status_code == 200
        assert response.json()["id"] == first.json()["id"]

    rows = (
        await session.scalars(
            select(RoomRating).where(RoomRating.room_owner_id == "user-alice", RoomRating.rater_id == "user-bob")
        )
    ).all()
    assert len(rows) == 1
    assert rows[0].score == 3

    summary = (await client.get("/api/my-room-rating", headers=alice_headers)).json()
    assert summary == {"avgScore": 3.0, "totalRatings": 1}


@pytest.mark.asyncio
async def test_cannot_rate_own_room(client: AsyncClient, alice_headers: dict):
    response = await client.post(
        "/api/community/rate", headers=alice_headers, json={"roomOwnerId": "user-alice", "score": 5}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot rate your own room"


@pytest.mark.asyncio
@pytest.mark.parametrize("score", [0, 6, "great"])
async def test_rating_score_out_of_range(client: AsyncClient, alice_headers: dict, bob_headers: dict, score):
    await client.get("/api/auth/user", headers=alice_headers)
    response = await client.post(
        "/api/community/rate", headers=bob_headers, json={"roomOwnerId": "user-alice", "score": score}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_rate_unknown_room(client: AsyncClient, bob_headers: dict):
    response = await client.post("/api/community/rate", headers=bob_headers, json={"roomOwnerId": "ghost", "score": 4})
    assert response.status_code == 404
    assert response.json() == {"error": "not_found", "message": "Room not found"}


@pytest.mark.asyncio
async def test_rate_requires_auth(client: AsyncClient):
    response = await client.post("/api/community/rate", json={"roomOwnerId": "user-alice", "score": 4})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_my_room_rating_without_votes(client: AsyncClient, alice_headers: dict):
    response = await client.get("/api/my-room-rating", headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {"avgScore": 0.0, "totalRatings": 0}


@pytest.mark.asyncio
async def test_current_user_from_claims(client: AsyncClient, alice_headers: dict):
    response = await client.get("/api/auth/user", headers=alice_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "alice@example.com"
    assert response.json()["lastName"] == "Archer"


@pytest.mark.asyncio
async def test_unchanged_claims_do_not_rewrite_user(
    client: AsyncClient, alice_headers: dict, token_headers, monkeypatch
):
    calls = []
    upsert = UserRepository.upsert_from_claims

    async def counting_upsert(self, id, **claims):
        calls.append(id)
        return await upsert(self, id, **claims)

    monkeypatch.setattr(UserRepository, "upsert_from_claims", counting_upsert)

    await client.get("/api/auth/user", headers=alice_headers)
    await client.get("/api/weapons", headers=alice_headers)
    await client.get("/api/stats", headers=alice_headers)
    assert calls == ["user-alice"]

    renamed = token_headers("user-alice", email="alice@example.com", first_name="Alice", last_name="Hunter")
    response = await client.get("/api/auth/user", headers=renamed)
    assert response.json()["lastName"] == "Hunter"
    assert calls == ["user-alice", "user-alice"]
