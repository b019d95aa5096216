"""Favorites: canned envelopes for every route, whatever the input."""

import logging

import pytest

from marketplace_api.app.services.favorite_service import FavoriteService


async def test_add_favorite_returns_success_without_data(client):
    res = await client.post("/api/favorites", json={"productId": 42})
    assert res.status_code == 200
    assert res.json() == {"message": "Favorite added successfully", "success": True}


async def test_list_favorites_returns_empty_list(client):
    res = await client.get("/api/favorites")
    assert res.status_code == 200
    assert res.json() == {
        "message": "Favorites retrieved successfully",
        "success": True,
        "data": [],
    }


async def test_remove_favorite_accepts_any_identifier(client):
    for favorite_id in ("1", "abc", "not-a-number"):
        res = await client.delete(f"/api/favorites/{favorite_id}")
        assert res.status_code == 200
        assert res.json() == {"message": "Favorite removed successfully", "success": True}


DEEPLY_NESTED = b"[" * 100000 + b"]" * 100000


@pytest.mark.parametrize(
    "body",
    [b"", b"{not json", b"[1, 2, 3]", b"null", b'"text"', DEEPLY_NESTED],
    ids=["empty", "malformed", "list", "null", "string", "deeply-nested"],
)
async def test_add_favorite_tolerates_any_body(client, body):
    res = await client.post(
        "/api/favorites", content=body, headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json()["success"] is True


async def test_list_favorites_failure_returns_generic_500(client, monkeypatch, caplog):
    async def boom(cls):
        raise RuntimeError("storage offline")

    monkeypatch.setattr(FavoriteService, "list_favorites", classmethod(boom))
    res = await client.get("/api/favorites")
    assert res.status_code == 500
    assert res.json() == {"message": "Failed to retrieve favorites", "success": False}
    assert "storage offline" not in res.text
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert any("Failed to retrieve favorites" in r.getMessage() for r in errors)


async def test_remove_favorite_failure_returns_generic_500(client, monkeypatch):
    async def boom(cls, favorite_id):
        raise RuntimeError("nope")

    monkeypatch.setattr(FavoriteService, "remove_favorite", classmethod(boom))
    res = await client.delete("/api/favorites/7")
    assert res.status_code == 500
    assert res.json() == {"message": "Failed to remove favorite", "success": False}
