"""Testes dos endpoints de favoritos (/api/favorites)."""

from __future__ import annotations

AD = {"title": "Aulas de violão", "short": "Iniciantes", "description": "Aulas presenciais"}


def test_favorites_require_token(client) -> None:
    assert client.get("/api/favorites").status_code == 401
    assert client.get("/api/favorites/ids").status_code == 401


def test_add_check_list_and_remove(client, signup) -> None:
    headers, _ = signup()
    ad_id = client.post("/api/ads", json=AD, headers=headers).json()["id"]

    added = client.post(f"/api/favorites/{ad_id}", headers=headers)
    again = client.post(f"/api/favorites/{ad_id}", headers=headers)

    assert added.status_code == 201
    assert again.status_code == 200
    assert again.json()["message"] == "Anúncio já está nos favoritos"
    assert client.get(f"/api/favorites/{ad_id}/check", headers=headers).json() == {"isFavorite": True}
    assert client.get("/api/favorites/ids", headers=headers).json() == {"ids": [ad_id]}
    assert [ad["id"] for ad in client.get("/api/favorites", headers=headers).json()] == [ad_id]

    removed = client.delete(f"/api/favorites/{ad_id}", headers=headers)

    assert removed.status_code == 200
    assert client.get(f"/api/favorites/{ad_id}/check", headers=headers).json() == {"isFavorite": False}
    assert client.delete(f"/api/favorites/{ad_id}", headers=headers).status_code == 404


def test_favorite_unknown_ad(client, signup) -> None:
    headers, _ = signup()

    response = client.post("/api/favorites/nao-existe", headers=headers)

    assert response.status_code == 404


def test_favorites_are_per_user(client, signup) -> None:
    maria, _ = signup()
    joao, _ = signup(email="joao@example.com", nickname="Joao")
    ad_id = client.post("/api/ads", json=AD, headers=maria).json()["id"]
    client.post(f"/api/favorites/{ad_id}", headers=maria)

    assert client.get("/api/favorites/ids", headers=joao).json() == {"ids": []}
