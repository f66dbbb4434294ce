"""Testes dos endpoints de comentários (/api/comments)."""

from __future__ import annotations

import pytest

AD = {"title": "Marmitas fitness", "short": "Entrega", "description": "Cardápio semanal"}


@pytest.fixture
def setup(client, signup):
    maria, _ = signup()
    joao, joao_id = signup(email="joao@example.com", nickname="Joao")
    ad_id = client.post("/api/ads", json=AD, headers=maria).json()["id"]
    return maria, joao, joao_id, ad_id


def test_create_and_list_with_author(client, setup) -> None:
    _, joao, joao_id, ad_id = setup

    created = client.post("/api/comments", json={"ad_id": ad_id, "content": "Entregam no centro?"}, headers=joao)

    assert created.status_code == 201
    comment = created.json()["comment"]
    assert comment["user_id"] == joao_id
    assert comment["nickname"] == "Joao"

    listed = client.get(f"/api/comments/ad/{ad_id}").json()
    assert listed["count"] == 1
    assert listed["comments"][0]["content"] == "Entregam no centro?"
    assert listed["comments"][0]["full_name"] == "Joao da Silva"
    assert client.get(f"/api/comments/ad/{ad_id}/count").json() == {"count": 1}


def test_user_comments_include_ad_title(client, setup) -> None:
    _, joao, _, ad_id = setup
    client.post("/api/comments", json={"ad_id": ad_id, "content": "Ótimo!"}, headers=joao)

    body = client.get("/api/comments/user", headers=joao).json()

    assert body["count"] == 1
    assert body["comments"][0]["ad_title"] == AD["title"]


def test_create_requires_token(client, setup) -> None:
    *_, ad_id = setup
    assert client.post("/api/comments", json={"ad_id": ad_id, "content": "Oi"}).status_code == 401


def test_empty_and_sanitized_content(client, setup) -> None:
    _, joao, _, ad_id = setup

    empty = client.post("/api/comments", json={"ad_id": ad_id, "content": "<script>x</script>"}, headers=joao)

    assert empty.status_code == 400
    assert empty.json() == {"error": "O comentário não pode ser vazio"}


def test_comment_on_unknown_ad(client, setup) -> None:
    _, joao, _, _ = setup

    response = client.post("/api/comments", json={"ad_id": "nao-existe", "content": "Oi"}, headers=joao)

    assert response.status_code == 404


def test_only_author_edits_or_deletes(client, setup) -> None:
    maria, joao, _, ad_id = setup
    comment_id = client.post(
        "/api/comments", json={"ad_id": ad_id, "content": "Primeiro"}, headers=joao
    ).json()["comment"]["id"]

    assert client.put(f"/api/comments/{comment_id}", json={"content": "X"}, headers=maria).status_code == 403
    assert client.delete(f"/api/comments/{comment_id}", headers=maria).status_code == 403

    updated = client.put(f"/api/comments/{comment_id}", json={"content": "Editado"}, headers=joao)
    assert updated.status_code == 200
    assert updated.json()["comment"]["content"] == "Editado"

    assert client.delete(f"/api/comments/{comment_id}", headers=joao).status_code == 200
    assert client.get(f"/api/comments/ad/{ad_id}/count").json() == {"count": 0}
    assert client.delete(f"/api/comments/{comment_id}", headers=joao).status_code == 404


def test_comments_removed_with_ad(client, setup) -> None:
    maria, joao, _, ad_id = setup
    client.post("/api/comments", json={"ad_id": ad_id, "content": "Oi"}, headers=joao)

    client.delete(f"/api/ads/{ad_id}", headers=maria)

    assert client.get("/api/comments/user", headers=joao).json()["count"] == 0
