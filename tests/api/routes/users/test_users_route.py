"""Testes dos endpoints de usuários (/api/users)."""

from __future__ import annotations

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


def _signup_form(**overrides: str) -> dict[str, str]:
    form = {
        "fullName": "Maria da Silva",
        "nickname": "Maria",
        "email": "maria@example.com",
        "password": "segredo123",
    }
    form.update(overrides)
    return form


def test_create_user_returns_id(client) -> None:
    response = client.post("/api/users", data=_signup_form())

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Usuário criado com sucesso"
    assert body["userId"]


def test_create_user_with_photo(client) -> None:
    response = client.post(
        "/api/users",
        data=_signup_form(),
        files={"photo": ("foto.jpg", JPEG_BYTES, "image/jpeg")},
    )
    assert response.status_code == 201

    user = client.get(f"/api/users/{response.json()['userId']}").json()
    assert user["photoPath"].startswith("/uploads/users/")
    assert user["photoPath"].endswith(".jpg")


def test_create_user_rejects_invalid_photo_type(client) -> None:
    response = client.post(
        "/api/users",
        data=_signup_form(),
        files={"photo": ("foto.gif", b"GIF89a", "image/gif")},
    )

    assert response.status_code == 400
    assert "JPEG" in response.json()["error"]


def test_create_user_validation_error(client) -> None:
    response = client.post("/api/users", data=_signup_form(fullName="", email="invalido"))

    assert response.status_code == 400
    assert response.json() == {"error": "Nome Completo: Obrigatório"}


def test_duplicate_email_conflicts(client) -> None:
    assert client.post("/api/users", data=_signup_form()).status_code == 201

    response = client.post("/api/users", data=_signup_form(nickname="Outra"))

    assert response.status_code == 409
    assert response.json() == {"error": "Email já cadastrado"}


def test_public_user_never_exposes_password(client, signup) -> None:
    _, user_id = signup()

    listed = client.get("/api/users").json()
    single = client.get(f"/api/users/{user_id}").json()

    assert [user["id"] for user in listed] == [user_id]
    for payload in (listed[0], single):
        assert "password" not in payload
        assert "password_hash" not in payload
        assert payload["fullName"] == "Maria da Silva"


def test_get_unknown_user(client) -> None:
    response = client.get("/api/users/nao-existe")

    assert response.status_code == 404
    assert response.json() == {"error": "Usuário não encontrado"}


def test_update_requires_token(client, signup) -> None:
    _, user_id = signup()

    response = client.put(f"/api/users/{user_id}", data={"nickname": "Mari"})

    assert response.status_code == 401
    assert response.json() == {"error": "Token de autenticação ausente"}


def test_delete_requires_token_and_keeps_user(client, signup) -> None:
    _, user_id = signup()

    assert client.put(f"/api/users/{user_id}", data={"nickname": "Outro"}).status_code == 401
    response = client.delete(f"/api/users/{user_id}")

    assert response.status_code == 401
    user = client.get(f"/api/users/{user_id}")
    assert user.status_code == 200
    assert user.json()["nickname"] == "Maria"


def test_update_own_profile_and_password(client, signup) -> None:
    headers, user_id = signup()

    response = client.put(
        f"/api/users/{user_id}",
        data={"nickname": "Mari", "password": "nova-senha"},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["nickname"] == "Mari"
    old = client.post("/api/auth/login", json={"email": "maria@example.com", "password": "segredo123"})
    new = client.post("/api/auth/login", json={"email": "maria@example.com", "password": "nova-senha"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_cannot_update_or_delete_other_user(client, signup) -> None:
    headers, _ = signup()
    _, other_id = signup(email="joao@example.com", nickname="Joao")

    assert client.put(f"/api/users/{other_id}", data={"nickname": "X"}, headers=headers).status_code == 403
    assert client.delete(f"/api/users/{other_id}", headers=headers).status_code == 403


def test_update_to_taken_email_conflicts(client, signup) -> None:
    headers, user_id = signup()
    signup(email="joao@example.com", nickname="Joao")

    response = client.put(f"/api/users/{user_id}", data={"email": "joao@example.com"}, headers=headers)

    assert response.status_code == 409


def test_delete_account_removes_ads_and_invalidates_token(client, signup) -> None:
    headers, user_id = signup()
    ad = client.post("/api/ads", json={"title": "Bolo", "short": "Caseiro", "description": "Feito hoje"}, headers=headers)
    assert ad.status_code == 201

    response = client.delete(f"/api/users/{user_id}", headers=headers)

    assert response.status_code == 200
    assert client.get(f"/api/ads/{ad.json()['id']}").status_code == 404
    assert client.get("/api/auth/me", headers=headers).status_code == 401
