from companysite.utils.auth import create_access_token


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


def test_callback_records_user(client, storage):
    token = create_access_token({"sub": "u-42", "email": "lin@example.com", "first_name": "Lin"})

    response = client.post("/api/auth/callback", json={"token": token})
    assert response.status_code == 200
    assert response.json()["id"] == "u-42"
    assert response.json()["firstName"] == "Lin"
    assert storage.get_user("u-42").email == "lin@example.com"


def test_callback_again_merges_claims(client, storage):
    client.post("/api/auth/callback", json={"token": create_access_token({"sub": "u-1", "email": "a@example.com"})})
    client.post("/api/auth/callback", json={"token": create_access_token({"sub": "u-1", "last_name": "Ng"})})

    user = storage.get_user("u-1")
    assert user.email == "a@example.com"
    assert user.last_name == "Ng"


def test_callback_rejects_bad_token(client):
    response = client.post("/api/auth/callback", json={"token": "garbage"})
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_current_user(client):
    token = create_access_token({"sub": "u-7", "email": "sam@example.com"})
    client.post("/api/auth/callback", json={"token": token})

    response = client.get("/api/auth/user", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json()["email"] == "sam@example.com"


def test_missing_token(client):
    response = client.get("/api/auth/user")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_token_for_unknown_user(client):
    response = client.get("/api/auth/user", headers=_bearer(create_access_token({"sub": "ghost"})))
    assert response.status_code == 401


def test_expired_token(client, storage, admin_headers):
    token = create_access_token({"sub": "admin-1"}, expires_minutes=-1)
    assert client.get("/api/admin/announcements", headers=_bearer(token)).status_code == 401


def test_token_without_subject(client):
    response = client.get("/api/auth/user", headers=_bearer(create_access_token({"email": "x@example.com"})))
    assert response.status_code == 401


def test_callback_with_email_of_another_user(client):
    client.post("/api/auth/callback", json={"token": create_access_token({"sub": "u-1", "email": "dup@example.com"})})

    response = client.post(
        "/api/auth/callback", json={"token": create_access_token({"sub": "u-2", "email": "dup@example.com"})},
    )
    assert response.status_code == 409
    assert response.json() == {"message": "Email already in use"}
