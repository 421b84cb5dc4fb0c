def _announcement(**overrides):
    data = {"title": "We are hiring", "content": "Join the team.", "category": "team-news"}
    data.update(overrides)
    return data


def test_publish_on_create_stamps_date(client, admin_headers):
    response = client.post("/api/announcements", json=_announcement(isPublished=True), headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["publishedAt"] is not None


def test_draft_has_no_date(client, admin_headers):
    response = client.post("/api/announcements", json=_announcement(), headers=admin_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["isPublished"] is False
    assert body["publishedAt"] is None


def test_explicit_date_is_kept(client, admin_headers):
    response = client.post(
        "/api/announcements",
        json=_announcement(isPublished=True, publishedAt="2024-01-20T00:00:00Z"),
        headers=admin_headers,
    )
    assert response.json()["publishedAt"].startswith("2024-01-20")


def test_public_list_shows_published_only(client, admin_headers):
    client.post("/api/announcements", json=_announcement(title="Live", isPublished=True), headers=admin_headers)
    client.post("/api/announcements", json=_announcement(title="Draft"), headers=admin_headers)

    public = client.get("/api/announcements")
    assert public.status_code == 200
    assert [a["title"] for a in public.json()] == ["Live"]

    everything = client.get("/api/admin/announcements", headers=admin_headers)
    assert sorted(a["title"] for a in everything.json()) == ["Draft", "Live"]


def test_public_list_newest_publication_first(client, admin_headers):
    for day in ("2024-01-05", "2024-03-05", "2024-02-05"):
        client.post(
            "/api/announcements",
            json=_announcement(title=day, isPublished=True, publishedAt=f"{day}T00:00:00Z"),
            headers=admin_headers,
        )
    titles = [a["title"] for a in client.get("/api/announcements").json()]
    assert titles == ["2024-03-05", "2024-02-05", "2024-01-05"]


def test_admin_list_requires_auth(client):
    assert client.get("/api/admin/announcements").status_code == 401


def test_publishing_draft_stamps_date(client, admin_headers):
    draft = client.post("/api/announcements", json=_announcement(), headers=admin_headers).json()

    response = client.put(f"/api/announcements/{draft['id']}", json={"isPublished": True}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["isPublished"] is True
    assert response.json()["publishedAt"] is not None
    assert [a["id"] for a in client.get("/api/announcements").json()] == [draft["id"]]


def test_update_without_publishing_keeps_date(client, admin_headers):
    created = client.post(
        "/api/announcements",
        json=_announcement(isPublished=True, publishedAt="2024-01-20T00:00:00Z"),
        headers=admin_headers,
    ).json()

    response = client.put(f"/api/announcements/{created['id']}", json={"title": "Renamed"}, headers=admin_headers)
    assert response.json()["title"] == "Renamed"
    assert response.json()["publishedAt"].startswith("2024-01-20")


def test_update_invalid_body(client, admin_headers):
    created = client.post("/api/announcements", json=_announcement(), headers=admin_headers).json()
    response = client.put(f"/api/announcements/{created['id']}", json={"category": ""}, headers=admin_headers)
    assert response.status_code == 400


def test_update_unknown_announcement(client, admin_headers):
    response = client.put("/api/announcements/missing", json={"title": "x"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Announcement not found"


def test_delete_announcement(client, admin_headers):
    created = client.post("/api/announcements", json=_announcement(isPublished=True), headers=admin_headers).json()

    assert client.delete(f"/api/announcements/{created['id']}", headers=admin_headers).status_code == 204
    assert client.get("/api/announcements").json() == []
    assert client.delete(f"/api/announcements/{created['id']}", headers=admin_headers).status_code == 204


def test_publishing_with_null_date_stamps_date(client, admin_headers):
    draft = client.post("/api/announcements", json=_announcement(), headers=admin_headers).json()

    response = client.put(
        f"/api/announcements/{draft['id']}",
        json={"isPublished": True, "publishedAt": None},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["publishedAt"] is not None
