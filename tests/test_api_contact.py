def _message(**overrides):
    data = {
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "subject": "Partnership",
        "message": "Could we schedule a call?",
    }
    data.update(overrides)
    return data


def test_send_contact_message(client):
    response = client.post("/api/contact", json=_message(status="replied"))
    assert response.status_code == 201
    assert response.json()["status"] == "unread"


def test_contact_bad_email(client):
    response = client.post("/api/contact", json=_message(email="not-an-email"))
    assert response.status_code == 400
    assert any(error["path"] == ["email"] for error in response.json()["errors"])


def test_contact_missing_subject(client):
    payload = _message()
    del payload["subject"]
    assert client.post("/api/contact", json=payload).status_code == 400


def test_inbox_requires_auth(client):
    assert client.get("/api/admin/contact-messages").status_code == 401


def test_inbox_lifecycle(client, admin_headers):
    sent = client.post("/api/contact", json=_message()).json()

    inbox = client.get("/api/admin/contact-messages", headers=admin_headers)
    assert [m["id"] for m in inbox.json()] == [sent["id"]]

    response = client.put(
        f"/api/admin/contact-messages/{sent['id']}/status", json={"status": "read"}, headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "read"

    assert client.delete(f"/api/admin/contact-messages/{sent['id']}", headers=admin_headers).status_code == 204
    assert client.get("/api/admin/contact-messages", headers=admin_headers).json() == []


def test_contact_status_outside_enumeration(client, admin_headers):
    sent = client.post("/api/contact", json=_message()).json()
    response = client.put(
        f"/api/admin/contact-messages/{sent['id']}/status", json={"status": "archived"}, headers=admin_headers,
    )
    assert response.status_code == 400


def test_contact_status_unknown_message(client, admin_headers):
    response = client.put("/api/admin/contact-messages/missing/status", json={"status": "read"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Contact message not found"
