from fastapi.testclient import TestClient

from companysite.errors import StorageError
from companysite.main import build_storage, create_app
from companysite.storage.memory import MemoryStorage
from companysite.storage.sql import SqlStorage


def test_no_database_url_selects_memory():
    storage = build_storage(None)
    assert isinstance(storage, MemoryStorage)
    assert storage.get_all_jobs() == []


def test_demo_data_is_loaded_on_request():
    storage = build_storage(None, seed=True)
    assert [job.title for job in storage.get_all_jobs()] == ["Senior Frontend Developer", "Backend Engineer"]
    assert len(storage.get_published_announcements()) == 2
    titles = {a.job_title for a in storage.get_all_applications()}
    assert titles == {"Senior Frontend Developer", "Backend Engineer"}
    assert [m.id for m in storage.get_all_contact_messages()] == ["msg1", "msg2"]


def test_database_url_selects_sql():
    storage = build_storage("sqlite://")
    try:
        assert isinstance(storage, SqlStorage)
        assert storage.get_all_jobs() == []
    finally:
        storage.close()


def test_root_and_health(client, storage):
    assert client.get("/").status_code == 200
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["storage"] == storage.name


def test_content_summary():
    client = TestClient(create_app(build_storage(None, seed=True)))
    summary = client.get("/api/admin/simple").json()
    assert summary["jobs"] == 2
    assert summary["announcements"] == 2
    assert summary["applications"] == 3


def test_unknown_route(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert "message" in response.json()


def test_malformed_json(client):
    response = client.post("/api/contact", content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "errors" in response.json()


class BrokenStorage(MemoryStorage):
    def get_all_jobs(self):
        raise StorageError("connection refused by db.internal:5432")


def test_store_failure_is_generic_500():
    client = TestClient(create_app(BrokenStorage()))
    response = client.get("/api/jobs")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
