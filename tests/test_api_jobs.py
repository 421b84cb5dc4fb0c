def test_list_jobs_is_public(client, job_payload, admin_headers):
    client.post("/api/jobs", json=job_payload(), headers=admin_headers)

    response = client.get("/api/jobs")
    assert response.status_code == 200
    jobs = response.json()
    assert len(jobs) == 1
    assert jobs[0]["type"] == "full-time"
    assert jobs[0]["salaryMin"] == 90000
    assert jobs[0]["isActive"] is True
    assert "createdAt" in jobs[0]


def test_create_job(client, job_payload, admin_headers):
    response = client.post("/api/jobs", json=job_payload(skills=["Rust", "Go"]), headers=admin_headers)
    assert response.status_code == 201
    created = response.json()

    fetched = client.get(f"/api/jobs/{created['id']}").json()
    assert fetched["skills"] == ["Rust", "Go"]
    assert fetched["title"] == "Backend Engineer"


def test_create_job_requires_auth(client, job_payload):
    response = client.post("/api/jobs", json=job_payload())
    assert response.status_code == 401
    assert client.get("/api/jobs").json() == []


def test_create_job_missing_title(client, job_payload, admin_headers):
    payload = job_payload()
    del payload["title"]

    response = client.post("/api/jobs", json=payload, headers=admin_headers)
    assert response.status_code == 400
    body = response.json()
    assert "message" in body
    assert any(error["path"] == ["title"] for error in body["errors"])


def test_create_job_empty_skills(client, job_payload, admin_headers):
    response = client.post("/api/jobs", json=job_payload(skills=[]), headers=admin_headers)
    assert response.status_code == 400
    assert any(error["path"] == ["skills"] for error in response.json()["errors"])


def test_get_unknown_job(client):
    response = client.get("/api/jobs/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_update_job_partially(client, job_payload, admin_headers):
    job = client.post("/api/jobs", json=job_payload(), headers=admin_headers).json()

    response = client.put(f"/api/jobs/{job['id']}", json={"salaryMax": 150000}, headers=admin_headers)
    assert response.status_code == 200
    updated = response.json()
    assert updated["salaryMax"] == 150000
    assert updated["title"] == job["title"]


def test_update_job_rejects_bad_field(client, job_payload, admin_headers):
    job = client.post("/api/jobs", json=job_payload(), headers=admin_headers).json()
    response = client.put(f"/api/jobs/{job['id']}", json={"title": None}, headers=admin_headers)
    assert response.status_code == 400


def test_update_unknown_job(client, admin_headers):
    response = client.put("/api/jobs/missing", json={"title": "New"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Job not found"


def test_delete_job_hides_it(client, job_payload, admin_headers):
    job = client.post("/api/jobs", json=job_payload(), headers=admin_headers).json()

    response = client.delete(f"/api/jobs/{job['id']}", headers=admin_headers)
    assert response.status_code == 204
    assert response.content == b""

    assert client.get("/api/jobs").json() == []
    kept = client.get(f"/api/jobs/{job['id']}")
    assert kept.status_code == 200
    assert kept.json()["isActive"] is False

    assert client.delete(f"/api/jobs/{job['id']}", headers=admin_headers).status_code == 204


def test_delete_unknown_job(client, admin_headers):
    assert client.delete("/api/jobs/missing", headers=admin_headers).status_code == 204


def test_timestamps_are_sent_as_utc(client, job_payload, admin_headers):
    created = client.post("/api/jobs", json=job_payload(), headers=admin_headers).json()

    fetched = client.get(f"/api/jobs/{created['id']}").json()
    assert fetched["createdAt"].endswith("Z")
    assert fetched["updatedAt"].endswith("Z")
