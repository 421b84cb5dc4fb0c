import pytest
from fastapi.testclient import TestClient

from companysite.database import make_engine
from companysite.main import create_app
from companysite.schemas.job import JobCreate
from companysite.schemas.user import UserUpsert
from companysite.storage.memory import MemoryStorage
from companysite.storage.sql import SqlStorage
from companysite.utils.auth import create_access_token

ADMIN_ID = "admin-1"


def _sql_storage():
    storage = SqlStorage(make_engine("sqlite://"))
    storage.create_tables()
    return storage


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Every test using this fixture runs once per store."""
    store = MemoryStorage() if request.param == "memory" else _sql_storage()
    yield store
    store.close()


@pytest.fixture
def client(storage):
    return TestClient(create_app(storage))


@pytest.fixture
def admin_headers(storage):
    storage.upsert_user(UserUpsert(id=ADMIN_ID, email="admin@example.com", first_name="Ada"))
    token = create_access_token({"sub": ADMIN_ID})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def job_payload():
    def make(**overrides):
        payload = {
            "title": "Backend Engineer",
            "department": "Engineering",
            "type": "full-time",
            "location": "Remote",
            "salaryMin": 90000,
            "salaryMax": 140000,
            "description": "Build and run our APIs.",
            "requirements": "3+ years of backend work.",
            "benefits": "Health insurance",
            "skills": ["Python", "PostgreSQL"],
        }
        payload.update(overrides)
        return payload

    return make


@pytest.fixture
def make_job(storage, job_payload):
    def make(**overrides):
        return storage.create_job(JobCreate(**job_payload(**overrides)))

    return make
