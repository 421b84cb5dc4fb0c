from typing import Any, Dict, List, Optional

from companysite.database import new_id, utcnow
from companysite.errors import ConflictError, NotFoundError
from companysite.log import get_logger
from companysite.schemas.announcement import AnnouncementCreate, AnnouncementResponse
from companysite.schemas.application import (
    APPLICATION_STATUSES,
    ApplicationCreate,
    ApplicationResponse,
    ApplicationWithJob,
)
from companysite.schemas.contact import CONTACT_STATUSES, ContactMessageCreate, ContactMessageResponse
from companysite.schemas.job import JobCreate, JobResponse
from companysite.schemas.user import UserResponse, UserUpsert
from companysite.storage.base import Storage

logger = get_logger(__name__)


def _index(items, record_id: str) -> Optional[int]:
    return next((i for i, item in enumerate(items) if item.id == record_id), None)


def _newest_first(items):
    return sorted(items, key=lambda item: item.created_at, reverse=True)


class MemoryStorage(Storage):
    """Process-local store used when no database is configured.

    Each instance owns its own collections. Records handed out are copies,
    so callers cannot mutate stored state behind the store's back. There is
    no locking: concurrent writers to the same record may lose updates.
    """

    name = "memory"

    def __init__(self):
        self.users: List[UserResponse] = []
        self.jobs: List[JobResponse] = []
        self.applications: List[ApplicationResponse] = []
        self.announcements: List[AnnouncementResponse] = []
        self.contact_messages: List[ContactMessageResponse] = []

    # ===========================
    # USERS
    # ===========================

    def get_user(self, user_id: str) -> Optional[UserResponse]:
        i = _index(self.users, user_id)
        return None if i is None else self.users[i].model_copy()

    def upsert_user(self, data: UserUpsert) -> UserResponse:
        now = utcnow()
        values = data.model_dump(exclude_unset=True)
        email = values.get("email")
        if email is not None and any(u.email == email and u.id != data.id for u in self.users):
            raise ConflictError("Email already in use")
        i = _index(self.users, data.id)
        if i is None:
            user = UserResponse(**values, created_at=now, updated_at=now)
            self.users.append(user)
            logger.info("Created user %s", user.id)
        else:
            user = self.users[i].model_copy(update={**values, "updated_at": now})
            self.users[i] = user
        return user.model_copy()

    # ===========================
    # JOBS
    # ===========================

    def get_all_jobs(self) -> List[JobResponse]:
        return [job.model_copy(deep=True) for job in _newest_first(j for j in self.jobs if j.is_active)]

    def get_job_by_id(self, job_id: str) -> Optional[JobResponse]:
        i = _index(self.jobs, job_id)
        return None if i is None else self.jobs[i].model_copy(deep=True)

    def create_job(self, data: JobCreate) -> JobResponse:
        now = utcnow()
        job = JobResponse(**data.model_dump(), id=new_id(), created_at=now, updated_at=now)
        self.jobs.append(job)
        logger.info("Created job %s", job.id)
        return job.model_copy(deep=True)

    def update_job(self, job_id: str, data: Dict[str, Any]) -> JobResponse:
        i = _index(self.jobs, job_id)
        if i is None:
            raise NotFoundError("Job", job_id)
        self.jobs[i] = self.jobs[i].model_copy(update={**data, "updated_at": utcnow()}, deep=True)
        logger.info("Updated job %s", job_id)
        return self.jobs[i].model_copy(deep=True)

    def delete_job(self, job_id: str) -> None:
        i = _index(self.jobs, job_id)
        if i is not None:
            self.jobs[i] = self.jobs[i].model_copy(update={"is_active": False})
            logger.info("Deactivated job %s", job_id)

    # ===========================
    # APPLICATIONS
    # ===========================

    def get_applications_for_job(self, job_id: str) -> List[ApplicationResponse]:
        return [a.model_copy() for a in _newest_first(a for a in self.applications if a.job_id == job_id)]

    def get_all_applications(self) -> List[ApplicationWithJob]:
        titles = {job.id: job.title for job in self.jobs}
        return [
            ApplicationWithJob(**a.model_dump(), job_title=titles.get(a.job_id))
            for a in _newest_first(self.applications)
        ]

    def create_job_application(self, data: ApplicationCreate) -> ApplicationResponse:
        if _index(self.jobs, data.job_id) is None:
            raise NotFoundError("Job", data.job_id)
        now = utcnow()
        application = ApplicationResponse(
            **data.model_dump(), id=new_id(), status="pending", created_at=now, updated_at=now,
        )
        self.applications.append(application)
        logger.info("Created application %s for job %s", application.id, application.job_id)
        return application.model_copy()

    def update_application_status(self, application_id: str, status: str) -> ApplicationResponse:
        if status not in APPLICATION_STATUSES:
            raise ValueError(f"Invalid application status: {status}")
        i = _index(self.applications, application_id)
        if i is None:
            raise NotFoundError("Application", application_id)
        self.applications[i] = self.applications[i].model_copy(update={"status": status, "updated_at": utcnow()})
        logger.info("Application %s is now %s", application_id, status)
        return self.applications[i].model_copy()

    # ===========================
    # ANNOUNCEMENTS
    # ===========================

    def get_published_announcements(self) -> List[AnnouncementResponse]:
        published = [a for a in self.announcements if a.is_published]
        published.sort(key=lambda a: a.published_at.timestamp() if a.published_at else 0, reverse=True)
        return [a.model_copy() for a in published]

    def get_all_announcements(self) -> List[AnnouncementResponse]:
        return [a.model_copy() for a in _newest_first(self.announcements)]

    def create_announcement(self, data: AnnouncementCreate) -> AnnouncementResponse:
        now = utcnow()
        announcement = AnnouncementResponse(**data.model_dump(), id=new_id(), created_at=now, updated_at=now)
        self.announcements.append(announcement)
        logger.info("Created announcement %s", announcement.id)
        return announcement.model_copy()

    def update_announcement(self, announcement_id: str, data: Dict[str, Any]) -> AnnouncementResponse:
        i = _index(self.announcements, announcement_id)
        if i is None:
            raise NotFoundError("Announcement", announcement_id)
        self.announcements[i] = self.announcements[i].model_copy(update={**data, "updated_at": utcnow()})
        logger.info("Updated announcement %s", announcement_id)
        return self.announcements[i].model_copy()

    def delete_announcement(self, announcement_id: str) -> None:
        i = _index(self.announcements, announcement_id)
        if i is not None:
            del self.announcements[i]
            logger.info("Deleted announcement %s", announcement_id)

    # ===========================
    # CONTACT MESSAGES
    # ===========================

    def get_all_contact_messages(self) -> List[ContactMessageResponse]:
        return [m.model_copy() for m in _newest_first(self.contact_messages)]

    def create_contact_message(self, data: ContactMessageCreate) -> ContactMessageResponse:
        now = utcnow()
        message = ContactMessageResponse(
            **data.model_dump(), id=new_id(), status="unread", created_at=now, updated_at=now,
        )
        self.contact_messages.append(message)
        logger.info("Received contact message %s", message.id)
        return message.model_copy()

    def update_contact_message_status(self, message_id: str, status: str) -> ContactMessageResponse:
        if status not in CONTACT_STATUSES:
            raise ValueError(f"Invalid contact message status: {status}")
        i = _index(self.contact_messages, message_id)
        if i is None:
            raise NotFoundError("Contact message", message_id)
        self.contact_messages[i] = self.contact_messages[i].model_copy(update={"status": status, "updated_at": utcnow()})
        logger.info("Contact message %s is now %s", message_id, status)
        return self.contact_messages[i].model_copy()

    def delete_contact_message(self, message_id: str) -> None:
        i = _index(self.contact_messages, message_id)
        if i is not None:
            del self.contact_messages[i]
            logger.info("Deleted contact message %s", message_id)
