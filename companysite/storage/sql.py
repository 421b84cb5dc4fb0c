from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from companysite.database import create_tables, make_session_factory, utcnow
from companysite.errors import ConflictError, NotFoundError, StorageError
from companysite.log import get_logger
from companysite.models.announcement import Announcement
from companysite.models.application import JobApplication
from companysite.models.contact_message import ContactMessage
from companysite.models.job import Job
from companysite.models.user import User
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

# dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {"postgresql": postgresql_insert, "sqlite": sqlite_insert}


class SqlStorage(Storage):
    """Store backed by a relational database through SQLAlchemy.

    Each operation runs in its own session and commits on success.
    """

    name = "sql"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)

    def create_tables(self) -> None:
        create_tables(self.engine)

    def close(self) -> None:
        self.engine.dispose()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            raise ConflictError("Record conflicts with an existing one") from exc
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageError(str(exc)) from exc
        finally:
            session.close()

    @staticmethod
    def _apply(row, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            setattr(row, key, value)
        row.updated_at = utcnow()

    # ===========================
    # USERS
    # ===========================

    def get_user(self, user_id: str) -> Optional[UserResponse]:
        with self._session() as session:
            user = session.get(User, user_id)
            return None if user is None else UserResponse.model_validate(user)

    def upsert_user(self, data: UserUpsert) -> UserResponse:
        values = data.model_dump(exclude_unset=True)
        now = utcnow()
        changes = {key: value for key, value in values.items() if key != "id"}
        changes["updated_at"] = now
        insert = _UPSERT_INSERTS.get(self.engine.dialect.name)
        with self._session() as session:
            email = values.get("email")
            if email is not None and session.scalar(
                select(User.id).where(User.email == email, User.id != data.id)
            ) is not None:
                raise ConflictError("Email already in use")

            if insert is not None:
                statement = insert(User).values(**values, created_at=now, updated_at=now)
                session.execute(statement.on_conflict_do_update(index_elements=[User.id], set_=changes))
            else:
                user = session.get(User, data.id)
                if user is None:
                    session.add(User(**values, created_at=now, updated_at=now))
                else:
                    self._apply(user, changes)
                session.flush()

            logger.info("Upserted user %s", data.id)
            return UserResponse.model_validate(session.get(User, data.id, populate_existing=True))

    # ===========================
    # JOBS
    # ===========================

    def get_all_jobs(self) -> List[JobResponse]:
        query = select(Job).where(Job.is_active.is_(True)).order_by(Job.created_at.desc())
        with self._session() as session:
            return [JobResponse.model_validate(job) for job in session.scalars(query)]

    def get_job_by_id(self, job_id: str) -> Optional[JobResponse]:
        with self._session() as session:
            job = session.get(Job, job_id)
            return None if job is None else JobResponse.model_validate(job)

    def create_job(self, data: JobCreate) -> JobResponse:
        with self._session() as session:
            job = Job(**data.model_dump())
            session.add(job)
            session.flush()
            logger.info("Created job %s", job.id)
            return JobResponse.model_validate(job)

    def update_job(self, job_id: str, data: Dict[str, Any]) -> JobResponse:
        with self._session() as session:
            job = session.get(Job, job_id)
            if job is None:
                raise NotFoundError("Job", job_id)
            self._apply(job, data)
            session.flush()
            logger.info("Updated job %s", job_id)
            return JobResponse.model_validate(job)

    def delete_job(self, job_id: str) -> None:
        with self._session() as session:
            session.execute(update(Job).where(Job.id == job_id).values(is_active=False))
        logger.info("Deactivated job %s", job_id)

    # ===========================
    # APPLICATIONS
    # ===========================

    def get_applications_for_job(self, job_id: str) -> List[ApplicationResponse]:
        query = (
            select(JobApplication)
            .where(JobApplication.job_id == job_id)
            .order_by(JobApplication.created_at.desc())
        )
        with self._session() as session:
            return [ApplicationResponse.model_validate(a) for a in session.scalars(query)]

    def get_all_applications(self) -> List[ApplicationWithJob]:
        # outer join: an application never disappears because its job row is gone
        query = (
            select(JobApplication, Job.title)
            .outerjoin(Job, JobApplication.job_id == Job.id)
            .order_by(JobApplication.created_at.desc())
        )
        with self._session() as session:
            return [
                ApplicationWithJob.model_validate(application).model_copy(update={"job_title": title})
                for application, title in session.execute(query)
            ]

    def create_job_application(self, data: ApplicationCreate) -> ApplicationResponse:
        with self._session() as session:
            if session.get(Job, data.job_id) is None:
                raise NotFoundError("Job", data.job_id)
            application = JobApplication(**data.model_dump(), status="pending")
            session.add(application)
            session.flush()
            logger.info("Created application %s for job %s", application.id, application.job_id)
            return ApplicationResponse.model_validate(application)

    def update_application_status(self, application_id: str, status: str) -> ApplicationResponse:
        if status not in APPLICATION_STATUSES:
            raise ValueError(f"Invalid application status: {status}")
        with self._session() as session:
            application = session.get(JobApplication, application_id)
            if application is None:
                raise NotFoundError("Application", application_id)
            self._apply(application, {"status": status})
            session.flush()
            logger.info("Application %s is now %s", application_id, status)
            return ApplicationResponse.model_validate(application)

    # ===========================
    # ANNOUNCEMENTS
    # ===========================

    def get_published_announcements(self) -> List[AnnouncementResponse]:
        query = (
            select(Announcement)
            .where(Announcement.is_published.is_(True))
            .order_by(Announcement.published_at.desc().nulls_last())
        )
        with self._session() as session:
            return [AnnouncementResponse.model_validate(a) for a in session.scalars(query)]

    def get_all_announcements(self) -> List[AnnouncementResponse]:
        query = select(Announcement).order_by(Announcement.created_at.desc())
        with self._session() as session:
            return [AnnouncementResponse.model_validate(a) for a in session.scalars(query)]

    def create_announcement(self, data: AnnouncementCreate) -> AnnouncementResponse:
        with self._session() as session:
            announcement = Announcement(**data.model_dump())
            session.add(announcement)
            session.flush()
            logger.info("Created announcement %s", announcement.id)
            return AnnouncementResponse.model_validate(announcement)

    def update_announcement(self, announcement_id: str, data: Dict[str, Any]) -> AnnouncementResponse:
        with self._session() as session:
            announcement = session.get(Announcement, announcement_id)
            if announcement is None:
                raise NotFoundError("Announcement", announcement_id)
            self._apply(announcement, data)
            session.flush()
            logger.info("Updated announcement %s", announcement_id)
            return AnnouncementResponse.model_validate(announcement)

    def delete_announcement(self, announcement_id: str) -> None:
        with self._session() as session:
            session.execute(delete(Announcement).where(Announcement.id == announcement_id))
        logger.info("Deleted announcement %s", announcement_id)

    # ===========================
    # CONTACT MESSAGES
    # ===========================

    def get_all_contact_messages(self) -> List[ContactMessageResponse]:
        query = select(ContactMessage).order_by(ContactMessage.created_at.desc())
        with self._session() as session:
            return [ContactMessageResponse.model_validate(m) for m in session.scalars(query)]

    def create_contact_message(self, data: ContactMessageCreate) -> ContactMessageResponse:
        with self._session() as session:
            message = ContactMessage(**data.model_dump(), status="unread")
            session.add(message)
            session.flush()
            logger.info("Received contact message %s", message.id)
            return ContactMessageResponse.model_validate(message)

    def update_contact_message_status(self, message_id: str, status: str) -> ContactMessageResponse:
        if status not in CONTACT_STATUSES:
            raise ValueError(f"Invalid contact message status: {status}")
        with self._session() as session:
            message = session.get(ContactMessage, message_id)
            if message is None:
                raise NotFoundError("Contact message", message_id)
            self._apply(message, {"status": status})
            session.flush()
            logger.info("Contact message %s is now %s", message_id, status)
            return ContactMessageResponse.model_validate(message)

    def delete_contact_message(self, message_id: str) -> None:
        with self._session() as session:
            session.execute(delete(ContactMessage).where(ContactMessage.id == message_id))
        logger.info("Deleted contact message %s", message_id)
