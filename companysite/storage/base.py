"""Data operations available to the rest of the site.

Every store (SQL-backed or in-memory) implements this contract with the
same filtering, ordering and delete rules, so request handlers never need
to know which one they are talking to.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from companysite.schemas.announcement import AnnouncementCreate, AnnouncementResponse
from companysite.schemas.application import ApplicationCreate, ApplicationResponse, ApplicationWithJob
from companysite.schemas.contact import ContactMessageCreate, ContactMessageResponse
from companysite.schemas.job import JobCreate, JobResponse
from companysite.schemas.user import UserResponse, UserUpsert


class Storage(ABC):
    name = "base"

    # ===========================
    # USERS
    # ===========================

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserResponse]:
        pass

    @abstractmethod
    def upsert_user(self, data: UserUpsert) -> UserResponse:
        """Insert the user, or merge the supplied fields into the existing one.

        updated_at is refreshed either way.
        """

    # ===========================
    # JOBS
    # ===========================

    @abstractmethod
    def get_all_jobs(self) -> List[JobResponse]:
        """Active jobs only, newest first."""

    @abstractmethod
    def get_job_by_id(self, job_id: str) -> Optional[JobResponse]:
        """Any job, active or not."""

    @abstractmethod
    def create_job(self, data: JobCreate) -> JobResponse:
        pass

    @abstractmethod
    def update_job(self, job_id: str, data: Dict[str, Any]) -> JobResponse:
        """Apply a partial update. Raises NotFoundError for an unknown id."""

    @abstractmethod
    def delete_job(self, job_id: str) -> None:
        """Soft delete: the job is marked inactive. Unknown ids are ignored."""

    # ===========================
    # APPLICATIONS
    # ===========================

    @abstractmethod
    def get_applications_for_job(self, job_id: str) -> List[ApplicationResponse]:
        pass

    @abstractmethod
    def get_all_applications(self) -> List[ApplicationWithJob]:
        """Every application with the title of its job, newest first."""

    @abstractmethod
    def create_job_application(self, data: ApplicationCreate) -> ApplicationResponse:
        """Status always starts as pending. Raises NotFoundError if the job does not exist."""

    @abstractmethod
    def update_application_status(self, application_id: str, status: str) -> ApplicationResponse:
        pass

    # ===========================
    # ANNOUNCEMENTS
    # ===========================

    @abstractmethod
    def get_published_announcements(self) -> List[AnnouncementResponse]:
        """Published only, by published_at descending with undated ones last."""

    @abstractmethod
    def get_all_announcements(self) -> List[AnnouncementResponse]:
        pass

    @abstractmethod
    def create_announcement(self, data: AnnouncementCreate) -> AnnouncementResponse:
        pass

    @abstractmethod
    def update_announcement(self, announcement_id: str, data: Dict[str, Any]) -> AnnouncementResponse:
        pass

    @abstractmethod
    def delete_announcement(self, announcement_id: str) -> None:
        """Hard delete. Unknown ids are ignored."""

    # ===========================
    # CONTACT MESSAGES
    # ===========================

    @abstractmethod
    def get_all_contact_messages(self) -> List[ContactMessageResponse]:
        pass

    @abstractmethod
    def create_contact_message(self, data: ContactMessageCreate) -> ContactMessageResponse:
        """Status always starts as unread."""

    @abstractmethod
    def update_contact_message_status(self, message_id: str, status: str) -> ContactMessageResponse:
        pass

    @abstractmethod
    def delete_contact_message(self, message_id: str) -> None:
        pass

    def close(self) -> None:
        """Release whatever the store holds open."""
