"""Demo content loaded into the in-memory store when no database is configured."""
from datetime import datetime, timezone

from companysite.schemas.announcement import AnnouncementResponse
from companysite.schemas.application import ApplicationResponse
from companysite.schemas.contact import ContactMessageResponse
from companysite.schemas.job import JobResponse
from companysite.storage.memory import MemoryStorage


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


DEMO_JOBS = [
    {
        "id": "1",
        "title": "Senior Frontend Developer",
        "department": "Engineering",
        "type": "full-time",
        "location": "Remote",
        "salary_min": 80000,
        "salary_max": 120000,
        "description": "We are looking for a Senior Frontend Developer to join our team. You will be "
                       "responsible for building user-facing features using React and TypeScript.",
        "requirements": "5+ years of experience with React, TypeScript, and modern frontend tools. "
                        "Experience with state management libraries and testing frameworks.",
        "benefits": "Health insurance, 401k matching, flexible work hours, remote work options",
        "skills": ["React", "TypeScript", "JavaScript", "CSS", "HTML"],
        "is_active": True,
        "created_at": _day(2024, 1, 15),
        "updated_at": _day(2024, 1, 15),
    },
    {
        "id": "2",
        "title": "Backend Engineer",
        "department": "Engineering",
        "type": "full-time",
        "location": "New York, NY",
        "salary_min": 90000,
        "salary_max": 140000,
        "description": "Join our backend team to build scalable APIs and services. You'll work with "
                       "Python, PostgreSQL, and cloud technologies.",
        "requirements": "3+ years of backend development experience. Strong knowledge of Python, "
                        "databases, and API design.",
        "benefits": "Competitive salary, stock options, health benefits, learning budget",
        "skills": ["Python", "PostgreSQL", "API Design", "AWS", "Docker"],
        "is_active": True,
        "created_at": _day(2024, 1, 10),
        "updated_at": _day(2024, 1, 10),
    },
]

DEMO_ANNOUNCEMENTS = [
    {
        "id": "1",
        "title": "Company Expansion Announcement",
        "content": "We're excited to announce that we are expanding to new markets! "
                   "We'll be opening offices in three new cities this year.",
        "category": "company-news",
        "is_published": True,
        "published_at": _day(2024, 1, 20),
        "created_at": _day(2024, 1, 20),
        "updated_at": _day(2024, 1, 20),
    },
    {
        "id": "2",
        "title": "New Product Launch",
        "content": "Our latest product feature is now live! This update includes improved "
                   "performance and new collaboration tools.",
        "category": "product-update",
        "is_published": True,
        "published_at": _day(2024, 1, 18),
        "created_at": _day(2024, 1, 18),
        "updated_at": _day(2024, 1, 18),
    },
]

DEMO_APPLICATIONS = [
    {
        "id": "app1",
        "job_id": "1",
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "portfolio_url": "https://johndoe.dev",
        "cover_letter": "I am very interested in this position and believe my skills in React "
                        "and TypeScript make me a great fit for your team.",
        "resume_url": "https://example.com/resumes/john-doe-resume.pdf",
        "status": "pending",
        "created_at": _day(2024, 1, 22),
        "updated_at": _day(2024, 1, 22),
    },
    {
        "id": "app2",
        "job_id": "2",
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane.smith@example.com",
        "portfolio_url": "https://janesmith.portfolio.com",
        "cover_letter": "I have extensive experience in backend development with Python and "
                        "PostgreSQL. I would love to contribute to your team's success.",
        "resume_url": "https://example.com/resumes/jane-smith-resume.pdf",
        "status": "reviewing",
        "created_at": _day(2024, 1, 21),
        "updated_at": _day(2024, 1, 23),
    },
    {
        "id": "app3",
        "job_id": "1",
        "first_name": "Mike",
        "last_name": "Johnson",
        "email": "mike.johnson@example.com",
        "portfolio_url": None,
        "cover_letter": "I am a passionate frontend developer with 6 years of experience. "
                        "I specialize in React and modern JavaScript frameworks.",
        "resume_url": "https://example.com/resumes/mike-johnson-resume.pdf",
        "status": "accepted",
        "created_at": _day(2024, 1, 20),
        "updated_at": _day(2024, 1, 24),
    },
]

DEMO_CONTACT_MESSAGES = [
    {
        "id": "msg1",
        "name": "Alice Johnson",
        "email": "alice.johnson@example.com",
        "subject": "Partnership Inquiry",
        "message": "Hi, I'm interested in exploring potential partnership opportunities with you. "
                   "Could we schedule a call to discuss?",
        "status": "unread",
        "created_at": _day(2024, 1, 25),
        "updated_at": _day(2024, 1, 25),
    },
    {
        "id": "msg2",
        "name": "Bob Wilson",
        "email": "bob.wilson@techcorp.com",
        "subject": "Technical Question",
        "message": "I have some questions about your solutions. Can someone from your "
                   "technical team reach out to me?",
        "status": "read",
        "created_at": _day(2024, 1, 24),
        "updated_at": _day(2024, 1, 24),
    },
]


def load_demo_data(storage: MemoryStorage) -> MemoryStorage:
    storage.jobs.extend(JobResponse(**job) for job in DEMO_JOBS)
    storage.announcements.extend(AnnouncementResponse(**a) for a in DEMO_ANNOUNCEMENTS)
    storage.applications.extend(ApplicationResponse(**a) for a in DEMO_APPLICATIONS)
    storage.contact_messages.extend(ContactMessageResponse(**m) for m in DEMO_CONTACT_MESSAGES)
    return storage
