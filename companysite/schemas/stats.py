from companysite.schemas.common import CamelModel


class StatsResponse(CamelModel):
    jobs: int
    announcements: int
    applications: int
    message: str
