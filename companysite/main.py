# ========================================
# companysite/main.py
# ========================================

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from companysite import config
from companysite.database import make_engine
from companysite.errors import ConflictError, NotFoundError, StorageError
from companysite.log import get_logger
from companysite.schemas.common import field_errors
from companysite.storage.base import Storage
from companysite.storage.memory import MemoryStorage
from companysite.storage.seed import load_demo_data
from companysite.storage.sql import SqlStorage

# ===========================
# IMPORT ALL ROUTERS
# ===========================

from companysite.routes.announcement import router as announcement_router
from companysite.routes.application import router as application_router
from companysite.routes.auth import router as auth_router
from companysite.routes.contact import router as contact_router
from companysite.routes.job import router as job_router
from companysite.routes.site import VERSION, router as site_router

logger = get_logger(__name__)


def build_storage(database_url: Optional[str] = None, seed: bool = False) -> Storage:
    """Pick the store once, from configuration."""
    if database_url:
        storage = SqlStorage(make_engine(database_url, echo=config.SQL_ECHO))
        storage.create_tables()
        logger.info("Using SQL storage (%s)", storage.engine.url.render_as_string(hide_password=True))
        return storage

    logger.warning("DATABASE_URL not set, using in-memory storage")
    storage = MemoryStorage()
    if seed:
        load_demo_data(storage)
        logger.info("Loaded demo data into in-memory storage")
    return storage


# ===========================
# ERROR HANDLERS
# ===========================

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [error.model_dump() for error in field_errors(exc.errors())]
    return JSONResponse(status_code=400, content={"message": "Invalid request data", "errors": errors})


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": str(exc)})


async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=409, content={"message": str(exc)})


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# ===========================
# CREATE FASTAPI APP
# ===========================

def create_app(storage: Optional[Storage] = None) -> FastAPI:
    if storage is None:
        storage = build_storage(config.DATABASE_URL, seed=config.SEED_DEMO_DATA)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        storage.close()

    app = FastAPI(
        title="Company Site API",
        description="Jobs, applications, announcements and contact messages for the company website",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # ===========================
    # REGISTER ROUTERS
    # ===========================

    app.include_router(site_router)
    app.include_router(auth_router)
    app.include_router(job_router)
    app.include_router(application_router)
    app.include_router(announcement_router)
    app.include_router(contact_router)

    return app


def run():
    import uvicorn

    uvicorn.run("companysite.main:create_app", factory=True, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
