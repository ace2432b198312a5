import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, responses
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from fastapi import exceptions as exc
from sqlalchemy.exc import IntegrityError, DBAPIError
from api.v1.router import (
    users,
    study_plans,
    study_tasks,
    study_weeks,
    calendar,
)
import handler as hlp
from config.logger import setup_logging
from config.setting import settings
from core.dependencies import build_storage
from core.migrate import run_migrations
from error import ServerError
from util.enum import StorageBackend

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema must be current before the first query; a MigrationError
    # propagates and aborts startup
    if StorageBackend(settings.STORAGE_BACKEND) is StorageBackend.sql:
        run_migrations(settings.DATABASE_URL)
    app.state.storage = build_storage()
    logger.info("Study plan API started")
    yield
    database = getattr(app.state.storage, "database", None)
    if database is not None:
        database.dispose()


app = FastAPI(
    title="Study Plan API",
    version="1.0.0",
    description="Study plans, tasks and calendar weeks",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


app.add_exception_handler(ValueError, hlp.value_error_handler)
app.add_exception_handler(ValidationError, hlp.validation_error_handler)
app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
app.add_exception_handler(exc.HTTPException, hlp.validation_http_exceptions_handler)
app.add_exception_handler(IntegrityError, hlp.db_error_handler)
app.add_exception_handler(DBAPIError, hlp.db_error_handler)
app.add_exception_handler(ServerError, hlp.server_error_handler)


app.include_router(users, prefix=settings.API_PREFIX)
app.include_router(study_plans, prefix=settings.API_PREFIX)
app.include_router(study_tasks, prefix=settings.API_PREFIX)
app.include_router(study_weeks, prefix=settings.API_PREFIX)
app.include_router(calendar, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
def redirect_to_docs():
    return responses.RedirectResponse("/docs")
