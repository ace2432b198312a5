import logging
from typing import Optional
from fastapi import Request
from config.setting import settings
from core.setup import DatabaseSetup
from service.calendar import CalendarExportAdapter
from service.storage import MemStorage, SQLStorage, StorageInterface
from util.enum import StorageBackend

logger = logging.getLogger(__name__)


def build_storage(
    backend: Optional[str] = None, database_url: Optional[str] = None
) -> StorageInterface:
    """Construct the configured storage backend.

    The SQL backend expects migrations to have run already.
    """
    backend = StorageBackend(backend or settings.STORAGE_BACKEND)
    if backend is StorageBackend.memory:
        logger.info("Using in-memory storage")
        return MemStorage()
    database = DatabaseSetup(database_url)
    logger.info(f"Using SQL storage at {database.url}")
    return SQLStorage(database)


def get_storage(request: Request) -> StorageInterface:
    return request.app.state.storage


def get_calendar_adapter() -> CalendarExportAdapter:
    return CalendarExportAdapter()
