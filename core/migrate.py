import logging
import sys
from pathlib import Path
from typing import Optional
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url
from config.setting import settings
from core.setup import resolve_database_url
from error import MigrationError

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def _ensure_sqlite_directory(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite" or not parsed.database:
        return
    if parsed.database == ":memory:":
        return
    db_dir = Path(parsed.database).parent
    if not db_dir.exists():
        logger.info(f"Creating database directory: {db_dir}")
        db_dir.mkdir(parents=True, exist_ok=True)


def build_config(url: str) -> Config:
    """Alembic configuration pointing at the bundled revisions"""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # configparser treats % as interpolation
    config.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return config


def run_migrations(database_url: Optional[str] = None) -> None:
    """Bring the schema up to the latest revision.

    Revisions are forward-only. Any failure is raised as MigrationError so
    that startup can abort instead of serving against a partial schema.
    """
    url = resolve_database_url(database_url or settings.DATABASE_URL)
    logger.info("Starting database migration...")
    try:
        _ensure_sqlite_directory(url)
        command.upgrade(build_config(url), "head")
    except Exception as e:
        logger.error(f"Error running migrations: {e}")
        raise MigrationError(f"Database migration failed: {e}") from e
    logger.info("Migrations completed successfully")


def main() -> None:
    """Console entry point: migrate and exit non-zero on failure"""
    from config.logger import setup_logging

    setup_logging()
    try:
        run_migrations()
    except MigrationError:
        sys.exit(1)


if __name__ == "__main__":
    main()
