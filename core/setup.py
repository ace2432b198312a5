from typing import Any, Optional
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import declarative_base, sessionmaker
from config.setting import settings


class _ModelBase:
    def to_dict(self) -> dict:
        """Column values keyed by attribute name"""
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self).mapper.column_attrs
        }


Base = declarative_base(cls=_ModelBase)


def resolve_database_url(url: str) -> str:
    """Translate a `file:<path>` location into a SQLAlchemy SQLite URL.

    Any other URL is assumed to already be understood by SQLAlchemy.
    """
    if url.startswith("file:"):
        return f"sqlite:///{url[len('file:'):]}"
    return url


class DatabaseSetup:
    """Owns the engine and session factory for one database location"""

    def __init__(self, url: Optional[str] = None) -> None:
        self._url = resolve_database_url(url or settings.DATABASE_URL)

        engine_kwargs = {
            "pool_pre_ping": True,  # Verify connections before use
            "echo": settings.TESTING,
        }
        if self._url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self._engine = create_engine(self._url, **engine_kwargs)
        self._session_maker = sessionmaker(
            bind=self._engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    def get_session(self) -> sessionmaker:
        """Grant session

            This method returns the database
            session factory
        Returns:
            object: database session factory
        """
        return self._session_maker

    @property
    def url(self) -> str:
        return self._url

    @property
    def get_engine(self) -> Any:
        """Grant engine
            This method returns the
            database engine

        Returns:
            object: database engine
        """
        return self._engine

    def dispose(self) -> None:
        self._engine.dispose()
