"""Tests for schema migrations."""
from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect

import core.migrate as migrate
from error import MigrationError


def _tables(url: str) -> set:
    engine = create_engine(url)
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_migrations_create_schema(tmp_path: Path) -> None:
    url = f"sqlite:///{tmp_path / 'app.db'}"

    migrate.run_migrations(url)

    assert {"users", "study_plans", "study_tasks", "study_weeks", "alembic_version"} <= _tables(url)


def test_migrations_can_run_twice(tmp_path: Path) -> None:
    url = f"sqlite:///{tmp_path / 'app.db'}"

    migrate.run_migrations(url)
    migrate.run_migrations(url)

    assert "study_plans" in _tables(url)


def test_file_url_creates_missing_directory(tmp_path: Path) -> None:
    db_path = tmp_path / "nested" / "dir" / "app.db"

    migrate.run_migrations(f"file:{db_path}")

    assert db_path.exists()


def test_failure_raises_migration_error(tmp_path: Path, monkeypatch) -> None:
    def broken_upgrade(config, revision):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(migrate.command, "upgrade", broken_upgrade)

    with pytest.raises(MigrationError) as exc_info:
        migrate.run_migrations(f"sqlite:///{tmp_path / 'app.db'}")

    assert "disk on fire" in exc_info.value.msg


def test_cli_exits_non_zero_on_failure(monkeypatch) -> None:
    def failing(database_url=None):
        raise MigrationError()

    monkeypatch.setattr(migrate, "run_migrations", failing)

    with pytest.raises(SystemExit) as exc_info:
        migrate.main()

    assert exc_info.value.code == 1
