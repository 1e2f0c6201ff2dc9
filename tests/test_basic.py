"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds as expected and settings resolve the database URL.
"""

import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

from taskapp.cli import build_parser, main
from taskapp.core.config import Settings, settings
from taskapp.interfaces.tasks.dependencies import get_engine, get_session_factory
from taskapp.main import app
from taskapp.shared.logging import configure_logging

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body


class TestSettings:
    """Tests for Settings.get_database_url."""

    def test_explicit_database_url_wins(self) -> None:
        settings = Settings(database_url="sqlite:///other.db", postgres_host="db")
        assert settings.get_database_url() == "sqlite:///other.db"

    def test_postgres_dsn_from_parts(self) -> None:
        settings = Settings(
            database_url=None,
            postgres_host="db",
            postgres_user="u",
            postgres_password="p",
            postgres_db="tasks",
        )
        assert settings.get_database_url() == "postgresql+psycopg2://u:p@db:5432/tasks"

    def test_sqlite_fallback(self) -> None:
        settings = Settings(database_url=None, postgres_host=None)
        assert settings.get_database_url() == "sqlite:///./tasks.db"


class TestLogging:
    """Tests for configure_logging."""

    def test_level_applied(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("INFO")

    def test_sql_echo_enables_engine_logger(self) -> None:
        configure_logging("INFO", sql_echo=True)
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
        configure_logging("INFO")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO


class TestCli:
    """Tests for the command line interface."""

    def test_serve_defaults(self) -> None:
        args = build_parser().parse_args(["serve"])
        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.reload is False

    def test_init_db_command(self) -> None:
        args = build_parser().parse_args(["init-db"])
        assert args.command == "init-db"

    def test_init_db_creates_tasks_table(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """init-db creates the tasks table in the configured database."""
        url = f"sqlite:///{tmp_path / 'tasks.db'}"
        monkeypatch.setattr(settings, "database_url", url)
        get_engine.cache_clear()
        get_session_factory.cache_clear()
        try:
            main(["init-db"])
        finally:
            get_engine().dispose()
            get_engine.cache_clear()
            get_session_factory.cache_clear()

        engine = create_engine(url)
        try:
            assert inspect(engine).has_table("tasks")
        finally:
            engine.dispose()
