import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from aigate.config.settings import Settings
from aigate.database.connection import close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "aigate_test")
    os.environ.setdefault("DB_POOL_TIMEOUT_SECONDS", "3")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS ai_api_usage (
                    id BIGSERIAL PRIMARY KEY,
                    company_id TEXT NOT NULL,
                    endpoint TEXT NOT NULL,
                    model TEXT NOT NULL,
                    input_tokens INTEGER NOT NULL,
                    output_tokens INTEGER NOT NULL,
                    cost_cents DOUBLE PRECISION NOT NULL,
                    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            )
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def company_id(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    """A fresh company id whose usage rows are deleted after the test."""
    cid = f"test-{uuid.uuid4()}"
    yield cid
    db_conn.execute("DELETE FROM ai_api_usage WHERE company_id = %s", (cid,))
    db_conn.commit()
