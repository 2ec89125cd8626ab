import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from document_processor.config.settings import Settings
from document_processor.database.connection import create_pool

SCHEMA_PATH = (
    Path(__file__).resolve().parents[2] / "document_processor" / "database" / "schema.sql"
)


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "document_processor_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[ConnectionPool, None, None]:
    pool = create_pool(test_settings)
    try:
        pool.wait(timeout=5.0)
        with pool.connection() as conn:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        pool.close()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    try:
        yield pool
    finally:
        pool.close()


@pytest.fixture
def db_conn(
    integration_pool: ConnectionPool,
) -> Generator[psycopg.Connection[Any], None, None]:
    with integration_pool.connection() as conn:
        yield conn


@pytest.fixture
def document_id(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    """Unique document id whose rows are removed after the test."""
    value = f"integration-bucket/{uuid.uuid4()}.pdf"
    yield value
    with db_conn.cursor() as cur:
        cur.execute("DELETE FROM document_records WHERE document_id = %s", (value,))
    db_conn.commit()
