from dataclasses import replace
from typing import Any

import psycopg
import pytest
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from document_processor.database.repositories.document_records_repository import (
    DocumentRecordsRepository,
)
from document_processor.processor.deadline import Deadline
from document_processor.processor.models import DocumentRecord


def _initial(document_id: str) -> DocumentRecord:
    return DocumentRecord(
        document_id=document_id,
        timestamp="2025-01-10T12:00:00.000Z",
        storage_container="integration-bucket",
        object_path=document_id.split("/", 1)[1],
        object_size_bytes=50_000,
        file_extension="pdf",
        document_category="pdf-document",
        event_name="Object Created",
        processed_at="2025-01-10T12:00:00.000Z",
    )


def _fetch(db_conn: psycopg.Connection[Any], document_id: str) -> list[dict[str, Any]]:
    with db_conn.cursor(row_factory=dict_row) as cur:
        cur.execute(
            "SELECT * FROM document_records WHERE document_id = %s",
            (document_id,),
        )
        rows = cur.fetchall()
    db_conn.commit()
    return rows


@pytest.mark.integration
class TestDocumentRecordsRepositoryPut:
    def test_initial_put_creates_processing_row(
        self,
        integration_pool: ConnectionPool,
        db_conn: psycopg.Connection[Any],
        document_id: str,
    ) -> None:
        DocumentRecordsRepository(integration_pool).put(_initial(document_id))

        rows = _fetch(db_conn, document_id)
        assert len(rows) == 1
        assert rows[0]["status"] == "processing"
        assert rows[0]["extraction_result"] is None
        assert rows[0]["completed_at"] is None

    def test_final_put_replaces_outcome_under_same_key(
        self,
        integration_pool: ConnectionPool,
        db_conn: psycopg.Connection[Any],
        document_id: str,
    ) -> None:
        repo = DocumentRecordsRepository(integration_pool)
        initial = _initial(document_id)
        repo.put(initial)
        repo.put(
            replace(
                initial,
                status="completed",
                extraction_status="completed",
                classification_status="completed",
                extracted_text="LAB REPORT",
                extracted_text_length=10,
                extraction_result={"service": "textract-analyze", "linesExtracted": 1},
                classification_result={
                    "service": "llm",
                    "documentClassification": {"primaryType": "lab_report"},
                },
                completed_at="2025-01-10T12:00:05.000Z",
            ),
            deadline=Deadline.after(30),
        )

        rows = _fetch(db_conn, document_id)
        assert len(rows) == 1
        row = rows[0]
        assert row["status"] == "completed"
        assert row["extracted_text"] == "LAB REPORT"
        assert row["extracted_text_length"] == 10
        assert row["extraction_result"]["linesExtracted"] == 1
        assert row["classification_result"]["documentClassification"] == {
            "primaryType": "lab_report"
        }
        assert row["completed_at"] == "2025-01-10T12:00:05.000Z"
