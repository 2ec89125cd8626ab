import psycopg
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from document_processor.processor.deadline import Deadline
from document_processor.processor.exceptions import RecordStoreError
from document_processor.processor.models import DocumentRecord

_UPSERT_SQL = """
    INSERT INTO document_records (
        document_id, timestamp, storage_container, object_path,
        object_size_bytes, file_extension, document_category, event_name,
        event_source, version, status, extraction_status,
        classification_status, extracted_text, extracted_text_length,
        extraction_result, classification_result, processed_at, completed_at
    )
    VALUES (
        %s, %s, %s, %s, %s, %s, %s, %s, %s, %s,
        %s, %s, %s, %s, %s, %s, %s, %s, %s
    )
    ON CONFLICT (document_id, timestamp) DO UPDATE SET
        status = EXCLUDED.status,
        extraction_status = EXCLUDED.extraction_status,
        classification_status = EXCLUDED.classification_status,
        extracted_text = EXCLUDED.extracted_text,
        extracted_text_length = EXCLUDED.extracted_text_length,
        extraction_result = EXCLUDED.extraction_result,
        classification_result = EXCLUDED.classification_result,
        completed_at = EXCLUDED.completed_at
"""


class DocumentRecordsRepository:
    """Database operations for the document_records table."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def put(self, record: DocumentRecord, deadline: Deadline | None = None) -> None:
        """Upsert one version of a record keyed by (document_id, timestamp).

        Descriptive columns are written once; a repeated put only refreshes the
        processing outcome.

        Raises:
            DeadlineExceededError: if the deadline passed before the write.
            RecordStoreError: if the write fails.
        """
        timeout_ms: int | None = None
        if deadline is not None:
            deadline.ensure_time_left(f"persisting record {record.document_id}")
            remaining = deadline.remaining()
            if remaining is not None:
                timeout_ms = max(1, int(remaining * 1000))

        try:
            with self._pool.connection() as conn:
                with conn.cursor() as cur:
                    if timeout_ms is not None:
                        cur.execute(
                            "SELECT set_config('statement_timeout', %s, true)",
                            (str(timeout_ms),),
                        )
                    cur.execute(_UPSERT_SQL, _row(record))
                conn.commit()
        except psycopg.Error as exc:
            raise RecordStoreError(
                f"Failed to persist record {record.document_id}: {exc}"
            ) from exc


def _row(record: DocumentRecord) -> tuple[object, ...]:
    return (
        record.document_id,
        record.timestamp,
        record.storage_container,
        record.object_path,
        record.object_size_bytes,
        record.file_extension,
        record.document_category,
        record.event_name,
        record.event_source,
        record.version,
        record.status,
        record.extraction_status,
        record.classification_status,
        record.extracted_text,
        record.extracted_text_length,
        Jsonb(record.extraction_result) if record.extraction_result is not None else None,
        Jsonb(record.classification_result)
        if record.classification_result is not None
        else None,
        record.processed_at,
        record.completed_at,
    )
