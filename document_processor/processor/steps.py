from dataclasses import replace

from document_processor.database.repositories.document_records_repository import (
    DocumentRecordsRepository,
)
from document_processor.logging.logger import Log
from document_processor.processor.clock import Clock, isoformat, utc_now
from document_processor.processor.documents import (
    build_document_id,
    categorize_document,
    file_extension,
    is_supported_for_extraction,
)
from document_processor.processor.field_extraction import FieldExtractionStage
from document_processor.processor.models import (
    DocumentRecord,
    FieldExtractionResult,
    RecordStatus,
    StageStatus,
    TextExtractionResult,
)
from document_processor.processor.pipeline import PipelineContext, PipelineStep
from document_processor.processor.text_extraction import TextExtractionStage
from document_processor.storage.base import BaseObjectStore


def overall_status(extraction_status: StageStatus, classification_status: StageStatus) -> RecordStatus:
    """``completed`` if either stage produced a usable result, else ``partial``."""
    if extraction_status == "completed" or classification_status == "completed":
        return "completed"
    return "partial"


def _require_record(context: PipelineContext) -> DocumentRecord:
    if context.record is None:
        raise ValueError("PipelineContext.record must be set before this step")
    return context.record


class InitializeRecordStep(PipelineStep):
    def __init__(self, record_repo: DocumentRecordsRepository, clock: Clock = utc_now) -> None:
        self._record_repo = record_repo
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        notification = context.notification
        timestamp = isoformat(self._clock())
        extension = file_extension(notification.object_path)
        record = DocumentRecord(
            document_id=build_document_id(notification.container, notification.object_path),
            timestamp=timestamp,
            storage_container=notification.container,
            object_path=notification.object_path,
            object_size_bytes=notification.object_size_bytes,
            file_extension=extension,
            document_category=categorize_document(extension),
            event_name=notification.event_type,
            processed_at=timestamp,
        )
        self._record_repo.put(record, deadline=context.deadline)
        context.record = record
        Log.info(
            f"Record initialized: {record.document_category}, "
            f"{record.object_size_bytes if record.object_size_bytes is not None else 'unknown'} bytes"
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(
        self,
        object_store: BaseObjectStore,
        stage: TextExtractionStage,
        clock: Clock = utc_now,
    ) -> None:
        self._object_store = object_store
        self._stage = stage
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        record = _require_record(context)
        if not is_supported_for_extraction(record.file_extension):
            Log.info(f"Skipping processing for file type: {record.file_extension}")
            context.supported = False
            context.extraction = TextExtractionResult(
                status="skipped",
                note=f"File type {record.file_extension} not supported for OCR processing",
                processed_at=isoformat(self._clock()),
            )
            return context

        self._object_store.head_object(
            record.storage_container, record.object_path, deadline=context.deadline
        )
        context.extraction = self._stage.run(
            record.storage_container,
            record.object_path,
            record.object_size_bytes,
            deadline=context.deadline,
        )
        Log.info(f"Text extraction {context.extraction.status}")
        return context


class ClassifyStep(PipelineStep):
    def __init__(self, stage: FieldExtractionStage, clock: Clock = utc_now) -> None:
        self._stage = stage
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        record = _require_record(context)
        if not context.supported:
            context.classification = FieldExtractionResult(
                status="skipped",
                note=f"File type {record.file_extension} not supported for LLM processing",
                processed_at=isoformat(self._clock()),
            )
            return context

        text = context.extraction.text if context.extraction is not None else None
        context.classification = self._stage.run(text, deadline=context.deadline)
        Log.info(f"Classification {context.classification.status}")
        return context


class FinalizeRecordStep(PipelineStep):
    def __init__(self, record_repo: DocumentRecordsRepository, clock: Clock = utc_now) -> None:
        self._record_repo = record_repo
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        record = _require_record(context)
        if context.extraction is None or context.classification is None:
            raise ValueError("Both stages must have run before finalization")

        extraction = context.extraction
        classification = context.classification
        text = extraction.text if extraction.status == "completed" else None
        final = replace(
            record,
            status=overall_status(extraction.status, classification.status),
            extraction_status=extraction.status,
            classification_status=classification.status,
            extracted_text=text,
            extracted_text_length=len(text) if text else 0,
            extraction_result=extraction.details(),
            classification_result=classification.details(),
            completed_at=isoformat(self._clock()),
        )
        self._record_repo.put(final, deadline=context.deadline)
        context.record = final
        Log.info(
            f"Record finalized as {final.status} "
            f"(extraction={final.extraction_status}, "
            f"classification={final.classification_status})"
        )
        return context
