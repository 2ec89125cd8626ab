import json
from collections.abc import Sequence
from typing import Any

import boto3
from botocore.config import Config
from psycopg_pool import ConnectionPool

from document_processor.config.settings import Settings
from document_processor.database.connection import create_pool
from document_processor.database.repositories.document_records_repository import (
    DocumentRecordsRepository,
)
from document_processor.inference.factory import InferenceClientFactory
from document_processor.logging.logger import Log
from document_processor.ocr.textract_adapter import TextractOcrService
from document_processor.processor.clock import Clock, utc_now
from document_processor.processor.deadline import Deadline
from document_processor.processor.documents import build_document_id
from document_processor.processor.field_extraction import FieldExtractionStage
from document_processor.processor.notification import parse_notification
from document_processor.processor.pipeline import PipelineContext, PipelineStep
from document_processor.processor.steps import (
    ClassifyStep,
    ExtractTextStep,
    FinalizeRecordStep,
    InitializeRecordStep,
)
from document_processor.processor.text_extraction import TextExtractionStage
from document_processor.providers.selector import ProviderSelector
from document_processor.storage.s3_adapter import S3ObjectStore


class Processor:
    """Orchestrates one processing run per "new document" notification.

    Pipeline: initialize record -> extract text -> classify -> finalize record.
    ``process_notification`` never raises; every outcome is a
    ``{"statusCode", "body"}`` response.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = tuple(steps)

    def process_notification(
        self,
        event: Any,
        deadline: Deadline | None = None,
    ) -> dict[str, Any]:
        notification = parse_notification(event)
        if notification is None:
            Log.info("Event not recognized as an S3 object-creation event")
            return _response(
                200,
                {
                    "message": "Event received but not processed",
                    "eventSource": event.get("source") if isinstance(event, dict) else None,
                },
            )

        context = PipelineContext(
            notification=notification,
            deadline=deadline if deadline is not None else Deadline.none(),
        )
        document_id = build_document_id(notification.container, notification.object_path)
        with Log.document_context(document_id):
            Log.info(f"Processing s3://{notification.container}/{notification.object_path}")
            try:
                for step in self._steps:
                    context = step.run(context)
                summary = _summary(context)
            except Exception as exc:
                Log.error(f"Error processing document: {exc}")
                return _response(
                    500,
                    {"message": "Error processing document", "error": str(exc)},
                )

        return _response(200, summary)


def _summary(context: PipelineContext) -> dict[str, Any]:
    record = context.record
    if record is None:
        raise ValueError("PipelineContext.record must be set after a completed run")
    return {
        "message": "Document processed with OCR and LLM successfully",
        "documentId": record.document_id,
        "fileName": record.object_path,
        "documentCategory": record.document_category,
        "extractionStatus": record.extraction_status,
        "classificationStatus": record.classification_status,
        "extractedTextLength": record.extracted_text_length,
        "timestamp": record.timestamp,
    }


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body)}


def build_processor(
    settings: Settings,
    *,
    pool: ConnectionPool | None = None,
    session: boto3.session.Session | None = None,
    clock: Clock = utc_now,
) -> Processor:
    """Build a Processor with all external clients constructed explicitly."""
    if session is None:
        session = boto3.session.Session(region_name=settings.aws_region)
    aws_config = Config(
        connect_timeout=settings.aws_connect_timeout_seconds,
        read_timeout=settings.aws_read_timeout_seconds,
    )

    record_repo = DocumentRecordsRepository(pool if pool is not None else create_pool(settings))
    object_store = S3ObjectStore(session.client("s3", config=aws_config))
    ocr = TextractOcrService(session.client("textract", config=aws_config))
    clients = InferenceClientFactory.create(
        settings, session.client("bedrock-runtime", config=aws_config)
    )
    selector = ProviderSelector.from_settings(settings, available_backends=clients)

    text_stage = TextExtractionStage(
        ocr,
        max_object_size_bytes=settings.ocr_max_object_size_bytes,
        clock=clock,
    )
    field_stage = FieldExtractionStage(
        selector=selector,
        provider_identifier=settings.llm_provider,
        clients=clients,
        clock=clock,
    )
    steps: list[PipelineStep] = [
        InitializeRecordStep(record_repo, clock),
        ExtractTextStep(object_store, text_stage, clock),
        ClassifyStep(field_stage, clock),
        FinalizeRecordStep(record_repo, clock),
    ]
    return Processor(steps)
