from dataclasses import dataclass, field
from typing import Any, Literal

StageStatus = Literal["skipped", "completed", "failed"]
RecordStatus = Literal["processing", "completed", "partial"]


@dataclass(frozen=True)
class Notification:
    """A validated "new document" event."""

    event_source: str
    event_type: str
    container: str
    object_path: str
    object_size_bytes: int | None = None


@dataclass(frozen=True)
class DocumentRecord:
    """State of one processing run, as written to the record store.

    The record is replaced, never mutated: the orchestrator writes an initial
    version with ``status="processing"`` and one final version under the same
    (document_id, timestamp) key.
    """

    document_id: str
    timestamp: str
    storage_container: str
    object_path: str
    object_size_bytes: int | None
    file_extension: str
    document_category: str
    event_name: str
    processed_at: str
    status: RecordStatus = "processing"
    event_source: str = "eventbridge"
    version: str = "1.0"
    extraction_status: StageStatus | None = None
    classification_status: StageStatus | None = None
    extracted_text: str | None = None
    extracted_text_length: int = 0
    extraction_result: dict[str, Any] | None = None
    classification_result: dict[str, Any] | None = None
    completed_at: str | None = None


@dataclass(frozen=True)
class TextExtractionResult:
    """Outcome of the OCR stage."""

    status: StageStatus
    text: str | None = None
    confidence: float = 0.0
    fragment_count: int = 0
    blocks_found: int = 0
    note: str | None = None
    error: str | None = None
    processed_at: str = ""

    def details(self) -> dict[str, Any]:
        """JSON-ready payload persisted as ``extraction_result``."""
        if self.status == "completed":
            return {
                "service": "textract-analyze",
                "api": "AnalyzeDocument",
                "blocksFound": self.blocks_found,
                "linesExtracted": self.fragment_count,
                "confidence": self.confidence,
                "processedAt": self.processed_at,
            }
        payload: dict[str, Any] = {"service": "textract", "processedAt": self.processed_at}
        if self.error is not None:
            payload["error"] = self.error
        if self.note is not None:
            payload["note"] = self.note
        return payload


@dataclass(frozen=True)
class FieldExtractionResult:
    """Outcome of the language-model classification stage."""

    status: StageStatus
    classification: dict[str, Any] | None = None
    fields: dict[str, Any] = field(default_factory=dict)
    raw_response_text: str | None = None
    provider_family: str | None = None
    model_id: str | None = None
    note: str | None = None
    error_message: str | None = None
    error_code: str | None = None
    processed_at: str = ""

    def details(self) -> dict[str, Any]:
        """JSON-ready payload persisted as ``classification_result``."""
        payload: dict[str, Any] = {"service": "llm", "processedAt": self.processed_at}
        if self.provider_family is not None:
            payload["providerFamily"] = self.provider_family
            payload["modelId"] = self.model_id
        if self.status == "completed":
            payload["documentClassification"] = self.classification
            payload["extractedData"] = self.fields
            payload["rawResponse"] = self.raw_response_text
        if self.error_message is not None:
            payload["error"] = self.error_message
            payload["errorCode"] = self.error_code
        if self.note is not None:
            payload["note"] = self.note
        return payload
