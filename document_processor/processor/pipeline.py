from abc import ABC, abstractmethod
from dataclasses import dataclass

from document_processor.processor.deadline import Deadline
from document_processor.processor.models import (
    DocumentRecord,
    FieldExtractionResult,
    Notification,
    TextExtractionResult,
)


@dataclass(slots=True)
class PipelineContext:
    notification: Notification
    deadline: Deadline
    record: DocumentRecord | None = None
    supported: bool = True
    extraction: TextExtractionResult | None = None
    classification: FieldExtractionResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
