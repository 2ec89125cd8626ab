from abc import ABC, abstractmethod
from collections.abc import Sequence

from document_processor.ocr.models import OcrFragment
from document_processor.processor.deadline import Deadline


class BaseOcrService(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def analyze(
        self,
        container: str,
        object_path: str,
        feature_types: Sequence[str],
        deadline: Deadline | None = None,
    ) -> list[OcrFragment]:
        """Analyze a stored document in place.

        Args:
            container: Storage container (bucket) holding the document.
            object_path: Path (key) of the document inside the container.
            feature_types: Structured detections to request, e.g. TABLES, FORMS.
            deadline: Caller deadline; no call is started once it has passed.

        Returns:
            Fragments in the order the service returned them.

        Raises:
            OcrError: on any failure.
        """
