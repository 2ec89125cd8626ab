"""OCR stage: plain text plus mean line confidence for one stored document."""

from document_processor.logging.logger import Log
from document_processor.ocr.base import BaseOcrService
from document_processor.ocr.models import OcrFragment
from document_processor.processor.clock import Clock, isoformat, utc_now
from document_processor.processor.deadline import Deadline
from document_processor.processor.models import TextExtractionResult

DEFAULT_MAX_OBJECT_SIZE_BYTES = 10_000_000
FEATURE_TYPES: tuple[str, ...] = ("TABLES", "FORMS")
LINE_BLOCK = "LINE"


class TextExtractionStage:
    """Runs synchronous OCR and classifies the outcome.

    Never raises: OCR failures are an expected outcome and come back as
    ``status="failed"``.
    """

    def __init__(
        self,
        ocr: BaseOcrService,
        *,
        max_object_size_bytes: int = DEFAULT_MAX_OBJECT_SIZE_BYTES,
        clock: Clock = utc_now,
    ) -> None:
        self._ocr = ocr
        self._max_object_size_bytes = max_object_size_bytes
        self._clock = clock

    def run(
        self,
        container: str,
        object_path: str,
        object_size_bytes: int | None,
        deadline: Deadline | None = None,
    ) -> TextExtractionResult:
        if object_size_bytes is not None and object_size_bytes >= self._max_object_size_bytes:
            Log.info(
                f"Skipping OCR for {object_path}: {object_size_bytes} bytes is too large "
                "for synchronous processing"
            )
            return TextExtractionResult(
                status="skipped",
                note=(
                    "Skipped - file too large for synchronous processing "
                    f"(>= {self._max_object_size_bytes} bytes)"
                ),
                processed_at=self._now(),
            )

        try:
            fragments = self._ocr.analyze(
                container, object_path, FEATURE_TYPES, deadline=deadline
            )
        except Exception as exc:
            Log.warning(f"OCR failed for {object_path}: {exc}")
            return TextExtractionResult(
                status="failed",
                error=str(exc),
                note="Expected failure for multi-page documents",
                processed_at=self._now(),
            )

        lines = _text_lines(fragments)
        text = "\n".join(line.text or "" for line in lines)
        confidence = (
            sum(line.confidence or 0.0 for line in lines) / len(lines) if lines else 0.0
        )
        Log.info(f"OCR completed: {len(lines)} lines extracted from {len(fragments)} blocks")
        return TextExtractionResult(
            status="completed",
            text=text,
            confidence=confidence,
            fragment_count=len(lines),
            blocks_found=len(fragments),
            processed_at=self._now(),
        )

    def _now(self) -> str:
        return isoformat(self._clock())


def _text_lines(fragments: list[OcrFragment]) -> list[OcrFragment]:
    return [
        fragment
        for fragment in fragments
        if fragment.block_type == LINE_BLOCK and fragment.text and fragment.text.strip()
    ]
