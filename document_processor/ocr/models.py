from dataclasses import dataclass


@dataclass(frozen=True)
class OcrFragment:
    """One block returned by the OCR service."""

    block_type: str
    text: str | None = None
    confidence: float | None = None
