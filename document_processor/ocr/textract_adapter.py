from collections.abc import Sequence
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from document_processor.ocr.base import BaseOcrService
from document_processor.ocr.exceptions import OcrError
from document_processor.ocr.models import OcrFragment
from document_processor.processor.deadline import Deadline


class TextractOcrService(BaseOcrService):
    """OCR adapter built on the synchronous Textract AnalyzeDocument API."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def analyze(
        self,
        container: str,
        object_path: str,
        feature_types: Sequence[str],
        deadline: Deadline | None = None,
    ) -> list[OcrFragment]:
        if deadline is not None:
            deadline.ensure_time_left("Textract AnalyzeDocument")
        try:
            response = self._client.analyze_document(
                Document={"S3Object": {"Bucket": container, "Name": object_path}},
                FeatureTypes=list(feature_types),
            )
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "Unknown")
            raise OcrError(f"Textract error ({code}): {exc}") from exc
        except BotoCoreError as exc:
            raise OcrError(f"Textract call failed: {exc}") from exc

        return [
            OcrFragment(
                block_type=block.get("BlockType", ""),
                text=block.get("Text"),
                confidence=block.get("Confidence"),
            )
            for block in response.get("Blocks", [])
        ]
