from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

FIXED_NOW = datetime(2025, 1, 10, 12, 0, 0, tzinfo=timezone.utc)
FIXED_NOW_ISO = "2025-01-10T12:00:00.000Z"


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture()
def make_event() -> Callable[..., dict[str, Any]]:
    """Factory for EventBridge S3 "Object Created" events."""

    def _make(
        key: str = "uploads/lab-report.pdf",
        size: object = 50_000,
        bucket: str = "document-uploads",
    ) -> dict[str, Any]:
        obj: dict[str, Any] = {"key": key}
        if size is not None:
            obj["size"] = size
        return {
            "source": "aws.s3",
            "detail-type": "Object Created",
            "detail": {"bucket": {"name": bucket}, "object": obj},
        }

    return _make


@pytest.fixture()
def classification_json() -> str:
    return (
        '{"documentClassification": {"primaryType": "lab_report", "confidence": 0.93, '
        '"reasoning": "Contains test results"}, '
        '"extractedFields": {"firstName": "John", "lastName": "Smith", '
        '"dateOfBirth": "01/15/1980", "sex": "M"}}'
    )
