"""Validation of inbound "new document" events."""

import math
from typing import Any

from document_processor.processor.models import Notification

EXPECTED_SOURCE = "aws.s3"
OBJECT_CREATED = "Object Created"


def parse_notification(event: Any) -> Notification | None:
    """Return a Notification for an S3 object-creation event, else ``None``.

    ``None`` is the "not processed" outcome and is not an error.
    """
    if not isinstance(event, dict):
        return None
    if event.get("source") != EXPECTED_SOURCE or event.get("detail-type") != OBJECT_CREATED:
        return None

    detail = event.get("detail")
    if not isinstance(detail, dict):
        return None
    bucket = detail.get("bucket")
    obj = detail.get("object")
    if not isinstance(bucket, dict) or not isinstance(obj, dict):
        return None
    container = bucket.get("name")
    object_path = obj.get("key")
    if not container or not isinstance(container, str):
        return None
    if not object_path or not isinstance(object_path, str):
        return None

    return Notification(
        event_source=EXPECTED_SOURCE,
        event_type=OBJECT_CREATED,
        container=container,
        object_path=object_path,
        object_size_bytes=_parse_size(obj.get("size")),
    )


def _parse_size(raw: Any) -> int | None:
    # bool is an int subclass; a flag is not a size
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        return int(raw)
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    return None
