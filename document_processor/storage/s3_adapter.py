from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from document_processor.processor.deadline import Deadline
from document_processor.storage.base import BaseObjectStore, ObjectHead
from document_processor.storage.exceptions import ObjectNotFoundError, ObjectStoreError

_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3ObjectStore(BaseObjectStore):
    """Object store adapter over an S3 client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def head_object(
        self,
        container: str,
        object_path: str,
        deadline: Deadline | None = None,
    ) -> ObjectHead:
        if deadline is not None:
            deadline.ensure_time_left("S3 HeadObject")
        try:
            response = self._client.head_object(Bucket=container, Key=object_path)
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _NOT_FOUND_CODES:
                raise ObjectNotFoundError(
                    f"Object s3://{container}/{object_path} not found"
                ) from exc
            raise ObjectStoreError(f"S3 HeadObject failed ({code}): {exc}") from exc
        except BotoCoreError as exc:
            raise ObjectStoreError(f"S3 HeadObject failed: {exc}") from exc

        return ObjectHead(exists=True, size_bytes=response.get("ContentLength"))
