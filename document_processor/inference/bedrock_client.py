import json
from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    ReadTimeoutError,
)

from document_processor.inference.base import BaseInferenceClient
from document_processor.inference.exceptions import InferenceError, InferenceNetworkError
from document_processor.processor.deadline import Deadline


class BedrockInferenceClient(BaseInferenceClient):
    """Invokes models through the Bedrock runtime InvokeModel API."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def invoke(
        self,
        model_id: str,
        payload: dict[str, Any],
        deadline: Deadline | None = None,
    ) -> dict[str, Any]:
        if deadline is not None:
            deadline.ensure_time_left(f"Bedrock InvokeModel ({model_id})")
        try:
            response = self._client.invoke_model(
                modelId=model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(payload),
            )
            raw_body = response["body"].read()
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code")
            raise InferenceError(f"Bedrock API error: {exc}", code=code) from exc
        except (BotoConnectionError, ReadTimeoutError) as exc:
            raise InferenceNetworkError(f"Bedrock network error: {exc}") from exc
        except BotoCoreError as exc:
            raise InferenceError(f"Bedrock call failed: {exc}") from exc

        try:
            decoded = json.loads(raw_body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InferenceError(f"Bedrock returned a non-JSON body: {exc}") from exc
        if not isinstance(decoded, dict):
            raise InferenceError("Bedrock response body must be an object")
        return decoded
