from typing import Any

import httpx
import openai

from document_processor.inference.base import BaseInferenceClient
from document_processor.inference.exceptions import InferenceError, InferenceNetworkError
from document_processor.processor.deadline import Deadline


class OpenAIInferenceClient(BaseInferenceClient):
    """Inference client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def invoke(
        self,
        model_id: str,
        payload: dict[str, Any],
        deadline: Deadline | None = None,
    ) -> dict[str, Any]:
        timeout: float = self._timeout_seconds
        if deadline is not None:
            deadline.ensure_time_left(f"chat completion ({model_id})")
            timeout = deadline.cap(timeout)
        try:
            response = self._client.chat.completions.create(
                model=model_id,
                timeout=timeout,
                **payload,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise InferenceNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise InferenceError(
                f"AI provider API error: {exc}",
                code=exc.code or str(exc.status_code),
            ) from exc
        except openai.APIError as exc:
            raise InferenceError(f"AI provider API error: {exc}", code=exc.code) from exc

        return response.model_dump()
