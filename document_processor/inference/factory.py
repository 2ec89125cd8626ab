from typing import Any

from document_processor.config.settings import Settings
from document_processor.inference.base import BaseInferenceClient
from document_processor.inference.bedrock_client import BedrockInferenceClient
from document_processor.inference.openai_client_adapter import OpenAIInferenceClient


class InferenceClientFactory:
    """Creates one inference client per configured backend."""

    @classmethod
    def create(cls, settings: Settings, bedrock_runtime: Any) -> dict[str, BaseInferenceClient]:
        """Map backend name to client.

        Bedrock is always available; the OpenAI-compatible backend only when an
        API key is configured.
        """
        clients: dict[str, BaseInferenceClient] = {
            "bedrock": BedrockInferenceClient(bedrock_runtime),
        }
        if settings.openai_api_key:
            clients["openai"] = OpenAIInferenceClient(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=settings.openai_base_url.strip() or None,
            )
        return clients
