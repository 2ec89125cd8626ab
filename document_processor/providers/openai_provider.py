from typing import Any

from document_processor.providers.base import BaseLLMProvider, text_at


class OpenAIChatProvider(BaseLLMProvider):
    """Chat-completions models on any OpenAI-compatible endpoint."""

    family = "openai"
    backend = "openai"
    default_model_id = "gpt-4o-mini"

    SYSTEM_PROMPT = "You classify medical documents and respond with a single JSON object."

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "messages": [
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }

    def parse_response(self, response: dict[str, Any]) -> str:
        return text_at(response, "choices", 0, "message", "content", family=self.family)
