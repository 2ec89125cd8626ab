from typing import Any

from document_processor.providers.base import BaseLLMProvider, text_at


class ClaudeProvider(BaseLLMProvider):
    """Anthropic Claude through the Bedrock messages API."""

    family = "claude"
    default_model_id = "anthropic.claude-3-sonnet-20240229-v1:0"

    ANTHROPIC_VERSION = "bedrock-2023-05-31"

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "anthropic_version": self.ANTHROPIC_VERSION,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [
                {
                    "role": "user",
                    "content": [{"type": "text", "text": prompt}],
                }
            ],
        }

    def parse_response(self, response: dict[str, Any]) -> str:
        return text_at(response, "content", 0, "text", family=self.family)
