from typing import Any

from document_processor.providers.base import BaseLLMProvider, text_at


class MistralProvider(BaseLLMProvider):
    """Mistral instruct models; the prompt travels inside [INST] tags."""

    family = "mistral"
    default_model_id = "mistral.mistral-7b-instruct-v0:2"

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "prompt": f"<s>[INST] {prompt} [/INST]",
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def parse_response(self, response: dict[str, Any]) -> str:
        return text_at(response, "outputs", 0, "text", family=self.family)
