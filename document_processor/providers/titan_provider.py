from typing import Any

from document_processor.providers.base import BaseLLMProvider, text_at


class AmazonTitanProvider(BaseLLMProvider):
    """Amazon Titan text models; plain ``inputText`` body."""

    family = "amazon"
    default_model_id = "amazon.titan-text-express-v1"

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "inputText": prompt,
            "textGenerationConfig": {
                "maxTokenCount": self.max_tokens,
                "temperature": self.temperature,
            },
        }

    def parse_response(self, response: dict[str, Any]) -> str:
        return text_at(response, "results", 0, "outputText", family=self.family)
