from typing import Any

from document_processor.providers.base import BaseLLMProvider, text_at

_SYSTEM_MESSAGE = (
    "You are an expert at analyzing and classifying medical documents. "
    "You only respond with valid JSON. No explanations. No descriptions."
)


class MetaLlamaProvider(BaseLLMProvider):
    """Meta Llama 3 instruct models driven by raw header-tag prompts.

    The prompt pre-fills the assistant turn with ``{`` to force a JSON object,
    so generations come back without their opening brace and are often cut off
    at the token limit. ``parse_response`` patches both ends.
    """

    family = "llama"
    default_model_id = "meta.llama3-8b-instruct-v1:0"
    top_p = 0.9

    def build_prompt(self, extracted_text: str) -> str:
        instructions = super().build_prompt(extracted_text)
        return (
            "<|begin_of_text|><|start_header_id|>system<|end_header_id|>\n\n"
            f"{_SYSTEM_MESSAGE}<|eot_id|>"
            "<|start_header_id|>user<|end_header_id|>\n\n"
            f"{instructions}<|eot_id|>"
            "<|start_header_id|>assistant<|end_header_id|>\n\n{"
        )

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "prompt": prompt,
            "max_gen_len": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
        }

    def parse_response(self, response: dict[str, Any]) -> str:
        return repair_truncated_json(
            text_at(response, "generation", family=self.family)
        )


def repair_truncated_json(generation: str) -> str:
    """Best-effort brace repair; the result may still not be valid JSON."""
    repaired = generation
    if not repaired.strip().startswith("{"):
        repaired = "{" + repaired
    if not repaired.strip().endswith("}"):
        if repaired.rfind("{") > repaired.rfind("}"):
            repaired += "}"
    return repaired
