from abc import ABC, abstractmethod
from typing import Any, ClassVar

from document_processor.providers.exceptions import ProviderResponseError
from document_processor.providers.prompt_loader import load_prompt_template


class BaseLLMProvider(ABC):
    """Contract for one language-model family.

    A provider is a pure request/response transformation: it renders the
    prompt, shapes the request body for its backend and pulls the generated
    text back out of the backend's response envelope. Transport is the job of
    an inference client selected by ``backend``.
    """

    family: ClassVar[str]
    backend: ClassVar[str] = "bedrock"
    default_model_id: ClassVar[str]
    max_tokens: ClassVar[int] = 4000
    temperature: ClassVar[float] = 0.1

    def __init__(
        self,
        *,
        model_id: str | None = None,
        prompt_template: str | None = None,
    ) -> None:
        self.model_id = model_id or self.default_model_id
        self._prompt_template = (
            prompt_template if prompt_template is not None else load_prompt_template()
        )

    def build_prompt(self, extracted_text: str) -> str:
        """Render the classification instructions around ``extracted_text``."""
        return self._prompt_template.format(extracted_text=extracted_text)

    @abstractmethod
    def build_request(self, prompt: str) -> dict[str, Any]:
        """Wrap ``prompt`` and generation parameters in the backend's body shape."""

    @abstractmethod
    def parse_response(self, response: dict[str, Any]) -> str:
        """Return the generated text from a decoded response envelope.

        Raises:
            ProviderResponseError: if the envelope has an unexpected shape.
        """

    def model_family(self) -> str:
        return self.family


def text_at(response: Any, *path: str | int, family: str) -> str:
    """Follow ``path`` through nested dicts/lists and return the string found there."""
    node = response
    try:
        for key in path:
            node = node[key]
    except (KeyError, IndexError, TypeError) as exc:
        dotted = ".".join(str(p) for p in path)
        raise ProviderResponseError(
            f"{family} response has no '{dotted}': {exc!r}"
        ) from exc
    if not isinstance(node, str):
        dotted = ".".join(str(p) for p in path)
        raise ProviderResponseError(f"{family} response '{dotted}' is not text")
    return node
