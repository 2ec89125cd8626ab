from collections.abc import Iterable
from typing import ClassVar

from document_processor.config.settings import Settings
from document_processor.logging.logger import Log
from document_processor.providers.base import BaseLLMProvider
from document_processor.providers.claude_provider import ClaudeProvider
from document_processor.providers.llama_provider import MetaLlamaProvider
from document_processor.providers.mistral_provider import MistralProvider
from document_processor.providers.openai_provider import OpenAIChatProvider
from document_processor.providers.titan_provider import AmazonTitanProvider


class ProviderSelector:
    """Resolves a configured provider identifier to a provider instance.

    Misconfiguration never raises: unknown identifiers fall back to the
    default provider. ``auto`` picks the first family in ``AUTO_PREFERENCE``
    whose backend is in ``available_backends``; with no backends known it
    also falls back to the default.
    """

    REGISTRY: ClassVar[dict[str, type[BaseLLMProvider]]] = {
        "claude": ClaudeProvider,
        "mistral": MistralProvider,
        "titan": AmazonTitanProvider,
        "amazon": AmazonTitanProvider,
        "llama": MetaLlamaProvider,
        "openai": OpenAIChatProvider,
    }
    AUTO_PREFERENCE: ClassVar[tuple[str, ...]] = ("claude", "mistral", "titan", "llama", "openai")
    DEFAULT: ClassVar[str] = "claude"

    def __init__(
        self,
        *,
        available_backends: Iterable[str] | None = None,
        model_id_override: str | None = None,
    ) -> None:
        self._available_backends = (
            frozenset(available_backends) if available_backends is not None else None
        )
        self._model_id_override = model_id_override or None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        available_backends: Iterable[str] | None = None,
    ) -> "ProviderSelector":
        return cls(
            available_backends=available_backends,
            model_id_override=settings.llm_model_id.strip() or None,
        )

    def select(self, identifier: str | None) -> BaseLLMProvider:
        """Return the provider for ``identifier`` (case-insensitive)."""
        key = (identifier or "").strip().lower()
        if key == "auto":
            key = self._auto_select()
        provider_cls = self.REGISTRY.get(key)
        if provider_cls is None:
            Log.warning(
                f"Unknown LLM provider '{identifier}', falling back to '{self.DEFAULT}'"
            )
            provider_cls = self.REGISTRY[self.DEFAULT]
        return provider_cls(model_id=self._model_id_override)

    def _auto_select(self) -> str:
        if self._available_backends is None:
            return self.DEFAULT
        for name in self.AUTO_PREFERENCE:
            if self.REGISTRY[name].backend in self._available_backends:
                return name
        return self.DEFAULT
