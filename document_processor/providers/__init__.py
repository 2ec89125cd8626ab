from document_processor.providers.base import BaseLLMProvider
from document_processor.providers.selector import ProviderSelector

__all__ = ["BaseLLMProvider", "ProviderSelector"]
