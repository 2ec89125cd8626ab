class ProviderError(Exception):
    """Raised when a provider cannot build a request or read a response."""


class ProviderResponseError(ProviderError):
    """Raised when a response envelope does not have the expected shape."""


class ProviderTemplateError(ProviderError):
    """Raised when the prompt template cannot be loaded."""
