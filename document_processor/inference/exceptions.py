class InferenceError(Exception):
    """Raised when the language-model service call fails.

    ``code`` carries the service's error code when one is available.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class InferenceNetworkError(InferenceError):
    """Raised when the call fails due to network/infrastructure issues."""
