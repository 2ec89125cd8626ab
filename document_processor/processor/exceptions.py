class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DeadlineExceededError(ProcessorError):
    """Raised when the caller's deadline expires before an external call."""


class RecordStoreError(ProcessorError):
    """Raised when a document record cannot be written."""
