class ObjectStoreError(Exception):
    """Raised when the object store cannot be queried."""


class ObjectNotFoundError(ObjectStoreError):
    """Raised when the referenced object does not exist."""
