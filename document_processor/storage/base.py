from abc import ABC, abstractmethod
from dataclasses import dataclass

from document_processor.processor.deadline import Deadline


@dataclass(frozen=True)
class ObjectHead:
    """Existence and size of a stored object."""

    exists: bool
    size_bytes: int | None = None


class BaseObjectStore(ABC):
    """Contract for object store adapters. Bytes are never read by the pipeline."""

    @abstractmethod
    def head_object(
        self,
        container: str,
        object_path: str,
        deadline: Deadline | None = None,
    ) -> ObjectHead:
        """Check that an object exists.

        Raises:
            ObjectNotFoundError: if the object does not exist.
            ObjectStoreError: on any other failure.
        """
