from abc import ABC, abstractmethod
from typing import Any

from document_processor.processor.deadline import Deadline


class BaseInferenceClient(ABC):
    """Contract for language-model transports.

    A client only moves a provider-shaped payload to the service and hands the
    decoded response envelope back; it knows nothing about prompts.
    """

    @abstractmethod
    def invoke(
        self,
        model_id: str,
        payload: dict[str, Any],
        deadline: Deadline | None = None,
    ) -> dict[str, Any]:
        """Send one generation request and return the decoded response envelope.

        Raises:
            InferenceError: on any failure.
        """
