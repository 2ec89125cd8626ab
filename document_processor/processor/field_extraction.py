"""Classification stage: one language-model call over the OCR text."""

import json
from collections.abc import Mapping
from typing import Any

from document_processor.inference.base import BaseInferenceClient
from document_processor.inference.exceptions import InferenceError
from document_processor.logging.logger import Log
from document_processor.processor.clock import Clock, isoformat, utc_now
from document_processor.processor.deadline import Deadline
from document_processor.processor.models import FieldExtractionResult
from document_processor.providers.base import BaseLLMProvider
from document_processor.providers.catalog import EXTRACTED_FIELDS
from document_processor.providers.exceptions import ProviderError
from document_processor.providers.selector import ProviderSelector


class FieldExtractionStage:
    """Classifies a document and extracts its fields through the configured provider.

    Never raises: provider, transport and parse failures all come back as
    ``status="failed"``.
    """

    def __init__(
        self,
        *,
        selector: ProviderSelector,
        provider_identifier: str,
        clients: Mapping[str, BaseInferenceClient],
        clock: Clock = utc_now,
    ) -> None:
        self._selector = selector
        self._provider_identifier = provider_identifier
        self._clients = clients
        self._clock = clock

    def run(self, text: str | None, deadline: Deadline | None = None) -> FieldExtractionResult:
        if not text:
            Log.info("Skipping LLM processing - no extracted text available")
            return FieldExtractionResult(
                status="skipped",
                note="Skipped - no extracted text available from OCR",
                processed_at=self._now(),
            )

        provider: BaseLLMProvider | None = None
        try:
            provider = self._selector.select(self._provider_identifier)
            client = self._client_for(provider)
            prompt = provider.build_prompt(text)
            Log.debug(f"Classification prompt ({provider.model_family()}):\n{prompt}")

            response = client.invoke(
                provider.model_id, provider.build_request(prompt), deadline=deadline
            )
            raw_text = provider.parse_response(response)
            Log.debug(f"LLM raw response:\n{raw_text}")

            parsed = _parse_json(raw_text)
        except Exception as exc:
            Log.warning(f"LLM processing failed: {exc}")
            return FieldExtractionResult(
                status="failed",
                provider_family=provider.model_family() if provider else None,
                model_id=provider.model_id if provider else None,
                error_message=str(exc),
                error_code=_error_code(exc),
                processed_at=self._now(),
            )

        classification = parsed.get("documentClassification")
        extracted = parsed.get("extractedFields")
        if isinstance(extracted, dict):
            fields = {name: extracted.get(name) for name in EXTRACTED_FIELDS}
            fields.update(extracted)
        else:
            fields = parsed

        Log.info(
            f"LLM processing completed with {provider.model_family()}: "
            f"{_primary_type(classification)}"
        )
        return FieldExtractionResult(
            status="completed",
            classification=classification if isinstance(classification, dict) else None,
            fields=fields,
            raw_response_text=raw_text,
            provider_family=provider.model_family(),
            model_id=provider.model_id,
            processed_at=self._now(),
        )

    def _client_for(self, provider: BaseLLMProvider) -> BaseInferenceClient:
        client = self._clients.get(provider.backend)
        if client is None:
            raise ProviderError(
                f"No inference client configured for backend '{provider.backend}' "
                f"(provider '{provider.model_family()}')"
            )
        return client

    def _now(self) -> str:
        return isoformat(self._clock())


def _parse_json(raw: str) -> dict[str, Any]:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ProviderError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise ProviderError("JSON response must be an object")
    return parsed


def _error_code(exc: Exception) -> str | None:
    if isinstance(exc, InferenceError):
        return exc.code
    return type(exc).__name__


def _primary_type(classification: Any) -> str:
    if isinstance(classification, dict):
        return str(classification.get("primaryType", "unclassified"))
    return "unclassified"
