import time
from dataclasses import dataclass
from typing import Any

from document_processor.processor.exceptions import DeadlineExceededError


@dataclass(frozen=True)
class Deadline:
    """Absolute point in monotonic time after which external calls must not start.

    ``expires_at`` of ``None`` means the caller imposed no deadline.
    """

    expires_at: float | None = None

    @classmethod
    def none(cls) -> "Deadline":
        return cls()

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(expires_at=time.monotonic() + seconds)

    @classmethod
    def from_lambda_context(cls, context: Any) -> "Deadline":
        """Build a deadline from an AWS Lambda context object (or ``None``)."""
        remaining_ms = getattr(context, "get_remaining_time_in_millis", None)
        if remaining_ms is None:
            return cls.none()
        return cls.after(remaining_ms() / 1000.0)

    def remaining(self) -> float | None:
        """Seconds left, never negative. ``None`` if unbounded."""
        if self.expires_at is None:
            return None
        return max(0.0, self.expires_at - time.monotonic())

    def ensure_time_left(self, operation: str) -> None:
        """Raise DeadlineExceededError if the deadline has already passed."""
        remaining = self.remaining()
        if remaining is not None and remaining <= 0.0:
            raise DeadlineExceededError(f"Deadline exceeded before {operation}")

    def cap(self, timeout_seconds: float) -> float:
        """Return ``timeout_seconds`` bounded by the time left."""
        remaining = self.remaining()
        if remaining is None:
            return timeout_seconds
        return min(timeout_seconds, remaining)
