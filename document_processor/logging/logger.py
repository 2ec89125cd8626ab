import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_current_document: ContextVar[str] = ContextVar("current_document", default="-")


class _DocumentContextFilter(logging.Filter):
    """Stamps every record with the document the current run is working on."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.document_id = _current_document.get()
        return True


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("document_processor")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.addFilter(_DocumentContextFilter())
            handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] [%(document_id)s] %(message)s"
                )
            )
            cls._logger.addHandler(handler)

    @classmethod
    @contextmanager
    def document_context(cls, document_id: str) -> Iterator[None]:
        """Tag log lines emitted inside the block with ``document_id``."""
        token = _current_document.set(document_id)
        try:
            yield
        finally:
            _current_document.reset(token)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
