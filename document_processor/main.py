import json
import sys
from pathlib import Path
from typing import Any

from document_processor.config.settings import Settings
from document_processor.database.connection import create_pool
from document_processor.logging.logger import Log
from document_processor.processor.deadline import Deadline
from document_processor.processor.processor import Processor, build_processor

_processor: Processor | None = None


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Lambda-style entry point: one notification in, one response out.

    The processor is built on first use and reused by later invocations in the
    same process.
    """
    global _processor  # noqa: PLW0603
    if _processor is None:
        settings = Settings()
        Log.configure(settings.log_level)
        _processor = build_processor(settings)
    return _processor.process_notification(
        event, deadline=Deadline.from_lambda_context(context)
    )


def main(argv: list[str] | None = None) -> int:
    """Process one event read from a JSON file (or stdin) and print the response."""
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)

    event = _load_event(args[0] if args else None)
    pool = create_pool(settings)
    try:
        processor = build_processor(settings, pool=pool)
        response = processor.process_notification(event)
    finally:
        pool.close()

    print(json.dumps(response, indent=2))
    return 0 if response["statusCode"] == 200 else 1


def _load_event(path: str | None) -> Any:
    if path is None or path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


if __name__ == "__main__":
    sys.exit(main())
