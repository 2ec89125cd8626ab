import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from document_processor import main as main_module
from document_processor.processor.deadline import Deadline


@pytest.fixture(autouse=True)
def _reset_cached_processor() -> Any:
    main_module._processor = None
    yield
    main_module._processor = None


class TestHandler:
    @patch("document_processor.main.build_processor")
    def test_builds_processor_once(self, mock_build: MagicMock) -> None:
        processor = mock_build.return_value
        processor.process_notification.return_value = {"statusCode": 200, "body": "{}"}

        main_module.handler({"source": "aws.s3"})
        main_module.handler({"source": "aws.s3"})

        mock_build.assert_called_once()
        assert processor.process_notification.call_count == 2

    @patch("document_processor.main.build_processor")
    def test_passes_deadline_from_context(self, mock_build: MagicMock) -> None:
        context = MagicMock()
        context.get_remaining_time_in_millis.return_value = 30_000

        main_module.handler({"source": "aws.s3"}, context)

        deadline = mock_build.return_value.process_notification.call_args.kwargs["deadline"]
        assert isinstance(deadline, Deadline)
        remaining = deadline.remaining()
        assert remaining is not None
        assert 0 < remaining <= 30


class TestMain:
    @patch("document_processor.main.build_processor")
    @patch("document_processor.main.create_pool")
    def test_processes_event_file(
        self,
        mock_create_pool: MagicMock,
        mock_build: MagicMock,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        event_file = tmp_path / "event.json"
        event_file.write_text(json.dumps({"source": "aws.s3"}), encoding="utf-8")
        mock_build.return_value.process_notification.return_value = {
            "statusCode": 200,
            "body": "{}",
        }

        exit_code = main_module.main([str(event_file)])

        assert exit_code == 0
        mock_build.return_value.process_notification.assert_called_once_with({"source": "aws.s3"})
        mock_create_pool.return_value.close.assert_called_once()
        assert json.loads(capsys.readouterr().out)["statusCode"] == 200

    @patch("document_processor.main.build_processor")
    @patch("document_processor.main.create_pool")
    def test_error_response_exits_nonzero(
        self,
        mock_create_pool: MagicMock,
        mock_build: MagicMock,
        tmp_path: Path,
    ) -> None:
        event_file = tmp_path / "event.json"
        event_file.write_text("{}", encoding="utf-8")
        mock_build.return_value.process_notification.return_value = {
            "statusCode": 500,
            "body": "{}",
        }

        assert main_module.main([str(event_file)]) == 1
        mock_create_pool.return_value.close.assert_called_once()
