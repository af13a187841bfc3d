import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping
from unittest.mock import AsyncMock, MagicMock

import pytest

# Keep structured form logs out of the working tree
os.environ.setdefault(
    "FEEDBACK_LOG_DIR", str(Path(tempfile.gettempdir()) / "feedback_form_test_logs")
)

from feedback_form.contracts import CaptureConfig, CaptureService, SubmissionService  # noqa: E402


class SequenceCaptureService(CaptureService):
    """Capture service returning (or raising) queued results in order."""

    def __init__(self, *results: Any):
        self.results: List[Any] = list(results)
        self.configs: List[CaptureConfig] = []

    async def capture(self, config: CaptureConfig) -> bytes:
        self.configs.append(config)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class RecordingSubmissionService(SubmissionService):
    """Submission service remembering every payload it received."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []

    async def submit(self, text: str, extras: Mapping[str, Any]) -> None:
        self.calls.append({"text": text, "extras": dict(extras)})


@pytest.fixture
def sink() -> RecordingSubmissionService:
    return RecordingSubmissionService()


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock(name="notifier")


@pytest.fixture
def submit_callback() -> AsyncMock:
    return AsyncMock(name="on_submit")


@pytest.fixture
def screenshot_file(tmp_path: Path) -> Path:
    """A tiny fake PNG on disk."""
    path = tmp_path / "screen.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image")
    return path
