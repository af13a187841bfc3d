"""Tests for the local capture and submission services."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from feedback_form.contracts import CaptureConfig
from feedback_form.feedback.controller import FormController
from feedback_form.feedback.models import FeedbackType
from feedback_form.lib.exceptions import CaptureFailed
from feedback_form.services import FileCaptureService, JsonFileSubmissionService


@pytest.mark.asyncio
async def test_file_capture_reads_image(screenshot_file):
    service = FileCaptureService(screenshot_file)

    data = await service.capture(CaptureConfig())

    assert data == screenshot_file.read_bytes()


@pytest.mark.asyncio
async def test_file_capture_missing_file(tmp_path):
    service = FileCaptureService(tmp_path / "missing.png")

    with pytest.raises(CaptureFailed, match="not found"):
        await service.capture(CaptureConfig())


@pytest.mark.asyncio
async def test_file_capture_empty_file(tmp_path):
    empty = tmp_path / "empty.png"
    empty.write_bytes(b"")

    with pytest.raises(CaptureFailed, match="empty"):
        await FileCaptureService(empty).capture(CaptureConfig())


@pytest.mark.asyncio
async def test_json_file_submission_appends_lines(tmp_path):
    output = tmp_path / "out" / "feedback.jsonl"
    service = JsonFileSubmissionService(output)

    await service.submit("first", {"feedback_type": "bugReport", "feedback_text": "first"})
    await service.submit("", {"feedback_type": "featureRequest", "feedback_text": "", "screenshot": b"\x01\x02"})

    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first, second = (json.loads(line) for line in lines)
    assert first["text"] == "first"
    assert first["extras"] == {"feedback_type": "bugReport", "feedback_text": "first"}
    assert second["extras"]["screenshot_base64"] == "AQI="
    assert "screenshot" not in second["extras"]
    assert first["id"] != second["id"]
    assert first["timestamp"]


@pytest.mark.asyncio
async def test_controller_with_local_services(tmp_path, screenshot_file):
    output = tmp_path / "feedback.jsonl"
    controller = FormController(JsonFileSubmissionService(output), FileCaptureService(screenshot_file))
    controller.set_category(FeedbackType.BUG_REPORT)
    controller.set_text("button does nothing")

    assert await controller.request_capture() is True
    assert await controller.submit() is True

    record = json.loads(output.read_text(encoding="utf-8"))
    assert record["text"] == "button does nothing"
    assert record["extras"]["feedback_type"] == "bugReport"
    assert "screenshot_base64" in record["extras"]


@pytest.mark.asyncio
async def test_json_file_submission_writes_off_the_event_loop(tmp_path):
    output = tmp_path / "feedback.jsonl"
    service = JsonFileSubmissionService(output)

    async def run_inline(func, *args):
        return func(*args)

    with patch("feedback_form.services.json_file_submission.asyncio.to_thread",
               new=AsyncMock(side_effect=run_inline)) as to_thread:
        await service.submit("", {"feedback_type": "bugReport", "feedback_text": ""})

    to_thread.assert_awaited_once()
    assert json.loads(output.read_text(encoding="utf-8"))["extras"]["feedback_type"] == "bugReport"
