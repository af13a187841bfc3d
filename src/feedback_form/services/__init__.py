"""Local collaborator implementations for the feedback form."""

from .file_capture import FileCaptureService
from .json_file_submission import JsonFileSubmissionService

__all__ = ["FileCaptureService", "JsonFileSubmissionService"]
