"""
Service Contracts Package

Abstract base classes for the collaborators the feedback form depends on.
"""

from .capture_service import (
    CaptureService,
    CaptureConfig,
    CaptureCallable,
    as_capture_service,
)

from .submission_service import (
    SubmissionService,
    SubmitCallable,
    as_submission_service,
)

__all__ = [
    # Capture
    "CaptureService",
    "CaptureConfig",
    "CaptureCallable",
    "as_capture_service",

    # Submission
    "SubmissionService",
    "SubmitCallable",
    "as_submission_service",
]
