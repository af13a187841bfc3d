"""Feedback form state machine and payload assembly."""

from feedback_form.feedback.controller import FormController
from feedback_form.feedback.models import (
    CaptureState,
    FeedbackDraft,
    FeedbackRating,
    FeedbackType,
    FormState,
    SubmissionPayload,
)

__all__ = [
    'FormController',
    'CaptureState',
    'FeedbackDraft',
    'FeedbackRating',
    'FeedbackType',
    'FormState',
    'SubmissionPayload',
]
