"""
Submission Service Contract

A submission service receives the finalized feedback payload.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping, Union


class SubmissionService(ABC):
    """Abstract interface for feedback submission"""

    @abstractmethod
    async def submit(self, text: str, extras: Mapping[str, Any]) -> None:
        """
        Deliver a feedback payload

        Args:
            text: Free form feedback text (possibly empty)
            extras: feedback_type, feedback_text and optional rating/screenshot

        Raises:
            Exception: Implementation specific delivery failures
        """
        pass


SubmitCallable = Callable[[str, Mapping[str, Any]], Awaitable[None]]


class _CallableSubmissionService(SubmissionService):
    """Wraps a plain async callable as a SubmissionService"""

    def __init__(self, func: SubmitCallable):
        self._func = func

    async def submit(self, text: str, extras: Mapping[str, Any]) -> None:
        await self._func(text, extras)


def as_submission_service(
    submission: Union[SubmissionService, SubmitCallable]
) -> SubmissionService:
    """Accept either a SubmissionService or an async callable."""
    if isinstance(submission, SubmissionService):
        return submission
    if callable(submission):
        return _CallableSubmissionService(submission)
    raise TypeError(f"Unsupported submission service: {submission!r}")
