"""Validation functions for feedback drafts and raw user input."""

from enum import Enum
from typing import Type, TypeVar, Union

from feedback_form.feedback.models import FeedbackDraft, FeedbackRating, FeedbackType
from feedback_form.lib.exceptions import InvalidSubmit, ValidationError


E = TypeVar("E", bound=Enum)


def can_submit(draft: FeedbackDraft) -> bool:
    """
    Check whether a draft may be submitted.

    Only the feedback type is required; text, rating and screenshot are optional.

    Args:
        draft: Draft to check

    Returns:
        True if a feedback type has been chosen
    """
    return draft.category is not None


def ensure_submittable(draft: FeedbackDraft) -> None:
    """
    Guard for payload assembly.

    Args:
        draft: Draft about to be submitted

    Raises:
        InvalidSubmit: If no feedback type has been chosen
    """
    if not can_submit(draft):
        raise InvalidSubmit("Feedback type is required before submitting")


def _normalize(value: str) -> str:
    return value.strip().lower().replace("_", "").replace(" ", "").replace("-", "")


def _parse_enum(enum_cls: Type[E], value: Union[str, E], field: str) -> E:
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field}: {value!r}")

    wanted = _normalize(value)
    for member in enum_cls:
        if wanted in (_normalize(member.value), _normalize(member.name)):
            return member

    choices = ", ".join(member.value for member in enum_cls)
    raise ValidationError(
        f"Invalid {field}. Must be one of: {choices}",
        details={"value": value},
    )


def parse_category(value: Union[str, FeedbackType]) -> FeedbackType:
    """
    Parse a feedback type from user input.

    Accepts the wire value ("bugReport"), the enum name ("BUG_REPORT") or the
    label ("bug report"), case-insensitive.

    Raises:
        ValidationError: If the value does not name a feedback type
    """
    return _parse_enum(FeedbackType, value, "feedback type")


def parse_rating(value: Union[str, FeedbackRating]) -> FeedbackRating:
    """
    Parse a sentiment rating from user input.

    Raises:
        ValidationError: If the value does not name a rating
    """
    return _parse_enum(FeedbackRating, value, "rating")
