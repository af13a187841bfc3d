"""Data models for the feedback form."""

import base64
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Value written to feedback_type while no category has been chosen
UNSET_FEEDBACK_TYPE = "null"


class FeedbackType(str, Enum):
    """What type of feedback the user wants to provide."""
    BUG_REPORT = "bugReport"
    FEATURE_REQUEST = "featureRequest"

    @property
    def label(self) -> str:
        """Human readable label, e.g. 'bug report'."""
        return self.name.lower().replace("_", " ")


class FeedbackRating(str, Enum):
    """A user-provided sentiment rating."""
    BAD = "bad"
    NEUTRAL = "neutral"
    GOOD = "good"


@dataclass
class FeedbackDraft:
    """
    In-progress feedback record.

    Holds the feedback type, free form text and sentiment rating while the
    form is open. No validation happens here; see ``validation.can_submit``.
    """
    category: Optional[FeedbackType] = None
    text: str = ""
    rating: Optional[FeedbackRating] = None

    def set_category(self, category: Optional[FeedbackType]) -> None:
        self.category = category

    def set_text(self, text: Optional[str]) -> None:
        self.text = text or ""

    def set_rating(self, rating: Optional[FeedbackRating]) -> None:
        self.rating = rating

    def to_extras(self) -> Dict[str, Any]:
        """
        Serialize the draft into the extras mapping sent downstream.

        Returns:
            Dict with feedback_type, feedback_text and, when set, rating
        """
        extras: Dict[str, Any] = {
            "feedback_type": self.category.value if self.category else UNSET_FEEDBACK_TYPE,
            "feedback_text": self.text or "",
        }
        if self.rating is not None:
            extras["rating"] = self.rating.value
        return extras


@dataclass
class CaptureState:
    """Screenshot held by the form and whether a capture is in flight."""
    screenshot_bytes: Optional[bytes] = None
    is_capturing: bool = False

    @property
    def has_screenshot(self) -> bool:
        return self.screenshot_bytes is not None


class SubmissionPayload(BaseModel):
    """Finalized feedback handed to the submission service."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    extras: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("extras", mode="after")
    @classmethod
    def _read_only_extras(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @property
    def has_screenshot(self) -> bool:
        return "screenshot" in self.extras

    def summary(self) -> Dict[str, Any]:
        """Loggable view of the payload (screenshot reduced to its size)."""
        data = {k: v for k, v in self.extras.items() if k != "screenshot"}
        if self.has_screenshot:
            data["screenshot_bytes"] = len(self.extras["screenshot"])
        return data


@dataclass(frozen=True)
class FormState:
    """Derived UI state published after every controller mutation."""
    can_submit: bool = False
    is_capturing: bool = False
    is_submitting: bool = False
    capture_enabled: bool = True
    has_screenshot: bool = False
    category: Optional[FeedbackType] = None
    rating: Optional[FeedbackRating] = None

    @property
    def submit_enabled(self) -> bool:
        return self.can_submit and not self.is_submitting


def json_safe_extras(extras: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy extras into a JSON serializable dict.

    The raw screenshot is replaced by ``screenshot_base64``.
    """
    data = {k: v for k, v in extras.items() if k != "screenshot"}
    screenshot = extras.get("screenshot")
    if screenshot is not None:
        data["screenshot_base64"] = base64.b64encode(screenshot).decode("ascii")
    return data
