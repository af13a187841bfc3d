"""
Feedback Form Controller

Owns the in-progress draft and screenshot, gates capture and submit actions,
and publishes the derived form state after every mutation.
"""

import logging
from typing import Callable, List, Optional, Union

from feedback_form.config import Settings
from feedback_form.contracts import (
    CaptureCallable,
    CaptureConfig,
    CaptureService,
    SubmissionService,
    SubmitCallable,
    as_capture_service,
    as_submission_service,
)
from feedback_form.feedback.models import (
    CaptureState,
    FeedbackDraft,
    FeedbackRating,
    FeedbackType,
    FormState,
    SubmissionPayload,
)
from feedback_form.feedback.validation import can_submit, ensure_submittable
from feedback_form.lib.exceptions import CaptureFailed, CaptureUnavailable, SubmissionFailed
from feedback_form.utils.logger import setup_form_logger


logger = logging.getLogger(__name__)

form_logger = setup_form_logger("feedback_form.form")

CAPTURE_UNAVAILABLE_NOTICE = "Screenshot capture is not available."
CAPTURE_FAILED_NOTICE = "Could not capture screenshot."

StateListener = Callable[[FormState], None]
Notifier = Callable[[str], None]


def _log_notice(message: str) -> None:
    logger.warning("Notice: %s", message)


class FormController:
    """
    Interaction state machine for the feedback form.

    Field edits, capture and submit requests all go through this class. At most
    one capture and one submission can be in flight; capture related actions
    are rejected while a capture is running.
    """

    def __init__(
        self,
        submission: Union[SubmissionService, SubmitCallable],
        capture: Union[CaptureService, CaptureCallable, None] = None,
        *,
        capture_config: Optional[CaptureConfig] = None,
        notifier: Optional[Notifier] = None,
    ):
        """
        Args:
            submission: Service (or async callable) receiving the payload
            capture: Service (or async callable) producing screenshots, if any
            capture_config: Options passed to every capture call
            notifier: Shows transient notices to the user
        """
        self._submission = as_submission_service(submission)
        self._capture = as_capture_service(capture)
        self._capture_config = capture_config or CaptureConfig(
            pixel_ratio=Settings.CAPTURE_PIXEL_RATIO
        )
        self._notify = notifier or _log_notice

        self._draft = FeedbackDraft()
        self._capture_state = CaptureState()
        self._is_submitting = False
        self._closed = False

        self._listeners: List[StateListener] = []
        self._state = self._compute_state()

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def state(self) -> FormState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with every new FormState.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _compute_state(self) -> FormState:
        return FormState(
            can_submit=self.can_submit(),
            is_capturing=self._capture_state.is_capturing,
            is_submitting=self._is_submitting,
            capture_enabled=not self._capture_state.is_capturing and not self._closed,
            has_screenshot=self._capture_state.has_screenshot,
            category=self._draft.category,
            rating=self._draft.rating,
        )

    def _publish(self) -> None:
        self._state = self._compute_state()
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Form state listener %r failed", listener)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def category(self) -> Optional[FeedbackType]:
        return self._draft.category

    @property
    def text(self) -> str:
        return self._draft.text

    @property
    def rating(self) -> Optional[FeedbackRating]:
        return self._draft.rating

    @property
    def screenshot_bytes(self) -> Optional[bytes]:
        return self._capture_state.screenshot_bytes

    @property
    def is_capturing(self) -> bool:
        return self._capture_state.is_capturing

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Field edits
    # ------------------------------------------------------------------

    def set_category(self, category: Optional[FeedbackType]) -> None:
        self._draft.set_category(category)
        self._publish()

    def set_text(self, text: Optional[str]) -> None:
        self._draft.set_text(text)
        self._publish()

    def set_rating(self, rating: Optional[FeedbackRating]) -> None:
        self._draft.set_rating(rating)
        self._publish()

    # ------------------------------------------------------------------
    # Screenshot lifecycle
    # ------------------------------------------------------------------

    async def request_capture(self) -> bool:
        """
        Capture a screenshot through the capture service.

        A successful capture replaces any existing screenshot. A failed one
        leaves it untouched and shows a notice. Calls made while a capture is
        already running, or after the form is closed, are rejected.

        Returns:
            True if a new screenshot was stored
        """
        if self._capture_state.is_capturing or self._closed:
            form_logger.debug(
                "capture_rejected",
                extra={"data": {"is_capturing": self._capture_state.is_capturing,
                                "closed": self._closed}},
            )
            return False

        if self._capture is None:
            error = CaptureUnavailable("No capture service configured")
            form_logger.warning("capture_unavailable", extra={"data": {"error": error.message}})
            self._notify(CAPTURE_UNAVAILABLE_NOTICE)
            return False

        self._capture_state.is_capturing = True
        self._publish()

        try:
            data = await self._capture.capture(self._capture_config)
            if not isinstance(data, (bytes, bytearray, memoryview)):
                raise CaptureFailed(
                    "Capture service did not return image bytes",
                    details={"type": type(data).__name__},
                )
            data = bytes(data)
        except Exception as e:
            form_logger.error(
                "capture_failed",
                exc_info=True,
                extra={"data": {"error": str(e), "kept_previous": self._capture_state.has_screenshot}},
            )
            if not self._closed:
                self._notify(CAPTURE_FAILED_NOTICE)
            return False
        else:
            if self._closed:
                form_logger.info("capture_discarded", extra={"data": {"bytes": len(data)}})
                return False
            self._capture_state.screenshot_bytes = data
            form_logger.info("capture_succeeded", extra={"data": {"bytes": len(data)}})
            return True
        finally:
            self._capture_state.is_capturing = False
            self._publish()

    async def retake(self) -> bool:
        """Replace the current screenshot with a new capture."""
        return await self.request_capture()

    def clear_screenshot(self) -> bool:
        """
        Remove the current screenshot.

        Returns:
            False if rejected because a capture is in flight
        """
        if self._capture_state.is_capturing:
            return False
        self._capture_state.screenshot_bytes = None
        self._publish()
        return True

    def preview_screenshot(self) -> Optional[bytes]:
        """Bytes to show in the full-size preview, or None if there is no screenshot."""
        return self._capture_state.screenshot_bytes

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def can_submit(self) -> bool:
        return can_submit(self._draft)

    def build_payload(self) -> SubmissionPayload:
        """
        Assemble the payload for the submission service.

        Returns:
            Payload with the draft extras and, when present, the screenshot

        Raises:
            InvalidSubmit: If called while can_submit() is False
        """
        ensure_submittable(self._draft)

        extras = dict(self._draft.to_extras())
        if self._capture_state.screenshot_bytes is not None:
            extras["screenshot"] = self._capture_state.screenshot_bytes

        return SubmissionPayload(text=self._draft.text or "", extras=extras)

    async def submit(self) -> bool:
        """
        Hand the payload to the submission service once.

        Does nothing (returns False) when the draft cannot be submitted, a
        submission is already running, or the form is closed. Failures keep the
        draft intact so the user can try again.

        Returns:
            True once the submission service has completed

        Raises:
            SubmissionFailed: If the submission service raised
        """
        if self._closed or self._is_submitting or not self.can_submit():
            return False

        payload = self.build_payload()

        self._is_submitting = True
        self._publish()

        try:
            await self._submission.submit(payload.text, dict(payload.extras))
        except Exception as e:
            form_logger.error("submission_failed", exc_info=True, extra={"data": payload.summary()})
            raise SubmissionFailed(
                f"Feedback submission failed: {e}",
                details=payload.summary(),
            ) from e
        finally:
            self._is_submitting = False
            self._publish()

        form_logger.info("feedback_submitted", extra={"data": payload.summary()})
        return True

    def close(self) -> None:
        """Close the form. Late capture results are dropped and actions rejected."""
        self._closed = True
        self._publish()
