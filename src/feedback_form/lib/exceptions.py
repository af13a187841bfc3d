"""
Exception Hierarchy

Custom exceptions for the feedback form core.
"""


class FeedbackFormException(Exception):
    """Base exception for the feedback form"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Capture Exceptions
class CaptureException(FeedbackFormException):
    """Exception during screenshot capture"""
    pass


class CaptureUnavailable(CaptureException):
    """Exception when no capture service is configured"""
    pass


class CaptureFailed(CaptureException):
    """Exception when the capture service fails to produce an image"""
    pass


# Submission Exceptions
class SubmissionException(FeedbackFormException):
    """Exception during feedback submission"""
    pass


class InvalidSubmit(SubmissionException):
    """Exception when a payload is built for a draft that cannot be submitted"""
    pass


class SubmissionFailed(SubmissionException):
    """Exception when the submission service fails"""
    pass


# Input Exceptions
class ValidationError(FeedbackFormException):
    """Exception when user input cannot be interpreted"""
    pass
