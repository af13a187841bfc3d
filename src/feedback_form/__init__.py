"""Feedback form interaction core."""

__version__ = "1.0.0"
