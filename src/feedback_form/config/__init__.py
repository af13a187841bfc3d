"""
Configuration package for the feedback form.
"""

from .settings import Settings

__all__ = [
    "Settings",
]
