"""
Capture Service Contract

A capture service renders the current screen into an encoded image.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union


@dataclass
class CaptureConfig:
    """Configuration passed to every capture call"""
    pixel_ratio: float = 2.0


class CaptureService(ABC):
    """Abstract interface for screenshot capture"""

    @abstractmethod
    async def capture(self, config: CaptureConfig) -> bytes:
        """
        Capture the current screen

        Args:
            config: Capture configuration

        Returns:
            Encoded image bytes

        Raises:
            Exception: Any failure (unsupported platform, render failure, ...)
        """
        pass


CaptureCallable = Callable[[CaptureConfig], Awaitable[bytes]]


class _CallableCaptureService(CaptureService):
    """Wraps a plain async callable as a CaptureService"""

    def __init__(self, func: CaptureCallable):
        self._func = func

    async def capture(self, config: CaptureConfig) -> bytes:
        return await self._func(config)


def as_capture_service(
    capture: Union[CaptureService, CaptureCallable, None]
) -> Optional[CaptureService]:
    """Accept either a CaptureService or an async callable (or None)."""
    if capture is None or isinstance(capture, CaptureService):
        return capture
    if callable(capture):
        return _CallableCaptureService(capture)
    raise TypeError(f"Unsupported capture service: {capture!r}")
