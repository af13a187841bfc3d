"""
File Capture Service

Capture service that reads an already rendered image from disk. Used by the
command line, where there is no screen to render.
"""

import asyncio
import logging
from pathlib import Path
from typing import Union

from feedback_form.contracts import CaptureConfig, CaptureService
from feedback_form.lib.exceptions import CaptureFailed

logger = logging.getLogger(__name__)


class FileCaptureService(CaptureService):
    """Returns the bytes of a fixed image file as the captured screenshot"""

    def __init__(self, image_path: Union[str, Path]):
        self.image_path = Path(image_path)

    async def capture(self, config: CaptureConfig) -> bytes:
        if not self.image_path.is_file():
            raise CaptureFailed(
                f"Screenshot file not found: {self.image_path}",
                details={"path": str(self.image_path)},
            )

        try:
            data = await asyncio.to_thread(self.image_path.read_bytes)
        except OSError as e:
            raise CaptureFailed(f"Cannot read screenshot file: {e}") from e

        if not data:
            raise CaptureFailed(f"Screenshot file is empty: {self.image_path}")

        # pixel_ratio has no meaning for a pre-rendered file
        logger.debug("Read %d bytes from %s (pixel_ratio=%s)", len(data), self.image_path, config.pixel_ratio)
        return data
