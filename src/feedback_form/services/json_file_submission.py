"""
JSON Lines Submission Service

Appends every submitted payload to a local JSON Lines file.
"""

import asyncio
import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Union

from feedback_form.contracts import SubmissionService
from feedback_form.feedback.models import json_safe_extras

logger = logging.getLogger(__name__)


class JsonFileSubmissionService(SubmissionService):
    """Writes each payload as one JSON object per line"""

    def __init__(self, output_path: Union[str, Path]):
        self.output_path = Path(output_path)

    async def submit(self, text: str, extras: Mapping[str, Any]) -> None:
        record = {
            "id": uuid.uuid4().hex,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "text": text,
            "extras": json_safe_extras(dict(extras)),
        }

        await asyncio.to_thread(self._append, json.dumps(record) + "\n")

        logger.info("Feedback %s written to %s", record["id"], self.output_path)

    def _append(self, line: str) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_path, "a", encoding="utf-8") as f:
            f.write(line)
