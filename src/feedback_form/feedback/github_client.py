"""GitHub API submission service for feedback payloads."""

import os
import asyncio
from typing import Any, Mapping

import httpx

from feedback_form.config import Settings
from feedback_form.contracts import SubmissionService
from feedback_form.feedback.models import json_safe_extras


class GitHubAPIError(Exception):
    """Raised when GitHub API call fails."""
    pass


class GitHubSubmissionService(SubmissionService):
    """Submits feedback by triggering GitHub repository_dispatch events."""

    def __init__(self, owner: str = None, repo: str = None):
        """Initialize GitHub client with environment variables."""
        self.token = os.getenv("GITHUB_TOKEN")
        self.owner = owner or Settings.GITHUB_OWNER
        self.repo = repo or Settings.GITHUB_REPO

        if not self.token:
            raise ValueError("GITHUB_TOKEN environment variable not set")

    async def submit(self, text: str, extras: Mapping[str, Any]) -> None:
        """
        Send the payload as the dispatch client_payload.

        Args:
            text: Feedback text
            extras: Payload extras (screenshot is base64 encoded)

        Raises:
            GitHubAPIError: If GitHub API call fails
        """
        payload = {'text': text, **json_safe_extras(dict(extras))}
        await self.trigger_dispatch(payload)

    async def trigger_dispatch(self, payload: dict) -> None:
        """
        Trigger repository_dispatch event.

        Args:
            payload: Client payload to send to GitHub

        Raises:
            GitHubAPIError: If GitHub API call fails
        """
        url = Settings.get_dispatch_url(self.owner, self.repo)

        headers = {
            'Accept': 'application/vnd.github.v3+json',
            'Authorization': f'Bearer {self.token}',
            'Content-Type': 'application/json',
            'User-Agent': 'Feedback-Form'
        }

        body = {
            'event_type': Settings.GITHUB_EVENT_TYPE,
            'client_payload': payload
        }

        async with httpx.AsyncClient() as client:
            response = await client.post(url, json=body, headers=headers, timeout=Settings.GITHUB_TIMEOUT)

            if response.status_code == 204:
                return

            # Retry once on 5xx
            if 500 <= response.status_code < 600:
                await asyncio.sleep(2)
                response = await client.post(url, json=body, headers=headers, timeout=Settings.GITHUB_TIMEOUT)
                if response.status_code == 204:
                    return

            raise GitHubAPIError(f"GitHub API returned {response.status_code}")
