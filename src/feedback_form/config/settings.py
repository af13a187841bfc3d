"""
Application configuration settings for the feedback form.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Feedback form settings configuration."""

    # Capture Configuration
    CAPTURE_PIXEL_RATIO = float(os.getenv("FEEDBACK_CAPTURE_PIXEL_RATIO", "2.0"))

    # Logging Configuration
    LOG_DIR = os.getenv("FEEDBACK_LOG_DIR", "logs")
    LOG_FILE = os.getenv("FEEDBACK_LOG_FILE", "feedback_form.log")
    LOG_MAX_BYTES = int(os.getenv("FEEDBACK_LOG_MAX_BYTES", "10000000"))  # 10MB
    LOG_BACKUP_COUNT = int(os.getenv("FEEDBACK_LOG_BACKUP_COUNT", "5"))

    # Local submission output
    OUTPUT_FILE = os.getenv("FEEDBACK_OUTPUT_FILE", "feedback.jsonl")

    # GitHub Configuration
    GITHUB_OWNER = os.getenv("GITHUB_OWNER", "feedback-form")
    GITHUB_REPO = os.getenv("GITHUB_REPO", "feedback-inbox")
    GITHUB_TIMEOUT = float(os.getenv("GITHUB_TIMEOUT", "10"))
    GITHUB_EVENT_TYPE = "submit_feedback"

    @classmethod
    def get_log_path(cls) -> str:
        """Get the full path of the structured log file."""
        return os.path.join(cls.LOG_DIR, cls.LOG_FILE)

    @classmethod
    def get_dispatch_url(cls, owner: str = None, repo: str = None) -> str:
        """Get the repository_dispatch endpoint, defaulting to the configured repo."""
        owner = owner or cls.GITHUB_OWNER
        repo = repo or cls.GITHUB_REPO
        return f"https://api.github.com/repos/{owner}/{repo}/dispatches"
