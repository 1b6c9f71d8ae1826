from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()


def _split_origins(origins: str) -> List[str]:
    if not origins:
        return []
    return [o.strip() for o in origins.split(",") if o.strip()]


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


class Config:
    """Centralized configuration for the application.

    Required keys:
      - OPENAI_API_KEY

    Optional keys with defaults:
      - OPENAI_BASE_URL (default: unset, the SDK's own endpoint)
      - CHAT_MODEL (default: "gpt-4o-mini")
      - TEMPERATURE (default: 0.4)
      - PORT (default: 4000)
      - CORS_ORIGINS (comma-separated list, default: "*")
      - LOG_LEVEL (default: "INFO")

    Google Drive credentials are not read here; google.auth.default() picks up
    GOOGLE_APPLICATION_CREDENTIALS or the ambient service account.
    """

    # Required
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

    # Optional with defaults
    PORT: int = int(os.getenv("PORT", "4000"))
    CORS_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Models
    CHAT_MODEL: str = os.getenv("CHAT_MODEL", "gpt-4o-mini")
    TEMPERATURE: float = float(os.getenv("TEMPERATURE", "0.4"))

    # Base URL for OpenAI-compatible API; None means the SDK default
    OPENAI_BASE_URL: Optional[str] = _optional(os.getenv("OPENAI_BASE_URL"))

    # Google endpoints
    DOCS_DOMAIN: str = "docs.google.com"
    DOC_EXPORT_URL: str = "https://docs.google.com/document/d/{doc_id}/export?format=txt"
    DRIVE_SCOPES: List[str] = ["https://www.googleapis.com/auth/drive.file"]

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration keys.

        Raises:
            ValueError: if required keys are explicitly set in env but empty,
                or if numeric settings are out of range.
        """
        # Only enforce when the environment variable is present but empty.
        if ("OPENAI_API_KEY" in os.environ) and (not cls.OPENAI_API_KEY.strip()):
            raise ValueError("OPENAI_API_KEY is missing or empty. Please set it in your environment or .env file.")
        if not 0.0 <= cls.TEMPERATURE <= 2.0:
            raise ValueError(f"TEMPERATURE must be between 0 and 2, got {cls.TEMPERATURE}.")
        if not 0 < cls.PORT < 65536:
            raise ValueError(f"PORT must be a valid TCP port, got {cls.PORT}.")

    @classmethod
    def openai_configured(cls) -> bool:
        return bool(cls.OPENAI_API_KEY and cls.OPENAI_API_KEY.strip())

    @classmethod
    def __repr__(cls) -> str:
        # Hide sensitive values in representation
        masked_key = (cls.OPENAI_API_KEY[:6] + "***") if cls.OPENAI_API_KEY else "<unset>"
        return (
            "Config("
            f"OPENAI_API_KEY={masked_key}, "
            f"OPENAI_BASE_URL={cls.OPENAI_BASE_URL}, PORT={cls.PORT}, "
            f"CORS_ORIGINS={cls.CORS_ORIGINS}, LOG_LEVEL={cls.LOG_LEVEL}, "
            f"CHAT_MODEL={cls.CHAT_MODEL}, TEMPERATURE={cls.TEMPERATURE}"
            ")"
        )


# Create a config instance and export it; callers should invoke Config.validate() when appropriate
config = Config()
# Validate required keys at import time so misconfiguration fails fast
Config.validate()
