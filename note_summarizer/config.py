"""
Configuration settings for the note summarizer plugin.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Note Summarizer"
    APP_VERSION = "0.1.0"
    PLUGIN_ID = "note-summarizer"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("NOTE_SUMMARIZER_DATA_DIR", BASE_DIR / "data"))
    PLUGINS_DIR = DATA_DIR / "plugins"

    # Default models
    DEFAULT_SUMMARY_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    SUMMARY_TEMPERATURE = 0.0

    # Webpages are split before the map step
    CHUNK_SIZE = 2000
    CHUNK_OVERLAP = 0

    # Partial summaries longer than this, in characters, are combined in groups first
    COLLAPSE_MAX_LENGTH = int(os.getenv("COLLAPSE_MAX_LENGTH", "12000"))

    TRANSCRIPT_LANGUAGE = "en"

    # None leaves the timeout to requests
    REQUEST_TIMEOUT = _optional_float(os.getenv("REQUEST_TIMEOUT"))
    USER_AGENT = os.getenv("USER_AGENT", "NoteSummarizer/0.1")

    NOTICE_TIMEOUT_MS = 5000

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.PLUGINS_DIR.mkdir(parents=True, exist_ok=True)


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
