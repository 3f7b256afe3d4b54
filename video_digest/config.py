"""
Configuration settings for the video digest application.
"""

import os
from typing import Dict
from pathlib import Path
from dotenv import load_dotenv

from video_digest.utils.logger import logging


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Video Digest"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    SUMMARIES_DIR = Path(os.getenv("SUMMARIES_DIR", DATA_DIR / "summaries"))

    # API keys
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

    # Summarization endpoint
    SUMMARY_API_URL = os.getenv("SUMMARY_API_URL", "https://api.openai.com/v1/chat/completions")
    DEFAULT_SUMMARY_MODEL = os.getenv("DEFAULT_SUMMARY_MODEL", "gpt-3.5-turbo")
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))

    # Chunking and retry behaviour
    CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "2000"))
    MAX_ATTEMPTS = int(os.getenv("MAX_ATTEMPTS", "5"))
    INITIAL_RETRY_DELAY = float(os.getenv("INITIAL_RETRY_DELAY", "2.0"))
    RESET_RETRY_DELAY = float(os.getenv("RESET_RETRY_DELAY", "1.0"))
    PACING_DELAY = float(os.getenv("PACING_DELAY", "2.0"))

    # Transcript provider
    TRANSCRIPT_LANGUAGES = [
        lang.strip() for lang in os.getenv("TRANSCRIPT_LANGUAGES", "en").split(",") if lang.strip()
    ]

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.SUMMARIES_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.OPENAI_API_KEY:
            logging.warning(
                "OPENAI_API_KEY environment variable not set. "
                "Please set it in the .env file or environment variables."
            )

    @classmethod
    def get_paths(cls) -> Dict[str, Path]:
        """Get all application paths."""
        return {
            "base_dir": cls.BASE_DIR,
            "data_dir": cls.DATA_DIR,
            "summaries_dir": cls.SUMMARIES_DIR,
        }


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
config.initialize()
