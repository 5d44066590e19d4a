"""
Configuration settings for the YouTube transcript server.
"""

import os
import sys
from typing import Dict
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Transcript Pro"
    APP_VERSION = "1.1.0"
    SERVER_NAME = "mcp-youtube-transcript-pro"
    SERVER_DESCRIPTION = "MCP server for fetching YouTube video transcripts with metadata"
    PROTOCOL_VERSION = "2025-06-18"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    DOWNLOADS_DIR = Path(os.getenv("DOWNLOADS_DIR", DATA_DIR / "downloads"))
    TRANSCRIPTS_DIR = Path(os.getenv("TRANSCRIPTS_DIR", DATA_DIR / "transcripts"))
    LOGS_DIR = Path(os.getenv("LOGS_DIR", BASE_DIR / "logs"))

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Transcript defaults
    DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
    DEFAULT_PREVIEW_CHARS = int(os.getenv("DEFAULT_PREVIEW_CHARS", "5000"))

    # Caption download retries
    CAPTION_FETCH_RETRIES = 3
    CAPTION_FETCH_RETRY_DELAY = 1
    CAPTION_FETCH_BACKOFF = 2

    # Speech recognition fallback (used when a video has no caption track)
    DEFAULT_TRANSCRIPTION_MODEL = "whisper-large-v3-turbo"
    ENABLE_ASR_FALLBACK = _env_flag("ENABLE_ASR_FALLBACK")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DOWNLOADS_DIR.mkdir(parents=True, exist_ok=True)
        cls.TRANSCRIPTS_DIR.mkdir(parents=True, exist_ok=True)

        # stdout is reserved for JSON-RPC frames
        if cls.ENABLE_ASR_FALLBACK and not cls.GROQ_API_KEY:
            print("WARNING: ENABLE_ASR_FALLBACK is set but GROQ_API_KEY is not.", file=sys.stderr)
            print("Please set it in the .env file or environment variables.", file=sys.stderr)

    @classmethod
    def get_paths(cls) -> Dict[str, Path]:
        """Get all application paths."""
        return {
            "base_dir": cls.BASE_DIR,
            "data_dir": cls.DATA_DIR,
            "downloads_dir": cls.DOWNLOADS_DIR,
            "transcripts_dir": cls.TRANSCRIPTS_DIR,
            "logs_dir": cls.LOGS_DIR,
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
