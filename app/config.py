"""
Configuration settings for the YouTube to Notion summarizer service.
"""

import os
from typing import Dict
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube to Notion Summarizer"
    APP_VERSION = "1.0.0"
    ENVIRONMENT = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development")).lower()

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = BASE_DIR / "data"
    SUMMARIES_DIR = DATA_DIR / "summaries"

    # Server
    PORT = int(os.getenv("PORT", "5000"))
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # Notion OAuth integration
    NOTION_CLIENT_ID = os.getenv("NOTION_CLIENT_ID")
    NOTION_CLIENT_SECRET = os.getenv("NOTION_CLIENT_SECRET")
    NOTION_REDIRECT_URI = os.getenv("NOTION_REDIRECT_URI")
    NOTION_API_VERSION = "2022-06-28"

    # Summarization
    SUMMARY_TEMPERATURE = 0.3
    SUMMARY_MAX_TOKENS = 1000

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.SUMMARIES_DIR.mkdir(parents=True, exist_ok=True)

        if not cls.NOTION_CLIENT_ID or not cls.NOTION_REDIRECT_URI:
            print("WARNING: NOTION_CLIENT_ID / NOTION_REDIRECT_URI not set.")
            print("Notion OAuth will be unavailable until they are configured.")

    @classmethod
    def get_paths(cls) -> Dict[str, Path]:
        """Get all application paths."""
        return {
            "base_dir": cls.BASE_DIR,
            "data_dir": cls.DATA_DIR,
            "summaries_dir": cls.SUMMARIES_DIR,
        }

    @classmethod
    def cors_origins(cls):
        if cls.ENVIRONMENT == "production":
            return [cls.FRONTEND_URL]
        return ["http://localhost:3000"]


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development")).lower()
    if env == "development":
        return DevelopmentConfig
    else:
        return ProductionConfig


# Create a config instance
config = get_config()
