"""
YouTube to Notion Summarizer.

This application fetches YouTube transcripts, summarizes them with a
user-selected LLM provider, and saves the result into a Notion workspace.
"""

from app.config import config

__version__ = config.APP_VERSION
