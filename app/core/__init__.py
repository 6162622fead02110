"""
Core functionality for the YouTube to Notion summarizer.

This package contains modules for resolving video URLs, fetching transcripts,
summarizing them with an AI provider, and publishing summaries to Notion.
"""
