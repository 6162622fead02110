"""
Data models for the YouTube to Notion summarizer.
"""
import time
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator


class ProviderName(str, Enum):
    """AI providers a summary can be requested from."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"


class TranscriptSource(str, Enum):
    """Strategy that produced a transcript."""
    AUTO_GENERATED = "auto-generated"
    AVAILABLE = "available"
    LANGUAGE_TAGGED = "language"


class VideoReference(BaseModel):
    """Canonical identifier for a YouTube video."""
    video_id: str
    source_url: str

    model_config = {"frozen": True}


class TranscriptResult(BaseModel):
    """Transcript text along with the strategy that produced it."""
    video_id: str
    title: str
    text: str
    source: str

    model_config = {"frozen": True}

    @property
    def length(self) -> int:
        return len(self.text)


class SummaryRequest(BaseModel):
    """Input for a single summarization call."""
    transcript: Optional[str] = None
    title: str = ""
    provider: Optional[str] = None
    api_key: Optional[str] = None
    model: Optional[str] = None

    @field_validator('provider')
    def normalize_provider(cls, v):
        return v.strip().lower() if v else v


class StructuredSummary(BaseModel):
    """Summary record extracted from a provider reply."""
    title: str = "Video Summary"
    summary: str
    tags: List[str] = Field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.summary.split(" "))


class VideoSummary(BaseModel):
    """Result of running the full pipeline for one video."""
    video: VideoReference
    transcript: TranscriptResult
    summary: StructuredSummary
    provider: str
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))


class NotionTokenRecord(BaseModel):
    """OAuth credentials for one installed Notion integration."""
    access_token: str
    refresh_token: Optional[str] = None
    bot_id: str
    workspace_id: Optional[str] = None
    workspace_name: Optional[str] = None
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()))


class NotionPublishTarget(BaseModel):
    """Database a summary page is written into."""
    database_id: str
    created: bool = False


class SavedPage(BaseModel):
    """Notion page created for a summary."""
    notion_url: str
    page_id: str
