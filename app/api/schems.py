from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys the frontend uses."""
    model_config = ConfigDict(populate_by_name=True)


class TranscriptRequest(CamelModel):
    """Model for requesting a video transcript."""
    url: Optional[str] = None


class TranscriptResponse(CamelModel):
    """Model for transcript responses."""
    title: str
    transcript: str
    video_id: str = Field(alias="videoId")
    transcript_length: int = Field(alias="transcriptLength")
    transcript_source: str = Field(alias="transcriptSource")


class SummarizeRequest(CamelModel):
    """Model for requesting a summary. Presence is checked by the summarizer."""
    transcript: Optional[str] = None
    title: Optional[str] = ""
    api_key: Optional[str] = Field(default=None, alias="apiKey")
    provider: Optional[str] = None
    model: Optional[str] = None


class SummaryResponse(CamelModel):
    """Model for summary responses."""
    title: str
    summary: str
    tags: List[str] = []
    provider: str
    word_count: int = Field(alias="wordCount")


class AuthResponse(CamelModel):
    """Model for Notion OAuth initiation responses."""
    auth_url: str = Field(alias="authUrl")
    message: str


class SaveRequest(CamelModel):
    """Model for saving a summary to Notion."""
    title: Optional[str] = None
    summary: Optional[str] = None
    tags: Optional[List[str]] = None
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    bot_id: Optional[str] = Field(default=None, alias="botId")


class SaveResponse(CamelModel):
    """Model for save responses."""
    success: bool = True
    notion_url: str = Field(alias="notionUrl")
    page_id: str = Field(alias="pageId")
    message: str = "Summary saved to Notion successfully"


class DatabasesResponse(CamelModel):
    """Model for database listing responses."""
    databases: List[Dict[str, Any]] = []
    count: int = 0


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str
    environment: str
