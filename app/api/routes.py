"""
API routes for the YouTube to Notion Summarizer.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from app.api.schems import (
    AuthResponse,
    DatabasesResponse,
    SaveRequest,
    SaveResponse,
    SummarizeRequest,
    SummaryResponse,
    TranscriptRequest,
    TranscriptResponse,
)
from app.config import config
from app.core.notion_oauth import NotionOAuthBroker
from app.core.notion_publisher import NotionPublisher
from app.core.summarizer import TranscriptSummarizer
from app.core.transcript_fetcher import TranscriptFetcher
from app.core.video_resolver import resolve_video
from app.db.token_store import TokenStore, get_token_store
from app.models.schemas import SummaryRequest
from app.utils.error_handling import AppError, MissingURLError, TranscriptError
from app.utils.logger import logging

router = APIRouter(prefix="/api", tags=["summarizer"])


@router.post("/transcript", response_model=TranscriptResponse)
def fetch_transcript(request: Optional[TranscriptRequest] = None):
    """
    Fetch the transcript of a YouTube video.

    - Tries several caption strategies until one succeeds
    - Rejects transcripts too short to summarize
    """
    if request is None or not request.url:
        raise MissingURLError()

    video = resolve_video(request.url)

    try:
        result = TranscriptFetcher().fetch(video.video_id)
    except AppError:
        raise
    except Exception as e:
        logging.error(f"Error fetching transcript: {str(e)}")
        raise TranscriptError(details=str(e)) from e

    return TranscriptResponse(
        title=result.title or "Untitled Video",
        transcript=result.text,
        video_id=result.video_id,
        transcript_length=result.length,
        transcript_source=result.source,
    )


@router.post("/summarize", response_model=SummaryResponse)
def summarize_transcript(request: Optional[SummarizeRequest] = None):
    """Generate a structured summary with the caller's chosen AI provider."""
    request = request or SummarizeRequest()
    summary_request = SummaryRequest(
        transcript=request.transcript,
        title=request.title or "",
        provider=request.provider,
        api_key=request.api_key,
        model=request.model,
    )

    summary = TranscriptSummarizer().summarize(summary_request)

    return SummaryResponse(
        title=summary.title or summary_request.title,
        summary=summary.summary,
        tags=summary.tags,
        provider=summary_request.provider,
        word_count=summary.word_count,
    )


@router.post("/notion/auth", response_model=AuthResponse)
def notion_auth(store: TokenStore = Depends(get_token_store)):
    """Start the Notion OAuth flow using the server-side client configuration."""
    broker = NotionOAuthBroker(config, store)
    return AuthResponse(
        auth_url=broker.build_authorization_url(),
        message="Redirect user to this URL to complete OAuth flow",
    )


@router.get("/notion/callback")
def notion_callback(
    code: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    store: TokenStore = Depends(get_token_store),
):
    """
    Handle Notion's OAuth redirect.

    The browser is sent back to the dashboard; upstream failures are reported
    only through the redirect's query string.
    """
    broker = NotionOAuthBroker(config, store)
    return RedirectResponse(url=broker.callback_redirect(code), status_code=302)


@router.post("/notion/save", response_model=SaveResponse)
def save_to_notion(
    request: Optional[SaveRequest] = None,
    store: TokenStore = Depends(get_token_store),
):
    """Save a summary as a new page in the connected Notion workspace."""
    request = request or SaveRequest()
    saved = NotionPublisher(store).publish(
        title=request.title,
        summary=request.summary,
        tags=request.tags,
        video_url=request.video_url,
        bot_id=request.bot_id,
    )
    return SaveResponse(notion_url=saved.notion_url, page_id=saved.page_id)


@router.get("/notion/databases", response_model=DatabasesResponse)
def list_notion_databases(
    bot_id: Optional[str] = Query(None),
    store: TokenStore = Depends(get_token_store),
):
    """List the databases the stored Notion token can see."""
    databases = NotionPublisher(store).list_databases(bot_id)
    return DatabasesResponse(databases=databases, count=len(databases))
