"""
Centralized error handling for the application.

Every failure a caller can see is an ``AppError`` subclass carrying a stable
``code`` string and an HTTP status. The FastAPI handlers below render them as
``{"error": ..., "code": ...}`` envelopes.
"""

import traceback
from typing import Optional, Dict, Any, List

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import config
from app.utils.logger import logging


class AppError(Exception):
    """Base class for errors that map onto a JSON error envelope."""

    status_code = 500
    code = "INTERNAL_ERROR"
    message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.message
        self.details = details
        self.extra = extra or {}
        super().__init__(self.message)

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        body = {"error": self.message, "code": self.code}
        body.update(self.extra)
        if self.details and include_details:
            body["details"] = self.details
        return body


# Validation errors (400)

class MissingURLError(AppError):
    status_code = 400
    code = "MISSING_URL"
    message = "YouTube URL is required"


class InvalidURLError(AppError):
    status_code = 400
    code = "INVALID_URL"
    message = "Invalid YouTube URL format"


class NoTranscriptAvailableError(AppError):
    status_code = 400
    code = "NO_TRANSCRIPT"
    message = "Transcript not available for this video"


class InvalidTranscriptError(AppError):
    status_code = 400
    code = "INVALID_TRANSCRIPT"
    message = "Transcript too short or empty"


class MissingFieldsError(AppError):
    status_code = 400
    code = "MISSING_FIELDS"
    message = "Missing required fields"


class TranscriptTooShortError(AppError):
    status_code = 400
    code = "TRANSCRIPT_TOO_SHORT"
    message = "Transcript too short for summarization"


class UnsupportedProviderError(AppError):
    status_code = 400
    code = "UNSUPPORTED_PROVIDER"
    message = "Unsupported AI provider"

    def __init__(self, supported: List[str], message: Optional[str] = None):
        super().__init__(message, extra={"supported": list(supported)})


class MissingCodeError(AppError):
    status_code = 400
    code = "MISSING_CODE"
    message = "Authorization code is required"


# Authorization errors (401)

class InvalidApiKeyError(AppError):
    status_code = 401
    code = "INVALID_API_KEY"
    message = "Invalid API key"


class NoAccessTokenError(AppError):
    status_code = 401
    code = "NO_ACCESS_TOKEN"
    message = "Notion access token not found. Please complete OAuth flow first."


class TokenExpiredError(AppError):
    status_code = 401
    code = "TOKEN_EXPIRED"
    message = "Notion access token expired. Please reconnect your account."


# Not found / forbidden

class VideoPrivateError(AppError):
    status_code = 403
    code = "VIDEO_PRIVATE"
    message = "Video is private or restricted"


class VideoNotFoundError(AppError):
    status_code = 404
    code = "VIDEO_NOT_FOUND"
    message = "Video not found or unavailable"


class NoPagesError(AppError):
    status_code = 404
    code = "NO_PAGES"
    message = "No Notion pages found. Please create a page in your workspace first."


class DatabaseNotFoundError(AppError):
    status_code = 404
    code = "DATABASE_NOT_FOUND"
    message = "Notion database not found or access denied"


# Rate limiting

class RateLimitExceededError(AppError):
    status_code = 429
    code = "RATE_LIMIT_EXCEEDED"
    message = "API rate limit exceeded"


# Upstream / configuration errors (500)

class TranscriptError(AppError):
    code = "TRANSCRIPT_ERROR"
    message = "Failed to fetch video transcript"


class SummarizationError(AppError):
    code = "SUMMARIZATION_ERROR"
    message = "Failed to generate summary"


class NotionNotConfiguredError(AppError):
    code = "NOTION_NOT_CONFIGURED"
    message = "Notion integration not configured. Please contact administrator."


class MissingClientCredentialsError(AppError):
    code = "MISSING_CLIENT_CREDENTIALS"
    message = "Notion client credentials not configured"


class OAuthExchangeError(AppError):
    code = "OAUTH_FAILED"
    message = "Failed to exchange Notion authorization code"

    def __init__(self, upstream_status: Optional[int] = None, details: Optional[str] = None):
        super().__init__(details=details)
        self.upstream_status = upstream_status


class SaveError(AppError):
    code = "SAVE_ERROR"
    message = "Failed to save summary to Notion"


class FetchDatabasesError(AppError):
    code = "FETCH_DATABASES_ERROR"
    message = "Failed to fetch Notion databases"


async def app_error_handler(request: Request, exc: AppError):
    """Render an AppError as its JSON envelope."""
    if exc.status_code >= 500:
        logging.error(f"{exc.code} on {request.url.path}: {exc.details or exc.message}")
    else:
        logging.warning(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=config.DEBUG),
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Return the envelope for unknown routes, and pass other HTTP errors through."""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Endpoint not found",
                "path": request.url.path,
                "method": request.method,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error: {str(exc)}")
    logging.error(traceback.format_exc())

    content = {"error": str(exc) if config.DEBUG else "Internal server error"}
    if config.DEBUG:
        content["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return JSONResponse(status_code=500, content=content)
