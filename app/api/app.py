"""
FastAPI application for the YouTube to Notion Summarizer.
"""

import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import config
from app.api.routes import router
from app.api.schems import HealthResponse
from app.utils.error_handling import (
    AppError,
    app_error_handler,
    global_exception_handler,
    not_found_handler,
)
from app.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for summarizing YouTube videos and saving the summaries to Notion",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses and log the request."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logging.info(
        f"{request.method} {request.url.path} {response.status_code} {process_time * 1000:.1f}ms"
    )
    return response


app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(StarletteHTTPException, not_found_handler)
app.add_exception_handler(Exception, global_exception_handler)


# Include API router
app.include_router(router)


@app.get("/health", response_model=HealthResponse)
async def health():
    """Report server status and basic information."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=config.APP_VERSION,
        environment=config.ENVIRONMENT,
    )


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube to Notion Summarizer API",
    }
