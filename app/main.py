"""
Main entry point for the YouTube to Notion Summarizer command line.
"""

import os
import argparse
import json
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

from app.models.schemas import SummaryRequest, VideoSummary
from app.core.video_resolver import resolve_video
from app.core.transcript_fetcher import TranscriptFetcher
from app.core.summarizer import TranscriptSummarizer, supported_providers
from app.config import config
from app.utils.error_handling import AppError
from app.utils.logger import logging


def save_summary(summary: VideoSummary, output_file: str = None):
    """Save the summary to a JSON file."""
    if output_file is None:
        output_dir = Path(config.SUMMARIES_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"{summary.video.video_id}_summary.json"
    else:
        output_file = Path(output_file)

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(summary.model_dump(), f, indent=2, default=str)

    logging.info(f"Summary saved to: {output_file}")
    return output_file


def summarize_youtube_video(
    url: str,
    provider: str,
    api_key: str,
    model: Optional[str] = None,
    output_file: str = None
) -> VideoSummary:
    """
    Process a YouTube video: fetch the transcript and summarize it.

    Args:
        url: YouTube video URL
        provider: AI provider tag (openai, anthropic or openrouter)
        api_key: API key for the provider
        model: Optional model override
        output_file: Optional file path to save the summary

    Returns:
        VideoSummary object
    """
    video = resolve_video(url)

    logging.info(f"Fetching transcript for: {url}")
    transcript = TranscriptFetcher().fetch(video.video_id)

    request = SummaryRequest(
        transcript=transcript.text,
        title=transcript.title,
        provider=provider,
        api_key=api_key,
        model=model,
    )
    structured = TranscriptSummarizer().summarize(request)

    summary = VideoSummary(
        video=video,
        transcript=transcript,
        summary=structured,
        provider=request.provider,
    )

    if output_file:
        save_summary(summary, output_file)
    else:
        save_summary(summary)

    return summary


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube to Notion Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--provider", default="openai", choices=supported_providers(),
                        help="AI provider used for summarization")
    parser.add_argument("--api-key", help="Provider API key (defaults to <PROVIDER>_API_KEY)")
    parser.add_argument("--model", help="Override the provider's default model")
    parser.add_argument("--output", help="Output file path for the summary")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    api_key = args.api_key or os.getenv(f"{args.provider.upper()}_API_KEY")
    if not api_key:
        parser.error(f"an API key is required (--api-key or {args.provider.upper()}_API_KEY)")

    try:
        summary = summarize_youtube_video(args.url, args.provider, api_key, args.model, args.output)
    except AppError as e:
        parser.exit(1, f"{e.code}: {e.message}\n")

    # Print the summary
    print("\n" + "=" * 80)
    print(summary.summary.title)
    print(f"Tags: {', '.join(summary.summary.tags)}")
    print("=" * 80)
    print(summary.summary.summary)
    print("=" * 80)


if __name__ == "__main__":
    main()
