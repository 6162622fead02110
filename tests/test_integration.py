"""
Integration tests for the summarization pipeline.
"""

import json
import pytest
from unittest.mock import patch

from app.main import save_summary, summarize_youtube_video
from app.models.schemas import StructuredSummary, TranscriptResult, VideoSummary
from app.utils.error_handling import InvalidURLError


@pytest.fixture
def mock_transcript_fetcher(long_transcript):
    """Fixture to mock the TranscriptFetcher class."""
    with patch('app.main.TranscriptFetcher') as mock_fetcher_class:
        mock_instance = mock_fetcher_class.return_value
        mock_instance.fetch.return_value = TranscriptResult(
            video_id="V3TUEeB0kW0",
            title="YouTube Video V3TUEeB0kW0",
            text=long_transcript,
            source="auto-generated",
        )
        yield mock_instance


@pytest.fixture
def mock_transcript_summarizer():
    """Fixture to mock the TranscriptSummarizer class."""
    with patch('app.main.TranscriptSummarizer') as mock_summarizer_class:
        mock_instance = mock_summarizer_class.return_value
        mock_instance.summarize.return_value = StructuredSummary(
            title="This is an integration test summary",
            summary="- Point one\n- Point two",
            tags=["Education", "Technology", "Tutorial"],
        )
        yield mock_instance


@pytest.fixture
def mock_save_summary():
    """Fixture to mock the save_summary function."""
    with patch('app.main.save_summary') as mock_save:
        mock_save.return_value = "/tmp/V3TUEeB0kW0_summary.json"
        yield mock_save


def test_summarize_youtube_video(
    test_video_url,
    mock_transcript_fetcher,
    mock_transcript_summarizer,
    mock_save_summary
):
    """Test the end-to-end YouTube video summarization process."""
    summary = summarize_youtube_video(
        url=test_video_url,
        provider="Anthropic",
        api_key="sk-test",
    )

    mock_transcript_fetcher.fetch.assert_called_once_with("V3TUEeB0kW0")
    mock_transcript_summarizer.summarize.assert_called_once()
    mock_save_summary.assert_called_once()

    request = mock_transcript_summarizer.summarize.call_args[0][0]
    assert request.provider == "anthropic"
    assert request.title == "YouTube Video V3TUEeB0kW0"
    assert request.model is None

    assert isinstance(summary, VideoSummary)
    assert summary.video.video_id == "V3TUEeB0kW0"
    assert summary.summary.title == "This is an integration test summary"
    assert summary.provider == "anthropic"


def test_summarize_youtube_video_with_model(
    test_video_url,
    mock_transcript_fetcher,
    mock_transcript_summarizer,
    mock_save_summary
):
    """Test that a model override reaches the summarizer."""
    summarize_youtube_video(
        url=test_video_url,
        provider="openrouter",
        api_key="sk-test",
        model="anthropic/claude-3.5-sonnet",
    )

    request = mock_transcript_summarizer.summarize.call_args[0][0]
    assert request.model == "anthropic/claude-3.5-sonnet"


def test_summarize_youtube_video_with_custom_output(
    test_video_url,
    mock_transcript_fetcher,
    mock_transcript_summarizer,
    mock_save_summary
):
    """Test summarization with custom output file."""
    custom_output = "/tmp/custom_summary.json"
    summarize_youtube_video(
        url=test_video_url,
        provider="openai",
        api_key="sk-test",
        output_file=custom_output
    )

    mock_save_summary.assert_called_once_with(mock_save_summary.call_args[0][0], custom_output)


def test_invalid_url_stops_pipeline(mock_transcript_fetcher, mock_transcript_summarizer):
    with pytest.raises(InvalidURLError):
        summarize_youtube_video(url="https://example.com", provider="openai", api_key="k")

    mock_transcript_fetcher.fetch.assert_not_called()
    mock_transcript_summarizer.summarize.assert_not_called()


def test_save_summary_writes_json(
    tmp_path,
    test_video_url,
    mock_transcript_fetcher,
    mock_transcript_summarizer
):
    summary = summarize_youtube_video(
        url=test_video_url,
        provider="openai",
        api_key="sk-test",
        output_file=str(tmp_path / "ignored.json"),
    )
    output = save_summary(summary, str(tmp_path / "summary.json"))

    with open(output, encoding="utf-8") as f:
        data = json.load(f)

    assert data["video"]["video_id"] == "V3TUEeB0kW0"
    assert data["summary"]["tags"] == ["Education", "Technology", "Tutorial"]
    assert data["transcript"]["source"] == "auto-generated"
