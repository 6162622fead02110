"""
Tests for the transcript fetcher module.
"""

import pytest
from unittest.mock import MagicMock

from app.core.transcript_fetcher import (
    AllStrategiesFailed,
    TranscriptFetcher,
    first_successful,
)
from app.utils.error_handling import (
    InvalidTranscriptError,
    NoTranscriptAvailableError,
    VideoNotFoundError,
    VideoPrivateError,
)

CAPTION = "This is a caption fragment long enough to pass the minimum length check."


@pytest.fixture
def mock_api():
    """youtube-transcript-api client with no transcripts by default."""
    api = MagicMock()
    api.fetch.side_effect = Exception("No transcripts were found")
    api.list.side_effect = Exception("No transcripts were found")
    return api


def test_first_strategy_wins(mock_api, make_snippets):
    """Test that the language-pinned strategy is used when it succeeds."""
    mock_api.fetch.side_effect = None
    mock_api.fetch.return_value = make_snippets("  Hello", "world.", CAPTION + "  ")

    result = TranscriptFetcher(api=mock_api).fetch("abc123")

    assert result.source == "auto-generated"
    assert result.text == f"Hello world. {CAPTION}"
    assert result.title == "YouTube Video abc123"
    assert result.video_id == "abc123"
    mock_api.fetch.assert_called_once_with("abc123", languages=("en-US", "en"))
    mock_api.list.assert_not_called()


def test_falls_back_to_any_available_transcript(mock_api, make_snippets):
    transcript = MagicMock()
    transcript.fetch.return_value = make_snippets(CAPTION)
    mock_api.list.side_effect = None
    mock_api.list.return_value = [transcript]

    result = TranscriptFetcher(api=mock_api).fetch("abc123")

    assert result.source == "available"
    assert result.text == CAPTION
    assert mock_api.fetch.call_count == 1


def test_falls_back_to_language_loop(mock_api, make_snippets):
    """Test that the per-language loop stops at the first success."""
    def fetch(video_id, languages):
        if list(languages) == ["en-GB"]:
            return make_snippets(CAPTION)
        raise Exception("No transcripts were found")

    mock_api.fetch.side_effect = fetch

    result = TranscriptFetcher(api=mock_api).fetch("abc123")

    assert result.source == "language-en-GB"
    attempted = [call.kwargs["languages"] for call in mock_api.fetch.call_args_list]
    assert attempted == [("en-US", "en"), ["en-US"], ["en-GB"]]


def test_empty_strategy_result_is_skipped(mock_api, make_snippets):
    mock_api.fetch.side_effect = [make_snippets(" ", ""), make_snippets(CAPTION)]

    result = TranscriptFetcher(api=mock_api).fetch("abc123")

    assert result.source == "language-en-US"


def test_all_strategies_exhausted(mock_api):
    """Test that exhausting every strategy reports a missing transcript."""
    with pytest.raises(NoTranscriptAvailableError) as excinfo:
        TranscriptFetcher(api=mock_api).fetch("abc123")

    assert excinfo.value.code == "NO_TRANSCRIPT"
    # pinned + 4 languages; the unconstrained strategy goes through list()
    assert mock_api.fetch.call_count == 5
    assert mock_api.list.call_count == 1


@pytest.mark.parametrize("strategy_index", [0, 1, 2])
def test_short_transcript_rejected_for_any_strategy(mock_api, make_snippets, strategy_index):
    short = make_snippets("too", "short")
    if strategy_index == 0:
        mock_api.fetch.side_effect = None
        mock_api.fetch.return_value = short
    elif strategy_index == 1:
        transcript = MagicMock()
        transcript.fetch.return_value = short
        mock_api.list.side_effect = None
        mock_api.list.return_value = [transcript]
    else:
        mock_api.fetch.side_effect = [Exception("nope"), short]

    with pytest.raises(InvalidTranscriptError) as excinfo:
        TranscriptFetcher(api=mock_api).fetch("abc123")

    assert excinfo.value.code == "INVALID_TRANSCRIPT"


def test_unavailable_video(mock_api):
    mock_api.fetch.side_effect = Exception("Video unavailable")
    mock_api.list.side_effect = Exception("Video unavailable")

    with pytest.raises(VideoNotFoundError):
        TranscriptFetcher(api=mock_api).fetch("abc123")


def test_private_video(mock_api):
    mock_api.fetch.side_effect = Exception("Private video")
    mock_api.list.side_effect = Exception("Private video")

    with pytest.raises(VideoPrivateError):
        TranscriptFetcher(api=mock_api).fetch("abc123")


def test_first_successful_is_lazy():
    calls = []

    def attempt(name, text):
        def run():
            calls.append(name)
            snippet = MagicMock()
            snippet.text = text
            return [snippet]
        return run

    source, text = first_successful([
        ("one", attempt("one", "")),
        ("two", attempt("two", "found")),
        ("three", attempt("three", "never")),
    ])

    assert (source, text) == ("two", "found")
    assert calls == ["one", "two"]


def test_first_successful_collects_errors():
    def boom():
        raise RuntimeError("boom")

    with pytest.raises(AllStrategiesFailed) as excinfo:
        first_successful([("a", boom), ("b", boom)])

    assert [source for source, _ in excinfo.value.errors] == ["a", "b"]
    assert str(excinfo.value.last_error) == "boom"
