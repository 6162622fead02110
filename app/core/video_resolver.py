"""
Resolve YouTube URLs into canonical video identifiers.
"""

import re
from typing import Optional

from app.models.schemas import VideoReference
from app.utils.error_handling import InvalidURLError

# Earlier patterns take priority over the more general ones below them.
VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com\/watch\?v=|youtu\.be\/|youtube\.com\/embed\/)([^&\n?#]+)"),
    re.compile(r"youtube\.com\/v\/([^&\n?#]+)"),
    re.compile(r"youtube\.com\/watch\?.*v=([^&\n?#]+)"),
]


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL."""
    if not url:
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)

    return None


def resolve_video(url: str) -> VideoReference:
    """
    Build a VideoReference for a YouTube URL.

    Args:
        url: YouTube URL in any of the watch, short, embed or /v/ shapes

    Returns:
        VideoReference with the extracted video ID

    Raises:
        InvalidURLError: if the URL is empty or matches no known shape
    """
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidURLError()
    return VideoReference(video_id=video_id, source_url=url)
