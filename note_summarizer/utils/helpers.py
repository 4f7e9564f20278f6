"""
Helper utility functions for the note summarizer.
"""

import os
import json
import re
from typing import Dict, Any, Optional
from pathlib import Path


YOUTUBE_URL_PATTERN = re.compile(
    r"^(?:https?://)?(?:www\.)?"
    r"(?:youtu\.be/|youtube\.com/(?:embed/|v/|watch\?v=|watch\?.+&v=))"
    r"([A-Za-z0-9_-]{11})(?:\S+)?\Z"
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the 11 character video ID from a YouTube URL.

    Supports youtu.be short links, watch, embed and /v/ URLs, and watch URLs
    carrying ``v=`` after other query parameters. The text must be the URL
    alone: surrounding whitespace or line breaks mean no match.

    Args:
        url: Text that should be a YouTube URL

    Returns:
        The video ID, or None when the text is not a supported YouTube URL
    """
    match = YOUTUBE_URL_PATTERN.match(url)
    if match:
        return match.group(1)
    return None


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)


def load_json(filepath: str) -> Dict[str, Any]:
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Loaded JSON data
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def ensure_dir(directory: str) -> None:
    """Ensure a directory exists, creating it if necessary."""
    os.makedirs(directory, exist_ok=True)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def read_note(path: Path) -> str:
    """Read a markdown note as text."""
    return Path(path).read_text(encoding="utf-8")


def write_note(path: Path, content: str) -> None:
    """Write a markdown note back to disk."""
    Path(path).write_text(content, encoding="utf-8")
