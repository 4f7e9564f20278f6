"""
Tests for the helper functions.
"""

import pytest

from note_summarizer.utils.helpers import extract_video_id, load_json, save_json, truncate_text


@pytest.mark.parametrize("url", [
    "https://youtu.be/dQw4w9WgXcQ",
    "youtu.be/dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "http://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
])
def test_extract_video_id(url):
    """Test that every supported URL shape yields the video ID."""
    assert extract_video_id(url) == "dQw4w9WgXcQ"


def test_extract_video_id_with_hyphen_and_underscore():
    assert extract_video_id("https://youtu.be/a-b_c-d_e-f") == "a-b_c-d_e-f"


@pytest.mark.parametrize("text", [
    "not a url",
    "",
    "https://vimeo.com/123456789",
    "https://youtu.be/short",
    "https://www.youtube.com/channel/UC1234567890",
    "https://example.com/watch?v=dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ and more",
    "  https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ\n",
    "https://youtu.be/dQw4w9WgXcQ\nnext",
    "https://youtu.be/dQw4w9WgXcQ ",
    "https://youtu.be/dQw4w9WgXcQ\u00a0x",
    "https://youtu.be/dQw4w9WgXcQ\u2003",
    "https://youtu.be/\u00e9\u00e9\u00e9\u00e9\u00e9\u00e9\u00e9\u00e9\u00e9\u00e9\u00e9",
])
def test_extract_video_id_no_match(text):
    """Test that anything else yields no ID."""
    assert extract_video_id(text) is None


def test_json_round_trip(tmp_path):
    path = tmp_path / "data.json"
    save_json({"openAIApiKey": "sk-1234"}, str(path))

    assert load_json(str(path)) == {"openAIApiKey": "sk-1234"}


def test_truncate_text():
    assert truncate_text("short") == "short"
    assert truncate_text("a" * 20, max_length=10) == "aaaaaaa..."
