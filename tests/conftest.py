"""
Configuration for pytest tests.
"""

import asyncio
import pytest
from unittest.mock import patch

from langchain_core.language_models.fake_chat_models import FakeListChatModel

from note_summarizer.core.host import LocalHost
from note_summarizer.core.plugin import SummarizerPlugin


@pytest.fixture
def host(tmp_path):
    """A host that keeps plugin data under a temporary directory."""
    return LocalHost(plugin_id="note-summarizer", data_dir=tmp_path)


@pytest.fixture
def plugin(host):
    """A loaded plugin with an API key configured."""
    plugin = SummarizerPlugin(host)
    asyncio.run(plugin.on_load())
    plugin.settings.openai_api_key = "sk-test"
    return plugin


@pytest.fixture
def fake_llm():
    """Patch the plugin's chat model with a fake that always answers the same."""
    llm = FakeListChatModel(responses=["  This is the summary.  "])
    with patch("note_summarizer.core.plugin.get_llm", return_value=llm) as mock_get_llm:
        yield mock_get_llm


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/dQw4w9WgXcQ"
