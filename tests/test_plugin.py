"""
Tests for the summarizer plugin commands and settings.
"""

import asyncio
import pytest
from unittest.mock import patch, AsyncMock

from langchain_core.documents import Document
from youtube_transcript_api import TranscriptsDisabled

from note_summarizer.core.editor import TextEditor
from note_summarizer.core.plugin import (
    MISSING_API_KEY,
    NOT_A_YOUTUBE_URL,
    NOTHING_TO_SUMMARIZE,
    VIDEO_LOAD_ERROR,
    WEBPAGE_LOAD_ERROR,
    SummarizerPlugin,
    load_summarization_chain,
)
from note_summarizer.models.schemas import EditorPosition


def editor_with_selection(content: str, line: int) -> TextEditor:
    editor = TextEditor(content)
    editor.select_line(line)
    return editor


@pytest.fixture
def mock_youtube_loader():
    """Fixture to mock the YoutubeLoader class used by the plugin."""
    with patch("note_summarizer.core.plugin.YoutubeLoader") as mock_loader_class:
        mock_loader_class.return_value.aload = AsyncMock(return_value=[
            Document(page_content="Hello world", metadata={"source": "dQw4w9WgXcQ"}),
        ])
        yield mock_loader_class


@pytest.fixture
def mock_article_loader():
    """Fixture to mock the ArticleLoader class used by the plugin."""
    with patch("note_summarizer.core.plugin.ArticleLoader") as mock_loader_class:
        mock_loader_class.return_value.aload = AsyncMock(return_value=[
            Document(page_content="word " * 1000, metadata={"title": "Words"}),
        ])
        yield mock_loader_class


def test_on_load_registers_commands(plugin):
    """Test that both commands and the settings tab are registered."""
    ids = [command.id for command in plugin.list_commands()]
    names = [command.name for command in plugin.list_commands()]

    assert ids == ["summarize-webpage", "summarize-youtube-video"]
    assert names == ["Summarize webpage", "Summarize YouTube video"]
    assert plugin.setting_tab is not None


def test_unknown_command(plugin):
    with pytest.raises(KeyError):
        asyncio.run(plugin.run_command("summarize-podcast", TextEditor("")))


@pytest.mark.parametrize("api_key", ["", "   "])
@pytest.mark.parametrize("command_id", ["summarize-webpage", "summarize-youtube-video"])
def test_missing_api_key_stops_before_loading(
    plugin, mock_article_loader, mock_youtube_loader, api_key, command_id
):
    """Test that nothing is loaded without an API key."""
    plugin.settings.openai_api_key = api_key
    editor = editor_with_selection("https://youtu.be/dQw4w9WgXcQ", 0)

    notice = asyncio.run(plugin.run_command(command_id, editor))

    assert notice.message == MISSING_API_KEY
    mock_article_loader.assert_not_called()
    mock_youtube_loader.assert_not_called()
    assert editor.get_value() == "https://youtu.be/dQw4w9WgXcQ"


def test_youtube_command_rejects_non_youtube_selection(plugin, mock_youtube_loader):
    """Test that a selection that is not a YouTube URL aborts with a notice."""
    editor = editor_with_selection("not a url", 0)

    notice = asyncio.run(plugin.run_command("summarize-youtube-video", editor))

    assert notice.message == NOT_A_YOUTUBE_URL
    mock_youtube_loader.assert_not_called()
    assert editor.get_value() == "not a url"


def test_youtube_command_rejects_selection_across_lines(plugin, mock_youtube_loader):
    """Test that a selection running past the URL's line break is not a URL."""
    editor = TextEditor(
        "https://youtu.be/dQw4w9WgXcQ\nnext",
        anchor=EditorPosition(line=0, ch=0),
        head=EditorPosition(line=1, ch=0),
    )

    notice = asyncio.run(plugin.run_command("summarize-youtube-video", editor))

    assert notice.message == NOT_A_YOUTUBE_URL
    mock_youtube_loader.assert_not_called()
    assert editor.get_value() == "https://youtu.be/dQw4w9WgXcQ\nnext"


def test_youtube_command_inserts_summary(plugin, mock_youtube_loader, fake_llm):
    """Test the YouTube flow end to end with the stuff strategy."""
    editor = editor_with_selection("# Watch later\nhttps://youtu.be/dQw4w9WgXcQ", 1)

    with patch(
        "note_summarizer.core.plugin.load_summarization_chain",
        wraps=load_summarization_chain,
    ) as mock_chain:
        notice = asyncio.run(plugin.run_command("summarize-youtube-video", editor))

    assert notice is None
    mock_youtube_loader.assert_called_once_with("dQw4w9WgXcQ", False, "en")
    assert mock_chain.call_args[0][1] == "stuff"
    assert fake_llm.call_args[0][0] == "sk-test"
    assert editor.get_value() == (
        "# Watch later\nhttps://youtu.be/dQw4w9WgXcQ\nThis is the summary."
    )
    assert editor.get_cursor() == EditorPosition(line=2, ch=len("This is the summary."))


def test_youtube_command_load_failure(plugin, mock_youtube_loader, fake_llm, host):
    """Test that a failed transcript fetch becomes a notice."""
    mock_youtube_loader.return_value.aload.side_effect = TranscriptsDisabled("dQw4w9WgXcQ")
    editor = editor_with_selection("https://youtu.be/dQw4w9WgXcQ", 0)

    notice = asyncio.run(plugin.run_command("summarize-youtube-video", editor))

    assert notice.message == VIDEO_LOAD_ERROR
    assert host.notices[-1].message == VIDEO_LOAD_ERROR
    fake_llm.assert_not_called()
    assert editor.get_value() == "https://youtu.be/dQw4w9WgXcQ"


def test_webpage_command_inserts_summary(plugin, mock_article_loader, fake_llm):
    """Test the webpage flow with splitting and the map_reduce strategy."""
    editor = editor_with_selection("  https://example.com/words  \n\nNext", 0)

    with patch(
        "note_summarizer.core.plugin.load_summarization_chain",
        wraps=load_summarization_chain,
    ) as mock_chain:
        notice = asyncio.run(plugin.run_command("summarize-webpage", editor))

    assert notice is None
    mock_article_loader.assert_called_once_with("https://example.com/words")
    assert mock_chain.call_args[0][1] == "map_reduce"
    assert editor.get_value() == "  https://example.com/words  \nThis is the summary.\nNext"
    assert editor.get_cursor() == EditorPosition(line=1, ch=len("This is the summary."))


def test_webpage_command_splits_into_chunks(plugin, mock_article_loader, fake_llm):
    """Test that webpages reach the chain as chunks of at most 2000 characters."""
    editor = editor_with_selection("https://example.com/words", 0)

    with patch("note_summarizer.core.plugin.SummarizerPlugin.summarize",
               new_callable=AsyncMock, return_value="Summary") as mock_summarize:
        asyncio.run(plugin.run_command("summarize-webpage", editor))

    docs = mock_summarize.call_args[0][0]
    assert len(docs) > 1
    assert all(len(doc.page_content) <= 2000 for doc in docs)


def test_webpage_command_nothing_to_summarize(plugin, mock_article_loader, fake_llm):
    """Test that a page without content aborts with a notice."""
    mock_article_loader.return_value.aload.return_value = []
    editor = editor_with_selection("https://example.com/empty", 0)

    notice = asyncio.run(plugin.run_command("summarize-webpage", editor))

    assert notice.message == NOTHING_TO_SUMMARIZE
    fake_llm.assert_not_called()


def test_webpage_command_load_failure(plugin, mock_article_loader, fake_llm):
    """Test that a failed page fetch becomes a notice."""
    mock_article_loader.return_value.aload.side_effect = ConnectionError("offline")
    editor = editor_with_selection("https://example.com/down", 0)

    notice = asyncio.run(plugin.run_command("summarize-webpage", editor))

    assert notice.message == WEBPAGE_LOAD_ERROR
    assert editor.get_value() == "https://example.com/down"


def test_summarization_failure_propagates(plugin, mock_youtube_loader):
    """Test that LLM errors reach the caller and leave the note alone."""
    editor = editor_with_selection("https://youtu.be/dQw4w9WgXcQ", 0)

    with patch("note_summarizer.core.plugin.load_summarization_chain") as mock_chain:
        mock_chain.return_value.ainvoke = AsyncMock(side_effect=RuntimeError("rate limited"))
        with patch("note_summarizer.core.plugin.get_llm"):
            with pytest.raises(RuntimeError):
                asyncio.run(plugin.run_command("summarize-youtube-video", editor))

    assert editor.get_value() == "https://youtu.be/dQw4w9WgXcQ"


def test_settings_round_trip(host):
    """Test that a key saved from the settings tab is loaded next time."""
    first = SummarizerPlugin(host)
    asyncio.run(first.on_load())
    asyncio.run(first.setting_tab.on_change("openAIApiKey", "sk-1234"))

    assert host.load_data() == {"openAIApiKey": "sk-1234"}

    second = SummarizerPlugin(host)
    asyncio.run(second.on_load())

    assert second.settings.openai_api_key == "sk-1234"


def test_settings_defaults_when_nothing_saved(host):
    plugin = SummarizerPlugin(host)
    asyncio.run(plugin.on_load())

    assert plugin.settings.openai_api_key == ""


def test_saved_values_override_defaults(host):
    host.save_data({"openAIApiKey": "sk-saved", "unused": True})

    plugin = SummarizerPlugin(host)
    asyncio.run(plugin.on_load())

    assert plugin.settings.openai_api_key == "sk-saved"


def test_setting_tab_display(plugin):
    """Test the settings tab control."""
    (control,) = plugin.setting_tab.display()

    assert control.name == "Open AI API Key"
    assert control.description == "For the magic"
    assert control.placeholder == "sk-1234"
    assert control.value == "sk-test"


def test_setting_tab_unknown_key(plugin):
    with pytest.raises(KeyError):
        asyncio.run(plugin.setting_tab.on_change("theme", "dark"))
