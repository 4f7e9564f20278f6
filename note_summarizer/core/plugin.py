"""
The summarizer plugin: two editor commands that summarize the webpage or the
YouTube video behind the selected URL and insert the summary into the note.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from note_summarizer.config import config
from note_summarizer.core.editor import Editor
from note_summarizer.core.host import Host
from note_summarizer.core.loaders import ArticleLoader, YoutubeLoader
from note_summarizer.core.settings import SummarizerSettingTab, load_settings, save_settings
from note_summarizer.core.summarizer import get_llm, load_summarization_chain
from note_summarizer.models.schemas import (
    DEFAULT_SETTINGS,
    ChainType,
    CommandInfo,
    EditorPosition,
    Notice,
    SummaryConfig,
)
from note_summarizer.utils.error_handling import handle_loader_error, log_diagnostic_info
from note_summarizer.utils.helpers import extract_video_id, truncate_text
from note_summarizer.utils.logger import logging

MISSING_API_KEY = "Please fill in your Open AI API Key"
NOT_A_YOUTUBE_URL = "Please select a YouTube video URL"
WEBPAGE_LOAD_ERROR = "Error loading webpage"
VIDEO_LOAD_ERROR = "Error loading video"
NOTHING_TO_SUMMARIZE = "Nothing to summarize"

EditorCallback = Callable[[Editor], Awaitable[Optional[Notice]]]


@dataclass
class Command:
    """A command the host lists in its command palette."""
    id: str
    name: str
    editor_callback: EditorCallback

    def info(self) -> CommandInfo:
        return CommandInfo(id=self.id, name=self.name)


def insert_below_cursor(editor: Editor, text: str) -> None:
    """
    Insert text at the start of the line after the cursor and move the
    cursor to the end of the inserted text.

    When the cursor is on the last line a new line is added first.
    """
    cursor = editor.get_cursor()

    if cursor.line + 1 >= editor.line_count():
        line_end = EditorPosition(line=cursor.line, ch=len(editor.get_line(cursor.line)))
        editor.replace_range("\n", line_end)

    start = EditorPosition(line=cursor.line + 1, ch=0)
    editor.replace_range(text, start)

    lines = text.split("\n")
    editor.set_cursor(EditorPosition(line=start.line + len(lines) - 1, ch=len(lines[-1])))


class SummarizerPlugin:
    """Registers the summarize commands and owns the plugin settings."""

    def __init__(self, host: Host):
        self.host = host
        self.settings = DEFAULT_SETTINGS.model_copy()
        self.commands: Dict[str, Command] = {}
        self.setting_tab: Optional[SummarizerSettingTab] = None

    async def on_load(self):
        await self.load_settings()

        self.add_command(Command(
            id="summarize-webpage",
            name="Summarize webpage",
            editor_callback=self.summarize_webpage,
        ))
        self.add_command(Command(
            id="summarize-youtube-video",
            name="Summarize YouTube video",
            editor_callback=self.summarize_youtube_video,
        ))

        self.setting_tab = SummarizerSettingTab(self)
        logging.info(f"Loaded plugin with {len(self.commands)} commands")

    def on_unload(self):
        logging.info("Unloading plugin")

    async def load_settings(self):
        self.settings = load_settings(self.host)

    async def save_settings(self):
        save_settings(self.host, self.settings)

    def add_command(self, command: Command):
        self.commands[command.id] = command

    def list_commands(self) -> List[CommandInfo]:
        return [command.info() for command in self.commands.values()]

    async def run_command(self, command_id: str, editor: Editor) -> Optional[Notice]:
        """
        Run a registered command against an editor.

        Args:
            command_id: ID of the command
            editor: Editor holding the selection and cursor

        Returns:
            The notice shown to the user, or None when a summary was inserted
        """
        command = self.commands.get(command_id)
        if command is None:
            raise KeyError(f"Unknown command: {command_id}")
        logging.info(f"Running command {command_id}")
        return await command.editor_callback(editor)

    def has_api_key(self) -> bool:
        return self.settings.openai_api_key.strip() != ""

    async def summarize(self, docs: List[Document], chain_type: ChainType) -> str:
        """Summarize documents with the stored API key and return trimmed text."""
        summary_config = SummaryConfig(chain_type=chain_type)
        llm = get_llm(self.settings.openai_api_key, summary_config)
        chain = load_summarization_chain(llm, chain_type.value)

        try:
            result = await chain.ainvoke({"input_documents": docs})
        except Exception as e:
            logging.error(f"Summarization failed: {str(e)}")
            raise

        text = result["text"].strip()
        logging.info(f"Summary: {truncate_text(text)}")
        return text

    async def summarize_webpage(self, editor: Editor) -> Optional[Notice]:
        if not self.has_api_key():
            return self.host.notice(MISSING_API_KEY)

        url = editor.get_selection().strip()
        loader = ArticleLoader(url)
        splitter = RecursiveCharacterTextSplitter(
            chunk_size=config.CHUNK_SIZE,
            chunk_overlap=config.CHUNK_OVERLAP,
        )

        try:
            docs = await loader.aload()
        except Exception as e:
            return handle_loader_error(self.host, e, WEBPAGE_LOAD_ERROR, url)

        docs = splitter.split_documents(docs)
        log_diagnostic_info({"url": url, "chunks": len(docs)})

        if not docs:
            return self.host.notice(NOTHING_TO_SUMMARIZE)

        summary = await self.summarize(docs, ChainType.MAP_REDUCE)
        insert_below_cursor(editor, summary)
        return None

    async def summarize_youtube_video(self, editor: Editor) -> Optional[Notice]:
        if not self.has_api_key():
            return self.host.notice(MISSING_API_KEY)

        video_id = extract_video_id(editor.get_selection())
        if not video_id:
            return self.host.notice(NOT_A_YOUTUBE_URL)

        loader = YoutubeLoader(video_id, False, config.TRANSCRIPT_LANGUAGE)

        try:
            transcript = await loader.aload()
        except Exception as e:
            return handle_loader_error(self.host, e, VIDEO_LOAD_ERROR, video_id)

        log_diagnostic_info({"video_id": video_id, "characters": len(transcript[0].page_content)})

        summary = await self.summarize(transcript, ChainType.STUFF)
        insert_below_cursor(editor, summary)
        return None
