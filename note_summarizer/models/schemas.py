"""
Data models for the note summarizer.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from note_summarizer.config import config


class ChainType(str, Enum):
    """Summarization strategies."""
    STUFF = "stuff"
    MAP_REDUCE = "map_reduce"


class EditorPosition(BaseModel):
    """A zero based line/column position inside a note."""
    line: int = Field(default=0, ge=0)
    ch: int = Field(default=0, ge=0)


class Notice(BaseModel):
    """A transient message shown to the user."""
    message: str
    timeout: int = config.NOTICE_TIMEOUT_MS


class CommandInfo(BaseModel):
    """A user invocable command."""
    id: str
    name: str


class SummarizerSettings(BaseModel):
    """Settings persisted across sessions."""
    model_config = ConfigDict(populate_by_name=True)

    openai_api_key: str = Field(default="", alias="openAIApiKey")

    def to_data(self) -> dict:
        """Persisted layout of the settings."""
        return self.model_dump(by_alias=True)


DEFAULT_SETTINGS = SummarizerSettings()


class VideoMetadata(BaseModel):
    """Metadata attached to a transcript document."""
    source: str
    title: Optional[str] = None
    description: Optional[str] = None
    view_count: Optional[int] = None
    thumbnail_url: Optional[str] = None
    publish_date: Optional[datetime] = None
    length: Optional[int] = None
    author: Optional[str] = None


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    temperature: float = config.SUMMARY_TEMPERATURE
    chain_type: ChainType = ChainType.STUFF


class SettingControl(BaseModel):
    """A single text control of the settings tab."""
    key: str
    name: str
    description: str
    placeholder: str
    value: str
    secret: bool = True
