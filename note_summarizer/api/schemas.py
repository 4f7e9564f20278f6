from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from note_summarizer.models.schemas import CommandInfo, EditorPosition, Notice, SettingControl


class CommandRequest(BaseModel):
    """The note a command runs against."""
    content: str
    anchor: Optional[EditorPosition] = None
    head: Optional[EditorPosition] = None


class CommandResponse(BaseModel):
    """The note after the command ran."""
    content: str
    cursor: EditorPosition
    notice: Optional[Notice] = None


class CommandListResponse(BaseModel):
    commands: List[CommandInfo]


class SettingsPayload(BaseModel):
    """Settings as they are read and written over the API."""
    model_config = ConfigDict(populate_by_name=True)

    openai_api_key: str = Field(default="", alias="openAIApiKey")


class SettingTabResponse(BaseModel):
    controls: List[SettingControl]
