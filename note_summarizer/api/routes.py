"""
API routes for the note summarizer.
"""

import traceback
from fastapi import APIRouter, HTTPException, Depends, Request, Path

from note_summarizer.api.schemas import (
    CommandRequest,
    CommandResponse,
    CommandListResponse,
    SettingsPayload,
    SettingTabResponse,
)
from note_summarizer.core.editor import TextEditor
from note_summarizer.core.plugin import SummarizerPlugin
from note_summarizer.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["summarizer"])


def get_plugin(request: Request) -> SummarizerPlugin:
    """The plugin instance loaded at startup."""
    return request.app.state.plugin


@router.get("/commands", response_model=CommandListResponse)
async def list_commands(plugin: SummarizerPlugin = Depends(get_plugin)):
    """List the commands the plugin registered."""
    return CommandListResponse(commands=plugin.list_commands())


@router.post("/commands/{command_id}", response_model=CommandResponse)
async def run_command(
    command_request: CommandRequest,
    command_id: str = Path(..., description="Command ID, e.g. summarize-webpage"),
    plugin: SummarizerPlugin = Depends(get_plugin),
):
    """
    Run a command against a note.

    - The selection runs from ``anchor`` to ``head``
    - The summary is inserted below the cursor
    - Guard and load failures come back as a notice with the note unchanged
    """
    if command_id not in plugin.commands:
        raise HTTPException(status_code=404, detail=f"Unknown command: {command_id}")

    editor = TextEditor(
        command_request.content,
        anchor=command_request.anchor,
        head=command_request.head,
    )

    try:
        notice = await plugin.run_command(command_id, editor)
    except Exception as e:
        logging.error(f"Error running {command_id}: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=502, detail=f"Error generating summary: {str(e)}")

    return CommandResponse(
        content=editor.get_value(),
        cursor=editor.get_cursor(),
        notice=notice,
    )


@router.get("/settings", response_model=SettingsPayload, response_model_by_alias=True)
async def get_settings(plugin: SummarizerPlugin = Depends(get_plugin)):
    """Current plugin settings."""
    return SettingsPayload(openai_api_key=plugin.settings.openai_api_key)


@router.put("/settings", response_model=SettingsPayload, response_model_by_alias=True)
async def update_settings(
    payload: SettingsPayload,
    plugin: SummarizerPlugin = Depends(get_plugin),
):
    """Replace the plugin settings and save them."""
    await plugin.setting_tab.on_change("openAIApiKey", payload.openai_api_key)
    return SettingsPayload(openai_api_key=plugin.settings.openai_api_key)


@router.get("/settings/tab", response_model=SettingTabResponse)
async def get_setting_tab(plugin: SummarizerPlugin = Depends(get_plugin)):
    """Controls of the settings tab with their current values."""
    return SettingTabResponse(controls=plugin.setting_tab.display())
