"""
Settings storage and the settings tab of the plugin.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from note_summarizer.core.host import Host
from note_summarizer.models.schemas import DEFAULT_SETTINGS, SettingControl, SummarizerSettings
from note_summarizer.utils.logger import logging

if TYPE_CHECKING:
    from note_summarizer.core.plugin import SummarizerPlugin


def merge_settings(data: Optional[Dict[str, Any]]) -> SummarizerSettings:
    """Overlay persisted values on the defaults."""
    merged = DEFAULT_SETTINGS.to_data()
    merged.update(data or {})
    return SummarizerSettings.model_validate(merged)


def load_settings(host: Host) -> SummarizerSettings:
    logging.info("Loading settings")
    return merge_settings(host.load_data())


def save_settings(host: Host, settings: SummarizerSettings) -> None:
    host.save_data(settings.to_data())


class SummarizerSettingTab:
    """The settings tab: a single field for the OpenAI API key."""

    API_KEY = "openAIApiKey"

    def __init__(self, plugin: "SummarizerPlugin"):
        self.plugin = plugin

    def display(self) -> List[SettingControl]:
        return [
            SettingControl(
                key=self.API_KEY,
                name="Open AI API Key",
                description="For the magic",
                placeholder="sk-1234",
                value=self.plugin.settings.openai_api_key,
            )
        ]

    async def on_change(self, key: str, value: str) -> None:
        """Apply an edit from the tab and save the settings right away."""
        if key != self.API_KEY:
            raise KeyError(f"Unknown setting: {key}")
        self.plugin.settings.openai_api_key = value
        await self.plugin.save_settings()
