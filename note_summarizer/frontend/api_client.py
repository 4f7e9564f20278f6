"""
API client for communicating with the note summarizer backend.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin

from note_summarizer.config import config


class ApiClient:
    """Client for interacting with the note summarizer API."""

    def __init__(self, base_url: str = config.PUBLIC_URL):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def list_commands(self) -> List[Dict[str, str]]:
        """Commands registered by the plugin."""
        response = requests.get(self._url("commands"))
        response.raise_for_status()
        return response.json()["commands"]

    def run_command(
        self,
        command_id: str,
        content: str,
        anchor: Dict[str, int],
        head: Optional[Dict[str, int]] = None,
    ) -> Dict[str, Any]:
        """
        Run a command against a note.

        Args:
            command_id: Command to run
            content: Full text of the note
            anchor: Start of the selection, ``{"line": .., "ch": ..}``
            head: End of the selection (the cursor)

        Returns:
            Dictionary with the updated ``content``, ``cursor`` and ``notice``
        """
        payload: Dict[str, Any] = {"content": content, "anchor": anchor}
        if head is not None:
            payload["head"] = head

        response = requests.post(self._url(f"commands/{command_id}"), json=payload)

        if response.status_code == 502:
            return {"error": response.json().get("detail", "Error generating summary")}

        response.raise_for_status()
        return response.json()

    def update_settings(self, settings: Dict[str, str]) -> Dict[str, str]:
        """Save settings keyed by their stored name, e.g. ``openAIApiKey``."""
        response = requests.put(self._url("settings"), json=settings)
        response.raise_for_status()
        return response.json()

    def get_setting_tab(self) -> List[Dict[str, Any]]:
        """Controls to render in the settings panel."""
        response = requests.get(self._url("settings/tab"))
        response.raise_for_status()
        return response.json()["controls"]

