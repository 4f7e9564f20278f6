"""
What the plugin needs from the application hosting it: transient notices and
a durable per-plugin data file.
"""

from abc import ABC, abstractmethod
from collections import deque
from pathlib import Path
from typing import Any, Deque, Dict, Optional

from note_summarizer.config import config
from note_summarizer.models.schemas import Notice
from note_summarizer.utils.helpers import ensure_dir, load_json, save_json
from note_summarizer.utils.logger import logging


class Host(ABC):
    """Capabilities a host application offers to a plugin."""

    @abstractmethod
    def notice(self, message: str, timeout: Optional[int] = None) -> Notice:
        """Show a transient message to the user."""

    @abstractmethod
    def load_data(self) -> Optional[Dict[str, Any]]:
        """Return the plugin's persisted data, or None if nothing was saved."""

    @abstractmethod
    def save_data(self, data: Dict[str, Any]) -> None:
        """Persist the plugin's data, replacing what was there."""


class LocalHost(Host):
    """A host that keeps plugin data in a JSON file on disk.

    Data lives in ``<data_dir>/plugins/<plugin_id>/data.json``. Notices are
    logged and the most recent ones are kept in :attr:`notices`.
    """

    def __init__(
        self,
        plugin_id: str = config.PLUGIN_ID,
        data_dir: Optional[Path] = None,
        history: int = 50,
    ):
        self.plugin_id = plugin_id
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
        self.notices: Deque[Notice] = deque(maxlen=history)

    @property
    def data_path(self) -> Path:
        return self.data_dir / "plugins" / self.plugin_id / "data.json"

    def notice(self, message: str, timeout: Optional[int] = None) -> Notice:
        notice = Notice(message=message, timeout=timeout or config.NOTICE_TIMEOUT_MS)
        logging.info(f"Notice: {message}")
        self.notices.append(notice)
        return notice

    def load_data(self) -> Optional[Dict[str, Any]]:
        if not self.data_path.is_file():
            logging.debug(f"No saved data at {self.data_path}")
            return None
        return load_json(str(self.data_path))

    def save_data(self, data: Dict[str, Any]) -> None:
        ensure_dir(str(self.data_path.parent))
        save_json(data, str(self.data_path))
        logging.debug(f"Saved plugin data to {self.data_path}")
