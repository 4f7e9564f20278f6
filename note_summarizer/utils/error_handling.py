"""
Centralized error handling for the plugin commands.
"""

import json
import traceback
from typing import Any, Dict

from note_summarizer.config import config
from note_summarizer.core.host import Host
from note_summarizer.models.schemas import Notice
from note_summarizer.utils.logger import logging


def handle_loader_error(host: Host, error: Exception, message: str, source: str) -> Notice:
    """
    Log a failed load and tell the user about it.

    Args:
        host: Host that shows the notice
        error: The exception that occurred
        message: Text of the notice
        source: The URL or video ID that failed to load

    Returns:
        The notice that was shown
    """
    logging.error(f"Error loading {source}: {str(error)}")
    logging.error(traceback.format_exc())
    return host.notice(message)


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")
