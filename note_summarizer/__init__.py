"""
Note Summarizer.

A note-app plugin that summarizes the webpage or YouTube video behind the
selected URL and inserts the summary into the note.
"""

from note_summarizer.config import config

__version__ = config.APP_VERSION
