"""
Core functionality for the note summarizer.

This package contains the plugin and its commands, the document loaders,
the summarization chain and the editor and host contracts.
"""
