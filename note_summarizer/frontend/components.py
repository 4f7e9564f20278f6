"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Dict, Any, List, Callable, Optional

from note_summarizer.config import config


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="Note Summarizer",
        page_icon="📝",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("📝 Note Summarizer")
    st.markdown("""
    Put a webpage or YouTube URL on a line of your note and summarize it in place.
    """)
    st.divider()


def settings_panel(controls: List[Dict[str, Any]], on_change: Callable[[str, str], None]):
    """
    Display the plugin settings in the sidebar.

    Args:
        controls: Setting controls as returned by the API
        on_change: Called with the setting key and the new value
    """
    with st.sidebar:
        st.markdown("## Settings")
        for control in controls:
            key = control["key"]
            st.text_input(
                control["name"],
                value=control["value"],
                placeholder=control["placeholder"],
                help=control["description"],
                type="password" if control.get("secret") else "default",
                key=f"setting_{key}",
                on_change=lambda k=key: on_change(k, st.session_state[f"setting_{k}"]),
            )


def api_url_input() -> str:
    """Sidebar field for the API location."""
    with st.sidebar:
        return st.text_input("API URL", value=config.PUBLIC_URL, key="api_url")


def note_editor(content: str) -> str:
    """
    Display the note being edited.

    Returns:
        The note text as currently entered
    """
    return st.text_area("Note", value=content, height=400)


def line_picker(content: str) -> Optional[int]:
    """
    Let the user pick the line holding the URL.

    Returns:
        Zero based line index, or None for an empty note
    """
    lines = content.split("\n")
    if not content.strip():
        return None
    return st.selectbox(
        "Line with the URL",
        options=list(range(len(lines))),
        format_func=lambda i: f"{i + 1}: {lines[i][:80]}",
    )


def command_buttons(commands: List[Dict[str, str]]) -> Optional[str]:
    """
    Display one button per command.

    Returns:
        ID of the clicked command, if any
    """
    columns = st.columns(max(len(commands), 1))
    for column, command in zip(columns, commands):
        with column:
            if st.button(command["name"], key=f"cmd_{command['id']}"):
                return command["id"]
    return None


def loading_spinner(message: str = "Processing..."):
    """Display a loading spinner with a message."""
    return st.spinner(message)


def display_notice(notice: Dict[str, Any]):
    """Show a transient notice."""
    st.toast(notice["message"])


def display_error(message: str):
    """Display an error message."""
    st.error(message)
