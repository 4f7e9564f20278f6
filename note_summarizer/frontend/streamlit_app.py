"""
Streamlit front end for the note summarizer.
"""

import streamlit as st
from dotenv import load_dotenv

from note_summarizer.frontend.api_client import ApiClient
from note_summarizer.frontend.components import (
    header, settings_panel, api_url_input, note_editor, line_picker,
    command_buttons, loading_spinner, display_notice, display_error,
)


load_dotenv()


def init_session_state(api_url: str):
    """Initialize session state variables."""
    client = st.session_state.get("api_client")
    if client is None or client.base_url != api_url:
        st.session_state.api_client = ApiClient(api_url)

    if "note" not in st.session_state:
        st.session_state.note = "https://www.youtube.com/watch?v=dQw4w9WgXcQ\n"


def save_setting(key: str, value: str):
    """Persist a settings edit straight away."""
    client = st.session_state.api_client
    try:
        client.update_settings({key: value})
        st.toast("Settings saved")
    except Exception as e:
        display_error(f"Error saving settings: {str(e)}")


def run_command(command_id: str, content: str, line: int):
    """
    Run a command with the given line selected and store the updated note.

    Args:
        command_id: Command to run
        content: Current note text
        line: Zero based line holding the URL
    """
    client = st.session_state.api_client
    lines = content.split("\n")

    with loading_spinner("Summarizing..."):
        result = client.run_command(
            command_id,
            content,
            anchor={"line": line, "ch": 0},
            head={"line": line, "ch": len(lines[line])},
        )

    if "error" in result:
        display_error(result["error"])
        return

    if result.get("notice"):
        display_notice(result["notice"])
        return

    st.session_state.note = result["content"]
    st.rerun()


def main():
    """Main application entry point."""
    header()
    api_url = api_url_input()
    init_session_state(api_url)

    client = st.session_state.api_client

    try:
        controls = client.get_setting_tab()
        commands = client.list_commands()
    except Exception as e:
        display_error(f"Cannot reach the API at {api_url}: {str(e)}")
        return

    settings_panel(controls, save_setting)

    content = note_editor(st.session_state.note)
    line = line_picker(content)

    command_id = command_buttons(commands)
    if command_id is not None:
        if line is None:
            display_notice({"message": "Write a URL in the note first"})
        else:
            run_command(command_id, content, line)


if __name__ == "__main__":
    main()
