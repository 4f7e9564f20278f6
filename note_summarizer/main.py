"""
Command line host for the note summarizer: runs plugin commands against
markdown notes on disk.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from note_summarizer.config import config
from note_summarizer.core.editor import TextEditor
from note_summarizer.core.host import LocalHost
from note_summarizer.core.plugin import SummarizerPlugin
from note_summarizer.utils.helpers import read_note, write_note
from note_summarizer.utils.logger import logging


async def run_on_note(plugin: SummarizerPlugin, command_id: str, note: Path, line: int) -> int:
    """
    Select a line of a note, run a command on it and save the note.

    Args:
        plugin: A loaded plugin
        command_id: Command to run
        note: Path to the markdown note
        line: Zero based line holding the URL

    Returns:
        Process exit code
    """
    editor = TextEditor(read_note(note))
    if not 0 <= line < editor.line_count():
        print(f"{note} has only {editor.line_count()} lines", file=sys.stderr)
        return 2
    editor.select_line(line)

    notice = await plugin.run_command(command_id, editor)
    if notice is not None:
        print(notice.message)
        return 1

    write_note(note, editor.get_value())
    logging.info(f"Summary written to {note}")
    return 0


async def _main(args: argparse.Namespace) -> int:
    config.initialize()
    plugin = SummarizerPlugin(LocalHost(data_dir=args.data_dir))
    await plugin.on_load()

    try:
        if args.command == "set-key":
            await plugin.setting_tab.on_change("openAIApiKey", args.key)
            print("API key saved")
            return 0

        if args.command == "commands":
            for command in plugin.list_commands():
                print(f"{command.id}\t{command.name}")
            return 0

        return await run_on_note(plugin, args.command, Path(args.note), args.line)
    finally:
        plugin.on_unload()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="note-summarizer",
        description="Summarize the webpage or YouTube video linked from a note",
    )
    parser.add_argument("--data-dir", type=Path, default=config.DATA_DIR,
                        help="Directory holding plugin data")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command_id, help_text in (
        ("summarize-webpage", "Summarize the webpage whose URL is on LINE"),
        ("summarize-youtube-video", "Summarize the YouTube video whose URL is on LINE"),
    ):
        sub = subparsers.add_parser(command_id, help=help_text)
        sub.add_argument("note", help="Markdown note to edit")
        sub.add_argument("--line", type=int, required=True, help="Zero based line holding the URL")

    set_key = subparsers.add_parser("set-key", help="Store the OpenAI API key")
    set_key.add_argument("key", help="OpenAI API key")

    subparsers.add_parser("commands", help="List available commands")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the plugin from the command line."""
    args = build_parser().parse_args(argv)
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
