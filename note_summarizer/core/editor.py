"""
Editor contract used by plugin commands, and a plain text implementation.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from note_summarizer.models.schemas import EditorPosition


class Editor(ABC):
    """The part of a note editor that commands work against."""

    @abstractmethod
    def get_value(self) -> str:
        """Return the whole document."""

    @abstractmethod
    def get_selection(self) -> str:
        """Return the selected text, empty when nothing is selected."""

    @abstractmethod
    def get_cursor(self) -> EditorPosition:
        """Return the cursor (the head of the selection)."""

    @abstractmethod
    def set_cursor(self, pos: EditorPosition) -> None:
        """Move the cursor and collapse the selection."""

    @abstractmethod
    def replace_range(
        self, text: str, from_pos: EditorPosition, to_pos: Optional[EditorPosition] = None
    ) -> None:
        """Replace the text between two positions, or insert at ``from_pos``."""

    @abstractmethod
    def line_count(self) -> int:
        """Number of lines in the document."""

    @abstractmethod
    def get_line(self, line: int) -> str:
        """Text of a single line, without its line break."""


class TextEditor(Editor):
    """An editor over an in-memory string.

    Positions outside the document are clipped to the nearest valid
    position, the way note editors treat them.
    """

    def __init__(
        self,
        content: str = "",
        anchor: Optional[EditorPosition] = None,
        head: Optional[EditorPosition] = None,
    ):
        self._lines: List[str] = content.split("\n")
        # A lone position is a cursor with an empty selection
        self.head = self.clip_pos(head or anchor or EditorPosition())
        self.anchor = self.clip_pos(anchor or self.head)

    def clip_pos(self, pos: EditorPosition) -> EditorPosition:
        last = len(self._lines) - 1
        if pos.line > last:
            return EditorPosition(line=last, ch=len(self._lines[last]))
        return EditorPosition(line=pos.line, ch=min(pos.ch, len(self._lines[pos.line])))

    def _offset(self, pos: EditorPosition) -> int:
        pos = self.clip_pos(pos)
        return sum(len(line) + 1 for line in self._lines[:pos.line]) + pos.ch

    def _position(self, offset: int) -> EditorPosition:
        for index, line in enumerate(self._lines):
            if offset <= len(line):
                return EditorPosition(line=index, ch=offset)
            offset -= len(line) + 1
        last = len(self._lines) - 1
        return EditorPosition(line=last, ch=len(self._lines[last]))

    def get_value(self) -> str:
        return "\n".join(self._lines)

    def get_selection(self) -> str:
        start, end = sorted((self._offset(self.anchor), self._offset(self.head)))
        return self.get_value()[start:end]

    def get_cursor(self) -> EditorPosition:
        return self.head.model_copy()

    def set_cursor(self, pos: EditorPosition) -> None:
        self.head = self.clip_pos(pos)
        self.anchor = self.head.model_copy()

    def replace_range(
        self, text: str, from_pos: EditorPosition, to_pos: Optional[EditorPosition] = None
    ) -> None:
        start = self._offset(from_pos)
        end = self._offset(to_pos) if to_pos is not None else start
        start, end = sorted((start, end))

        anchor_offset = self._shift(self._offset(self.anchor), start, end, len(text))
        head_offset = self._shift(self._offset(self.head), start, end, len(text))

        value = self.get_value()
        self._lines = (value[:start] + text + value[end:]).split("\n")

        self.anchor = self._position(anchor_offset)
        self.head = self._position(head_offset)

    @staticmethod
    def _shift(offset: int, start: int, end: int, inserted: int) -> int:
        # Positions after the replaced range move with the text
        if offset <= start:
            return offset
        if offset >= end:
            return offset + inserted - (end - start)
        return start + inserted

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line: int) -> str:
        return self._lines[line]

    def select_line(self, line: int) -> None:
        """Select the whole of ``line``."""
        line = min(line, len(self._lines) - 1)
        self.anchor = EditorPosition(line=line, ch=0)
        self.head = EditorPosition(line=line, ch=len(self._lines[line]))
