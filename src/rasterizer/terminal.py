"""Small helper for writing frames to an ANSI terminal."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_CLEAR_SCREEN = "\033[2J"
_CURSOR_HOME = "\033[H"
_HIDE_CURSOR = "\033[?25l"
_SHOW_CURSOR = "\033[?25h"


class TerminalController:
    """Context manager that clears the screen between frames."""

    def __init__(self, stream: Optional[TextIO] = None, *, clear: bool = True) -> None:
        self._stream = stream
        self._clear = clear
        self._cursor_hidden = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __enter__(self) -> "TerminalController":
        if self._clear:
            self.stream.write(_CLEAR_SCREEN)
        self.stream.write(_HIDE_CURSOR)
        self.stream.flush()
        self._cursor_hidden = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._cursor_hidden:
            self.stream.write(_SHOW_CURSOR)
            self.stream.flush()
            self._cursor_hidden = False

    def draw(self, frame: str) -> None:
        if self._clear:
            self.stream.write(_CLEAR_SCREEN)
            self.stream.write(_CURSOR_HOME)
        self.stream.write(frame)
        self.stream.write("\n")
        self.stream.flush()
