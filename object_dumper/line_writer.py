from __future__ import annotations

from typing import Optional, TextIO


class LineWriter:
    """Append-only text writer that tracks the column since the last newline.

    Indentation counts towards the column, so tab stops align on the full line.
    """

    def __init__(self, sink: TextIO, indent_width: int = 2, tab_width: int = 8):
        self.sink = sink
        self.indent_width = indent_width
        self.tab_width = tab_width
        self.column = 0

    def write(self, text: Optional[str]):
        if not text:
            return
        self.sink.write(text)
        newline = text.rfind('\n')
        if newline == -1:
            self.column += len(text)
        else:
            # Multi-line scalars restart the column count.
            self.column = len(text) - newline - 1

    def write_indent(self, level: int):
        self.write(' ' * (self.indent_width * level))

    def write_line(self):
        self.sink.write('\n')
        self.column = 0

    def write_tab(self):
        """Separate two fields: two spaces, then pad to the next tab stop."""
        self.write('  ')
        self.write(' ' * (-self.column % self.tab_width))
