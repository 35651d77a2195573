"""Indented, tab-aligned text rendering of arbitrary object graphs."""
from __future__ import annotations

import io
import sys
from typing import Any, List, Optional, Set, TextIO, Tuple

from .classify import Shape, classify, iter_elements, list_members
from .config import DumperSettings
from .display import (
    COMPOSITE_PLACEHOLDER,
    CYCLE_MARKER,
    ENUMERABLE_PLACEHOLDER,
    format_scalar,
)
from .line_writer import LineWriter
from .log import get_logger

logger = get_logger('dumper')


class ObjectDumper:
    """Walks one value and writes it to a sink.

    ``depth`` is a ceiling on the nesting level: the root value is always
    written, nested enumerables and member values are expanded only while
    ``level < depth``. Values already being expanded higher up the call
    stack are written as ``<cycle>`` instead of being expanded again.

    One instance serves a single dump call.
    """

    def __init__(self, sink: TextIO, depth: int, settings: Optional[DumperSettings] = None):
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        self.settings = settings or DumperSettings()
        self.writer = LineWriter(sink, self.settings.indent_width, self.settings.tab_width)
        self.depth = depth
        self.level = 0
        self._active: Set[int] = set()

    def write_object(self, prefix: str, value: Any):
        shape = classify(value)
        if shape is Shape.SCALAR:
            self._write_text_line(prefix, self._format(value, shape))
            return

        key = id(value)
        if key in self._active:
            logger.debug("Cycle through %s at level %d", type(value).__name__, self.level)
            self._write_text_line(prefix, CYCLE_MARKER)
            return

        self._active.add(key)
        try:
            if shape is Shape.ENUMERABLE:
                self._write_enumerable(prefix, value)
            else:
                self._write_composite(prefix, value)
        finally:
            self._active.discard(key)

    def _write_enumerable(self, prefix: str, value: Any):
        for element in iter_elements(value):
            if classify(element) is Shape.ENUMERABLE:
                self._write_text_line(prefix, ENUMERABLE_PLACEHOLDER)
                if self.level < self.depth:
                    self.level += 1
                    self.write_object(prefix, element)
                    self.level -= 1
            else:
                # Plain elements stay on the collection's own level.
                self.write_object(prefix, element)

    def _write_composite(self, prefix: str, value: Any):
        members: List[Tuple[str, Any, Shape]] = [
            (name, member, classify(member)) for name, member in list_members(value)
        ]
        if not members:
            self._write_text_line(prefix, COMPOSITE_PLACEHOLDER)
            return

        w = self.writer
        w.write_indent(self.level)
        w.write(prefix)
        for i, (name, member, shape) in enumerate(members):
            if i:
                w.write_tab()
            w.write(name)
            w.write('=')
            w.write(self._format(member, shape))
        w.write_line()

        if self.level >= self.depth:
            return
        for name, member, shape in members:
            if member is None or shape is Shape.SCALAR:
                continue
            self.level += 1
            self.write_object(f"{name}: ", member)
            self.level -= 1

    def _write_text_line(self, prefix: str, text: str):
        w = self.writer
        w.write_indent(self.level)
        w.write(prefix)
        w.write(text)
        w.write_line()

    def _format(self, value: Any, shape: Shape) -> str:
        if shape is Shape.ENUMERABLE:
            return ENUMERABLE_PLACEHOLDER
        if shape is Shape.COMPOSITE:
            return COMPOSITE_PLACEHOLDER
        return format_scalar(value, self.settings.date_format)


def dump(
    value: Any,
    depth: Optional[int] = None,
    sink: Optional[TextIO] = None,
    *,
    settings: Optional[DumperSettings] = None,
) -> None:
    """Write ``value`` to ``sink`` (standard output by default)."""
    settings = settings or DumperSettings()
    if depth is None:
        depth = settings.default_depth
    if sink is None:
        sink = sys.stdout
    logger.debug("Dumping %s with depth %d", type(value).__name__, depth)
    ObjectDumper(sink, depth, settings).write_object('', value)


def dumps(value: Any, depth: Optional[int] = None, *, settings: Optional[DumperSettings] = None) -> str:
    """Return what :func:`dump` would write, as a string."""
    buffer = io.StringIO()
    dump(value, depth, buffer, settings=settings)
    return buffer.getvalue()
