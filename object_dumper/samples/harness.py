"""Discovery, metadata and invocation of dumper samples.

A harness is a class whose public methods named ``<PREFIX>...`` are samples.
Metadata is attached with the decorators below; a sample writes its output
through ``self.dump()`` and ``self.write_line()``, which go to a buffer
owned by the current invocation.
"""
from __future__ import annotations

import contextvars
import inspect
import io
import sys
import textwrap
import traceback
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, TextIO

from ..config import DumperSettings
from ..dumper import dump
from ..errors import SampleNotFoundError
from ..log import get_logger

logger = get_logger('samples')

_META_ATTR = '_sample_meta'

DEFAULT_CATEGORY = 'Miscellaneous'
DEFAULT_DESCRIPTION = 'See code.'

# Output of the sample running in the current thread or task.
_current_output: contextvars.ContextVar[Optional[TextIO]] = contextvars.ContextVar(
    'sample_output', default=None
)


def _meta(func: Callable) -> Dict[str, Any]:
    return func.__dict__.setdefault(_META_ATTR, {'linked_methods': [], 'linked_classes': []})


def _setter(key: str):
    def factory(value: str):
        def decorator(func):
            _meta(func)[key] = value
            return func
        return decorator
    return factory


category = _setter('category')
title = _setter('title')
description = _setter('description')


def linked_method(name: str):
    """Show the source of helper method ``name`` below the sample's code."""
    def decorator(func):
        # Decorators apply bottom-up; keep the order they are written in.
        _meta(func)['linked_methods'].insert(0, name)
        return func
    return decorator


def linked_class(name: str):
    """Show the source of nested class ``name`` below the sample's code."""
    def decorator(func):
        _meta(func)['linked_classes'].insert(0, name)
        return func
    return decorator


class Sample:
    def __init__(self, harness, method, number, category, title, description, code):
        self.harness = harness
        self.method = method
        self.number = number
        self.category = category
        self.title = title
        self.description = description
        self.code = code

    @property
    def name(self) -> str:
        return self.method.__name__

    def invoke(self) -> str:
        """Run the sample and return its output. Exceptions propagate."""
        buffer = io.StringIO()
        with self.harness.capture(buffer):
            self.harness.init_sample()
            self.method()
        return buffer.getvalue()

    def invoke_safe(self) -> str:
        """Run the sample; failures are handed to the harness and appear in the output."""
        buffer = io.StringIO()
        with self.harness.capture(buffer):
            try:
                self.harness.init_sample()
                self.method()
            except Exception as exc:
                self.harness.handle_exception(exc)
        return buffer.getvalue()

    def __str__(self):
        return self.title

    def __repr__(self):
        return f"Sample({self.number}, {self.name!r})"


class SampleHarness:
    TITLE = 'Samples'
    PREFIX = 'sample'

    def __init__(self, settings: Optional[DumperSettings] = None):
        self.settings = settings or DumperSettings()
        self._samples: Dict[int, Sample] = {}

        for number, method in enumerate(self._discover_methods(), start=1):
            meta = getattr(method, _META_ATTR, {'linked_methods': [], 'linked_classes': []})
            self._samples[number] = Sample(
                self,
                method,
                number,
                meta.get('category', DEFAULT_CATEGORY),
                meta.get('title', f"{self.PREFIX.capitalize()} Sample {number}"),
                meta.get('description', DEFAULT_DESCRIPTION),
                self._collect_code(method, meta),
            )
        logger.debug("Discovered %d samples on %s", len(self._samples), type(self).__name__)

    @property
    def title(self) -> str:
        return self.TITLE

    def _discover_methods(self) -> List[Callable]:
        prefix = self.PREFIX.lower()
        names: List[str] = []
        for klass in reversed(type(self).__mro__):
            if klass is object or klass is SampleHarness:
                continue
            for name, attr in vars(klass).items():
                if name in names or name.startswith('_') or not inspect.isfunction(attr):
                    continue
                if name.lower().startswith(prefix):
                    names.append(name)
        return [getattr(self, name) for name in names]

    def _collect_code(self, method: Callable, meta: Dict[str, Any]) -> str:
        blocks = [source_block(method, method.__name__, 'def')]
        for name in meta['linked_methods']:
            blocks.append(source_block(getattr(type(self), name, None), name, 'def'))
        for name in meta['linked_classes']:
            blocks.append(source_block(getattr(type(self), name, None), name, 'class'))
        return '\n'.join(blocks)

    def __getitem__(self, number: int) -> Sample:
        try:
            return self._samples[number]
        except KeyError:
            raise SampleNotFoundError(number) from None

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples.values())

    def __len__(self) -> int:
        return len(self._samples)

    def samples_by_category(self) -> Dict[str, List[Sample]]:
        groups: Dict[str, List[Sample]] = {}
        for sample in self:
            groups.setdefault(sample.category, []).append(sample)
        return groups

    @contextmanager
    def capture(self, buffer: TextIO) -> Iterator[TextIO]:
        token = _current_output.set(buffer)
        try:
            yield buffer
        finally:
            _current_output.reset(token)

    @property
    def output(self) -> TextIO:
        out = _current_output.get()
        return out if out is not None else sys.stdout

    def dump(self, value: Any, depth: int = 0):
        dump(value, depth, self.output, settings=self.settings)

    def write_line(self, text: str = ''):
        self.output.write(f"{text}\n")

    def init_sample(self):
        pass

    def handle_exception(self, exc: BaseException):
        logger.exception("Sample raised %s", type(exc).__name__)
        self.output.write(''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)))

    def run_all_samples(self) -> int:
        count = 0
        for sample in self:
            sample.invoke()
            count += 1
        return count


def source_block(obj: Any, name: str, keyword: str) -> str:
    """Dedented source of a function or class, starting at its ``def``/``class`` line."""
    if obj is None:
        return f"# {name} code not found\n"
    try:
        source = inspect.getsource(obj)
    except (OSError, TypeError):
        return f"# {name} code not found\n"

    lines = textwrap.dedent(source).splitlines()
    start = 0
    for i, line in enumerate(lines):
        if line.startswith((f"{keyword} ", f"async {keyword} ")):
            start = i
            break
    return '\n'.join(lines[start:]) + '\n'
