"""Diagnostic pretty-printer for arbitrary object graphs.

The gradio sample browser lives in `app.py`. This package contains:
- value classification and member access
- the dumper itself (indented, tab-aligned text with a depth ceiling)
- a sample harness with query samples that print through the dumper
"""
from .classify import Shape, classify
from .config import DumperSettings
from .dumper import ObjectDumper, dump, dumps
from .errors import DumperError, MemberAccessError

__all__ = [
    "DumperError",
    "DumperSettings",
    "MemberAccessError",
    "ObjectDumper",
    "Shape",
    "classify",
    "dump",
    "dumps",
]
