"""Dumper settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_DEPTH = "OBJECT_DUMPER_DEPTH"
ENV_INDENT = "OBJECT_DUMPER_INDENT"
ENV_TAB_WIDTH = "OBJECT_DUMPER_TAB_WIDTH"
ENV_DATE_FORMAT = "OBJECT_DUMPER_DATE_FORMAT"


@dataclass(frozen=True)
class DumperSettings:
    """Immutable formatting defaults.

    ``default_depth`` is used when a dump call passes no depth.
    ``tab_width`` is the column multiple sibling fields are padded to.
    """

    default_depth: int = 0
    indent_width: int = 2
    tab_width: int = 8
    date_format: str = "%Y-%m-%d"

    def __post_init__(self):
        if self.default_depth < 0:
            raise ValueError(f"default_depth must be >= 0, got {self.default_depth}")
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be >= 0, got {self.indent_width}")
        if self.tab_width < 1:
            raise ValueError(f"tab_width must be >= 1, got {self.tab_width}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DumperSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            default_depth=_int_from_env(env, ENV_DEPTH, defaults.default_depth),
            indent_width=_int_from_env(env, ENV_INDENT, defaults.indent_width),
            tab_width=_int_from_env(env, ENV_TAB_WIDTH, defaults.tab_width),
            date_format=env.get(ENV_DATE_FORMAT) or defaults.date_format,
        )


def _int_from_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
