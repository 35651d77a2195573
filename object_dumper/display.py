from __future__ import annotations

import datetime
import enum
from typing import Any

NULL = 'null'
ENUMERABLE_PLACEHOLDER = '...'
COMPOSITE_PLACEHOLDER = '{ }'
CYCLE_MARKER = '<cycle>'


def format_scalar(value: Any, date_format: str = '%Y-%m-%d') -> str:
    """Return the display form of a scalar value.

    Dates and datetimes are shortened to the calendar date; the time of day
    is dropped.
    """
    if value is None:
        return NULL
    if isinstance(value, datetime.date):
        return value.strftime(date_format)
    if isinstance(value, enum.Enum):
        return value.name
    return str(value)
