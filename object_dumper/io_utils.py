from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .log import get_logger

logger = get_logger('io')


def _read_stream(stream) -> str:
    if hasattr(stream, 'seek'):
        stream.seek(0)
    content = stream.read()
    if isinstance(content, bytes):
        content = content.decode('utf-8')
    return content


def read_json_document(source) -> Any:
    """Parse JSON from an open stream, a path, or an uploaded file carrying a ``name``."""
    if source is None:
        raise ValueError("No file uploaded.")

    if hasattr(source, 'read'):
        return json.loads(_read_stream(source))

    if not isinstance(source, (str, Path)):
        source = source.name
    path = Path(source)
    logger.debug("Reading JSON document from %s", path)
    return json.loads(path.read_text(encoding='utf-8'))
