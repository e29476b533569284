from __future__ import annotations

import logging
import os

from .config import MAX_INPUT_BYTES
from .errors import InputTooLargeError
from .performance import utf8_length

logger = logging.getLogger(__name__)


def _decode(content) -> str:
    if isinstance(content, bytes):
        # utf-8-sig drops a leading BOM, which json.loads would reject
        return content.decode('utf-8-sig')
    return content


def _check_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        logger.warning("Rejected upload of %d bytes (limit %d)", size, max_bytes)
        raise InputTooLargeError(size, max_bytes)


def read_json_text(file_obj, max_bytes: int = MAX_INPUT_BYTES) -> str:
    """Read raw JSON text from an uploaded file or file path.

    The size gate runs before the content is parsed; the text itself is
    returned unparsed so the caller can validate it with diagnostics.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read(max_bytes + 1)
        size = utf8_length(content) if isinstance(content, str) else len(content)
        _check_size(size, max_bytes)
        return _decode(content)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    _check_size(os.path.getsize(path), max_bytes)
    with open(path, 'rb') as f:
        return _decode(f.read())
