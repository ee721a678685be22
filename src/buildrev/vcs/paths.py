from __future__ import annotations

import os
from pathlib import Path

from buildrev.errors import EncodingError


def _posix_bytes_to_path(raw: bytes, command: str) -> Path:
    # POSIX paths are plain bytes; fsdecode round-trips anything via surrogateescape.
    return Path(os.fsdecode(raw))


def _text_bytes_to_path(raw: bytes, command: str) -> Path:
    try:
        return Path(raw.decode("utf-8"))
    except UnicodeDecodeError as err:
        raise EncodingError(command, "path") from err


bytes_to_path = _posix_bytes_to_path if os.name == "posix" else _text_bytes_to_path
"""Interpret raw bytes printed by ``command`` as a filesystem path."""


def strip_newline(raw: bytes) -> bytes:
    """Drop the single trailing newline git prints after a path."""
    return raw[:-1] if raw.endswith(b"\n") else raw
