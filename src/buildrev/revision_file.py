"""Revision files baked into source archives, which carry no .git directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

DEFAULT_REVISION_FILE = "BUILD_COMMIT"


def read_revision_file(directory: str | os.PathLike, name: str = DEFAULT_REVISION_FILE) -> Optional[str]:
    """Return the revision stored in ``directory/name``, if there is a usable one."""
    path = Path(directory) / name
    if not path.is_file():
        return None
    revision = path.read_text(encoding="utf-8").strip()
    if not revision or revision == "dev":
        return None
    return revision


def write_revision_file(path: str | os.PathLike, revision: str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(f"{revision}\n", encoding="utf-8")
    return target
