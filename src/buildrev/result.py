from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

MODIFIED_MARKER = "+"


@dataclass(frozen=True)
class Revision:
    """A resolved revision: tag name or short hash, plus the dirty flag."""

    base: str
    modified: bool = False

    def __str__(self) -> str:
        return f"{self.base}{MODIFIED_MARKER if self.modified else ''}"


@dataclass(frozen=True)
class Unavailable:
    """No revision could be determined, and that is not an error."""

    reason: str


RevisionResult = Union[Revision, Unavailable]


def as_optional(result: RevisionResult) -> Optional[str]:
    if isinstance(result, Unavailable):
        return None
    return str(result)
