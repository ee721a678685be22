from buildrev.errors import CommandError, EncodingError, LaunchError, RevisionError
from buildrev.result import Revision, RevisionResult, Unavailable
from buildrev.revision import compose_revision, resolve_auto, resolve_auto_with_sources, resolve_bare
from buildrev.vcs.dependencies import TRACKED

__all__ = [
    "CommandError",
    "EncodingError",
    "LaunchError",
    "Revision",
    "RevisionError",
    "RevisionResult",
    "TRACKED",
    "Unavailable",
    "compose_revision",
    "resolve_auto",
    "resolve_auto_with_sources",
    "resolve_bare",
]
