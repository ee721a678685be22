"""
Revision lookup for build scripts.

Produces either the tag HEAD sits on or the short commit hash, with a
trailing ``+`` when tracked files carry uncommitted changes, and writes
the ``rerun-if-changed`` directives a build tool needs to invalidate its
cached result. Callers should invoke this once per build and keep the
result; nothing is cached here.

Missing git or a directory outside any repository is not an error: a
``warning=`` directive is written and no revision is returned. Anything
that goes wrong after the repository check raises ``RevisionError``.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, TextIO

from buildrev.directives import DirectiveWriter
from buildrev.errors import RevisionError
from buildrev.result import Revision, RevisionResult, as_optional
from buildrev.vcs.dependencies import TRACKED, SourceSelection, emit_rerun_if_changed
from buildrev.vcs.probe import probe_repository
from buildrev.vcs.runner import GitRunner

logger = logging.getLogger(__name__)

TAG_ARGS = ("describe", "--exact-match", "--tags", "HEAD")
SHORT_HASH_ARGS = ("rev-parse", "--short", "HEAD")
STATUS_ARGS = ("status", "--porcelain", "--untracked-files=no")


def current_base(runner: GitRunner, directory: str | os.PathLike) -> str:
    """Tag name if HEAD is exactly on a tag, otherwise the short hash."""
    try:
        return runner.output(directory, TAG_ARGS).strip()
    except RevisionError as err:
        logger.debug("No exact tag at HEAD (%s); using short hash", err)
    return runner.output(directory, SHORT_HASH_ARGS).strip()


def has_local_changes(runner: GitRunner, directory: str | os.PathLike) -> bool:
    return bool(runner.run_capturing(directory, STATUS_ARGS).strip())


def compose_revision(
    directory: str | os.PathLike,
    writer: DirectiveWriter,
    *,
    sources: SourceSelection = None,
    detect_changes: bool = True,
    runner: Optional[GitRunner] = None,
) -> RevisionResult:
    """
    Resolve the revision of the repository containing ``directory``.

    Args:
        directory: Any directory inside the working tree.
        writer: Receives the ``rerun-if-changed`` and ``warning`` directives.
        sources: Extra paths to watch; ``None`` for metadata only, an
            iterable of paths relative to the working tree, or ``TRACKED``
            for every tracked file.
        detect_changes: Append the modified marker when the tree is dirty.
        runner: Git runner to use; defaults to ``git`` on PATH.

    Returns:
        ``Revision`` on success or ``Unavailable`` when git or the
        repository is missing.

    Raises:
        RevisionError: If git fails once the repository is confirmed.
    """
    runner = runner or GitRunner()

    unavailable = probe_repository(runner, directory, writer)
    if unavailable is not None:
        return unavailable

    # A repository created after this point will not trigger a re-run;
    # there is no way to know where it would appear.
    emit_rerun_if_changed(runner, directory, writer, sources)

    base = current_base(runner, directory)
    modified = has_local_changes(runner, directory) if detect_changes else False
    revision = Revision(base, modified)
    logger.info("Resolved git revision %s", revision)
    return revision


def resolve_bare(directory: str | os.PathLike, sink: Optional[TextIO] = None) -> Optional[str]:
    """Tag or short hash, never marked as modified. Watches metadata only."""
    writer = DirectiveWriter(sink)
    return as_optional(compose_revision(directory, writer, detect_changes=False))


def resolve_auto_with_sources(
    directory: str | os.PathLike,
    source_paths: str | os.PathLike | Iterable[str | os.PathLike],
    sink: TextIO,
) -> Optional[str]:
    """Full revision, additionally watching the given source path or paths."""
    if isinstance(source_paths, (str, os.PathLike)):
        source_paths = [source_paths]
    writer = DirectiveWriter(sink)
    return as_optional(compose_revision(directory, writer, sources=list(source_paths)))


def resolve_auto(directory: str | os.PathLike) -> Optional[str]:
    """Full revision, watching every tracked file; directives go to stdout."""
    writer = DirectiveWriter()
    return as_optional(compose_revision(directory, writer, sources=TRACKED))
