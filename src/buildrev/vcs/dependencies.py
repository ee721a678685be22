"""
Paths whose modification should make the build tool re-run revision lookup.

The metadata entries (``HEAD``, ``index``, ``refs/``) cover commits,
checkouts, staging and new tags. Source paths cover edits that flip the
"locally modified" marker.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Union

from buildrev.directives import DirectiveWriter
from buildrev.vcs.paths import bytes_to_path, strip_newline
from buildrev.vcs.runner import GitRunner

METADATA_ENTRIES = ("HEAD", "index", "refs/")

TRACKED = "tracked"
"""Source selection that watches every file tracked by git."""

SourceSelection = Union[None, str, Iterable[Union[str, os.PathLike]]]


def git_dir(runner: GitRunner, directory: str | os.PathLike) -> Path:
    """Absolute path of the repository metadata directory."""
    args = ("rev-parse", "--absolute-git-dir")
    raw = runner.run_capturing(directory, args)
    return bytes_to_path(strip_newline(raw), runner.command(args))


def metadata_paths(root: Path) -> List[str]:
    # Plain string joins keep the trailing slash on refs/, which Path drops.
    return [os.path.join(root, entry) for entry in METADATA_ENTRIES]


def tracked_files(runner: GitRunner, directory: str | os.PathLike) -> List[Path]:
    """
    List every tracked file as an absolute path.

    Uses NUL separated output so names containing whitespace, newlines
    or a leading dash survive unmodified.
    """
    top_args = ("rev-parse", "--show-toplevel")
    top = bytes_to_path(
        strip_newline(runner.run_capturing(directory, top_args)),
        runner.command(top_args),
    )

    ls_args = ("-C", os.fspath(top), "ls-files", "--full-name", "-z")
    raw = runner.run_capturing(directory, ls_args)
    entries = raw.split(b"\0")
    if entries and entries[-1] == b"":
        entries.pop()

    command = runner.command(ls_args)
    return [top / bytes_to_path(entry, command) for entry in entries]


def source_paths(
    runner: GitRunner,
    directory: str | os.PathLike,
    work_tree: Path,
    sources: SourceSelection,
) -> List[Path]:
    if sources is None:
        return []
    if isinstance(sources, str):
        if sources != TRACKED:
            raise ValueError(f"Unknown source selection: {sources!r}")
        return tracked_files(runner, directory)
    return [work_tree / source for source in sources]


def emit_rerun_if_changed(
    runner: GitRunner,
    directory: str | os.PathLike,
    writer: DirectiveWriter,
    sources: SourceSelection = None,
) -> List[str]:
    """
    Write a ``rerun-if-changed`` directive for every watched path.

    Caller supplied ``sources`` are joined against the parent of the
    metadata directory; ``TRACKED`` enumerates the repository instead.
    Returns the paths in the order they were written.
    """
    root = git_dir(runner, directory)
    paths = metadata_paths(root)
    paths.extend(os.fspath(path) for path in source_paths(runner, directory, root.parent, sources))

    for path in paths:
        writer.rerun_if_changed(path)
    return paths
