from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Sequence

import click

from buildrev.cli.context import CLIContext
from buildrev.directives import DirectiveWriter
from buildrev.errors import RevisionError
from buildrev.result import Unavailable
from buildrev.revision import compose_revision
from buildrev.revision_file import read_revision_file, write_revision_file
from buildrev.vcs.dependencies import TRACKED, SourceSelection


def _selection(sources: Sequence[Path], track_all: bool) -> SourceSelection:
    if track_all and sources:
        raise click.UsageError("--source and --track-all are mutually exclusive.")
    if track_all:
        return TRACKED
    return list(sources) or None


def _resolve(
    ctx: CLIContext,
    directory: Path,
    writer: DirectiveWriter,
    sources: SourceSelection,
    bare: bool,
    fallback: bool,
) -> Optional[str]:
    try:
        result = compose_revision(
            directory,
            writer,
            sources=sources,
            detect_changes=not bare,
            runner=ctx.runner,
        )
    except RevisionError as err:
        raise click.ClickException(err.message) from err

    if not isinstance(result, Unavailable):
        return str(result)
    if fallback and ctx.settings.revision_file:
        return read_revision_file(directory, ctx.settings.revision_file)
    return None


def register(cli: click.Group) -> None:
    @cli.command("revision")
    @click.argument(
        "directory",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=".",
    )
    @click.option("--bare", is_flag=True, help="Never append the local-changes marker.")
    @click.option(
        "--source",
        "sources",
        multiple=True,
        type=click.Path(path_type=Path),
        help="Extra path to watch, relative to the working tree. Repeatable.",
    )
    @click.option("--track-all", is_flag=True, help="Watch every file tracked by git.")
    @click.option("--directives/--no-directives", default=True, help="Print rerun-if-changed/warning directives.")
    @click.option("--fallback/--no-fallback", default=True, help="Read the revision file when git is unavailable.")
    @click.pass_obj
    def revision_cmd(
        ctx: CLIContext,
        directory: Path,
        bare: bool,
        sources: tuple[Path, ...],
        track_all: bool,
        directives: bool,
        fallback: bool,
    ) -> None:
        """Print build directives, then the revision on the last line."""
        selection = _selection(sources, track_all)
        writer = ctx.writer(None if directives else io.StringIO())
        revision = _resolve(ctx, directory, writer, selection, bare, fallback)
        if revision:
            click.echo(revision)

    @cli.command("stamp")
    @click.argument(
        "directory",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=".",
    )
    @click.option(
        "--output",
        "-o",
        required=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="Revision file to write.",
    )
    @click.option("--bare", is_flag=True, help="Never append the local-changes marker.")
    @click.option("--directives/--no-directives", default=False, help="Print rerun-if-changed/warning directives.")
    @click.pass_obj
    def stamp_cmd(ctx: CLIContext, directory: Path, output: Path, bare: bool, directives: bool) -> None:
        """Write the revision to a file for inclusion in source archives."""
        writer = ctx.writer(None if directives else io.StringIO())
        revision = _resolve(ctx, directory, writer, None, bare, fallback=True)
        if not revision:
            click.secho("No revision available; nothing written.", fg="yellow", err=True)
            return
        target = write_revision_file(output, revision)
        click.secho(f"Wrote {revision} to {target}", fg="green", err=True)
