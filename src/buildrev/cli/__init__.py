from __future__ import annotations

import click

from buildrev.cli.context import CLIContext, build_context
from buildrev.logging_config import setup_logging


def _register_commands(cli_group: click.Group) -> None:
    from buildrev.cli.commands import diagnostics, revision

    for module in (
        diagnostics,
        revision,
    ):
        module.register(cli_group)


@click.group()
@click.option("--git", "git_executable", type=str, default=None, help="Override the git executable.")
@click.option("--prefix", "directive_prefix", type=str, default=None, help="Prefix for directive lines, e.g. 'cargo:'.")
@click.option("--log-level", type=str, default=None, help="Log level for messages on stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    git_executable: str | None,
    directive_prefix: str | None,
    log_level: str | None,
) -> None:
    """buildrev: git revision strings for build scripts."""
    ctx.obj = build_context(git_executable, directive_prefix, log_level)
    setup_logging(ctx.obj.settings.log_level)


_register_commands(cli)


def main() -> None:
    cli()


__all__ = ["CLIContext", "cli", "main"]
