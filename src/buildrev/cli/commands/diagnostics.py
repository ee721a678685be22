from __future__ import annotations

import shutil

import click

from buildrev.cli.context import CLIContext


def register(cli: click.Group) -> None:
    @cli.command("env-info")
    @click.pass_obj
    def env_info_cmd(ctx: CLIContext) -> None:
        """Print the effective settings."""
        settings = ctx.settings
        resolved = shutil.which(settings.git_executable)

        click.echo("--- Loaded from Settings ---")
        click.echo(f"GIT_EXECUTABLE:   {settings.git_executable} ({resolved or 'not found'})")
        click.echo(f"DIRECTIVE_PREFIX: {settings.directive_prefix or '(none)'}")
        click.echo(f"REVISION_FILE:    {settings.revision_file or '(disabled)'}")
        click.echo(f"LOG_LEVEL:        {settings.log_level}")
