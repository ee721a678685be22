from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv

from buildrev.config.settings import Settings
from buildrev.directives import DirectiveWriter
from buildrev.vcs.runner import GitRunner


def load_default_env() -> None:
    """
    Load a project-level .env if present.
    Resolves against the current working directory, where build tools run us.
    """
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)


@dataclass
class CLIContext:
    settings: Settings
    runner: GitRunner

    def writer(self, sink: Optional[TextIO] = None) -> DirectiveWriter:
        return DirectiveWriter(sink, prefix=self.settings.directive_prefix)


def build_context(
    git_executable: Optional[str] = None,
    directive_prefix: Optional[str] = None,
    log_level: Optional[str] = None,
) -> CLIContext:
    load_default_env()

    settings = Settings()
    if git_executable:
        settings.git_executable = git_executable
    if directive_prefix is not None:
        settings.directive_prefix = directive_prefix
    if log_level:
        settings.log_level = log_level

    return CLIContext(settings=settings, runner=GitRunner(settings.git_executable))
