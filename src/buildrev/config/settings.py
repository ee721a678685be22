from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from buildrev.revision_file import DEFAULT_REVISION_FILE
from buildrev.vcs.runner import GIT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BUILDREV_",
        extra="ignore",
    )

    git_executable: str = Field(
        default=GIT,
        description="Name or path of the git executable.",
    )
    directive_prefix: str = Field(
        default="",
        description="Prepended to every directive line, e.g. 'cargo:'.",
    )
    revision_file: Optional[str] = Field(
        default=DEFAULT_REVISION_FILE,
        description="File consulted when no git repository is available.",
    )
    log_level: str = Field(default="WARNING")
