from __future__ import annotations

import logging
import os

from buildrev.directives import DirectiveWriter
from buildrev.errors import LaunchError
from buildrev.result import Unavailable
from buildrev.vcs.runner import GitRunner

logger = logging.getLogger(__name__)

PROBE_ARGS = ("rev-parse", "--git-dir")


def probe_repository(
    runner: GitRunner,
    directory: str | os.PathLike,
    writer: DirectiveWriter,
) -> Unavailable | None:
    """
    Check that git works and that ``directory`` is inside a repository.

    Returns ``None`` when it is safe to continue. Otherwise a warning
    directive is written and an ``Unavailable`` describing why is
    returned; callers should let the build carry on without a revision.
    """
    try:
        in_repo = runner.run_silent(directory, PROBE_ARGS)
    except LaunchError as err:
        reason = f"Failed to invoke `{runner.executable}`; unable to embed git revision: {err}"
        logger.warning("%s", reason)
        writer.warning(reason)
        return Unavailable(reason)

    if not in_repo:
        reason = "Not in a git repository; unable to embed git revision"
        logger.warning("%s", reason)
        writer.warning(reason)
        return Unavailable(reason)
    return None
