"""
Thin wrapper around the git executable.

Every invocation runs with stdin attached to the null device, in the
directory it is given. Failures are mapped onto the ``RevisionError``
hierarchy with the formatted command line attached.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Sequence

from buildrev.errors import CommandError, EncodingError, LaunchError

logger = logging.getLogger(__name__)

GIT = "git"
"""Name of the git executable, looked up on PATH."""


def format_command(args: Sequence[str], executable: str = GIT) -> str:
    """Render ``executable`` and ``args`` as a single space separated string."""
    return " ".join([executable, *args])


class GitRunner:
    """Runs git sub-commands in a given directory."""

    def __init__(self, executable: str = GIT):
        self.executable = executable

    def command(self, args: Sequence[str]) -> str:
        return format_command(args, self.executable)

    def run_capturing(self, directory: str | os.PathLike, args: Sequence[str]) -> bytes:
        """
        Run git and return its raw stdout.

        Raises:
            LaunchError: If the process could not be started.
            CommandError: If the process exited with a non-zero status.
        """
        cmd = [self.executable, *args]
        logger.debug("Running %s in %s", self.command(args), directory)
        try:
            job = subprocess.run(
                cmd,
                cwd=directory,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as err:
            raise LaunchError(self.command(args), str(err)) from err

        if job.returncode != 0:
            # Negative return codes mean the process was killed by a signal.
            code = job.returncode if job.returncode > 0 else None
            logger.debug("%s failed: %s", self.command(args), job.stderr.decode("utf-8", "replace").strip())
            raise CommandError(self.command(args), code)
        return job.stdout

    def run_silent(self, directory: str | os.PathLike, args: Sequence[str]) -> bool:
        """
        Run git with all output discarded and report whether it succeeded.

        A non-zero exit status is a regular ``False`` answer; only a failure
        to launch raises ``LaunchError``.
        """
        logger.debug("Probing %s in %s", self.command(args), directory)
        try:
            returncode = subprocess.call(
                [self.executable, *args],
                cwd=directory,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as err:
            raise LaunchError(self.command(args), str(err)) from err
        return returncode == 0

    def decode_utf8(self, raw: bytes, args: Sequence[str]) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            raise EncodingError(self.command(args)) from err

    def output(self, directory: str | os.PathLike, args: Sequence[str]) -> str:
        """Run git and return its stdout as text."""
        return self.decode_utf8(self.run_capturing(directory, args), args)
