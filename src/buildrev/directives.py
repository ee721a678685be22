"""Line-oriented directives for the build tool that invoked us."""

from __future__ import annotations

import os
import sys
from typing import TextIO


class DirectiveWriter:
    """
    Writes ``rerun-if-changed=`` and ``warning=`` lines to a text sink.

    ``prefix`` is prepended to every directive, e.g. ``"cargo:"`` for
    build tools that namespace their instructions.
    """

    def __init__(self, sink: TextIO | None = None, prefix: str = ""):
        self.sink = sink if sink is not None else sys.stdout
        self.prefix = prefix

    def _emit(self, kind: str, value: str) -> None:
        self.sink.write(f"{self.prefix}{kind}={value}\n")

    def rerun_if_changed(self, path: str | os.PathLike) -> None:
        self._emit("rerun-if-changed", os.fspath(path))

    def warning(self, message: str) -> None:
        self._emit("warning", message)
