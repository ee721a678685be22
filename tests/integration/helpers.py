from __future__ import annotations

import subprocess
from pathlib import Path


def git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return its stripped stdout."""
    job = subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)
    return job.stdout.strip()
