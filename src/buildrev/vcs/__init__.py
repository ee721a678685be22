from buildrev.vcs.runner import GIT, GitRunner, format_command

__all__ = ["GIT", "GitRunner", "format_command"]
