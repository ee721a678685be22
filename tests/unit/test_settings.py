import logging
import sys

from buildrev.cli.context import build_context
from buildrev.config.settings import Settings
from buildrev.logging_config import setup_logging


def test_settings_defaults(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for key in ("BUILDREV_GIT_EXECUTABLE", "BUILDREV_DIRECTIVE_PREFIX", "BUILDREV_REVISION_FILE"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings()
    assert settings.git_executable == "git"
    assert settings.directive_prefix == ""
    assert settings.revision_file == "BUILD_COMMIT"


def test_env_file_is_read_by_context_only(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    # setenv first so teardown removes whatever load_dotenv adds.
    monkeypatch.setenv("BUILDREV_DIRECTIVE_PREFIX", "")
    monkeypatch.delenv("BUILDREV_DIRECTIVE_PREFIX")
    (tmp_path / ".env").write_text("BUILDREV_DIRECTIVE_PREFIX=cargo:\n", encoding="utf-8")

    assert Settings().directive_prefix == ""
    assert build_context().settings.directive_prefix == "cargo:"


def test_setup_logging_uses_single_stderr_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug")
        setup_logging("info")

        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
