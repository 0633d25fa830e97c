"""Lightweight integration checks for the main module.

Updates:
  v0.2.0 - 2026-10-12 - Cover exit codes for settings and initialisation failures.
  v0.1.0 - 2026-10-08 - Cover end-to-end add/list through the directory store.
"""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path

import pytest

import main
from cli.runtime import setup_logging
from cli.settings_summary import render_settings_summary
from config import PromptLibrarySettings
from config.settings import ENV_PREFIX


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROMPT_LIBRARY_DATA_DIR", str(tmp_path / "library"))


def test_add_and_list_persist_between_runs(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["add", "--name", "Summary", "--content", "Body", "--category", "Writing"]
    assert main.main(argv) == 0
    capsys.readouterr()

    assert main.main(["list", "--category", "Writing"]) == 0

    assert "Summary [Writing]" in capsys.readouterr().out


def test_print_settings(capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["--print-settings"]) == 0

    output = capsys.readouterr().out
    assert "Storage backend: directory" in output
    assert "Decode failure policy: empty" in output


def test_settings_error_returns_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMPT_LIBRARY_STORAGE_BACKEND", "tape")

    assert main.main(["list"]) == 2


def test_unusable_data_dir_returns_three(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")
    monkeypatch.setenv("PROMPT_LIBRARY_DATA_DIR", str(blocker))

    assert main.main(["list"]) == 3


def test_strict_decode_failure_returns_three(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    data_dir = tmp_path / "library"
    data_dir.mkdir()
    (data_dir / "savedPrompts.blob").write_bytes(b"not json")
    monkeypatch.setenv("PROMPT_LIBRARY_DECODE_FAILURE_POLICY", "raise")

    assert main.main(["list"]) == 3


def test_unknown_prompt_returns_one() -> None:
    assert main.main(["use", "deadbeef"]) == 1


def test_settings_summary_masks_redis_dsn() -> None:
    settings = PromptLibrarySettings(
        storage_backend="redis",
        redis_dsn="redis://:hunter2secret@cache:6379/0",
    )

    summary = render_settings_summary(settings)

    assert "hunter2secret" not in summary
    assert "Redis DSN: set (redi...79/0)" in summary


def test_setup_logging_applies_ini_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_path = tmp_path / "logging.conf"
    config_path.write_text("[loggers]\nkeys=root\n", encoding="utf-8")
    calls: list[tuple[Path, bool]] = []

    def _fake_file_config(path: Path, disable_existing_loggers: bool = True) -> None:
        calls.append((path, disable_existing_loggers))

    monkeypatch.setattr(logging.config, "fileConfig", _fake_file_config)

    assert setup_logging(config_path) is True
    assert calls == [(config_path, False)]


def test_setup_logging_falls_back_on_invalid_file(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "logging.conf"
    config_path.write_text("not an ini file", encoding="utf-8")

    def _broken_file_config(path: Path, disable_existing_loggers: bool = True) -> None:
        raise KeyError("formatters")

    monkeypatch.setattr(logging.config, "fileConfig", _broken_file_config)

    assert setup_logging(config_path) is False


def test_setup_logging_falls_back_without_file(tmp_path: Path) -> None:
    assert setup_logging(tmp_path / "missing.conf") is False
