"""Tests for logger setup."""

import zipfile
from pathlib import Path

import pytest
from loguru import logger

from liftlog.config.settings import Settings
from liftlog.core.logger import setup_logger, setup_logger_from_settings


def _written_text(directory: Path) -> str:
    """Collect log output, including files compressed when the sink closed."""
    chunks = []
    for path in sorted(directory.rglob("*")):
        if path.suffix == ".zip":
            with zipfile.ZipFile(path) as archive:
                chunks.extend(archive.read(name).decode("utf-8") for name in archive.namelist())
        elif path.is_file():
            chunks.append(path.read_text(encoding="utf-8"))
    return "".join(chunks)


def test_file_sink_receives_messages(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"

    setup_logger(level="DEBUG", log_file=str(log_dir / "liftlog.log"))
    logger.debug("volume window computed")
    logger.remove()

    content = _written_text(log_dir)
    assert "Logger initialized with level=DEBUG" in content
    assert "volume window computed" in content


def test_level_filters_file_output(tmp_path: Path) -> None:
    setup_logger(level="WARNING", log_file=str(tmp_path / "liftlog.log"))
    logger.info("hidden")
    logger.warning("shown")
    logger.remove()

    content = _written_text(tmp_path)
    assert "hidden" not in content
    assert "shown" in content


def test_records_carry_app_name(tmp_path: Path) -> None:
    setup_logger(level="INFO", log_file=str(tmp_path / "liftlog.log"))
    logger.info("report built")
    logger.remove()

    lines = [line for line in _written_text(tmp_path).splitlines() if "report built" in line]
    assert len(lines) == 1
    assert "| liftlog |" in lines[0]


def test_setup_from_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("LIFTLOG_LOG_FILE", str(tmp_path / "liftlog.log"))
    monkeypatch.setenv("LIFTLOG_LOG_ROTATION", "1 MB")

    setup_logger_from_settings(Settings(_env_file=None))
    logger.debug("debug detail")
    logger.info("report built")
    logger.remove()

    content = _written_text(tmp_path)
    assert "report built" in content
    assert "debug detail" not in content
