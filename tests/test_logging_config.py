"""Tests for root logger configuration."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from command_api.app.core.config import Settings
from command_api.app.core.logging_config import CONSOLE_HANDLER_NAME, setup_logging
from command_api.app.main import create_app
from command_api.app.services.command_store import CommandStore


@pytest.fixture
def root_logger() -> Generator[logging.Logger, None, None]:
    """Give the root logger back in its original state after the test."""
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def _file_handlers(logger: logging.Logger, path: Path) -> list:
    return [
        h
        for h in logger.handlers
        if isinstance(h, logging.FileHandler) and h.baseFilename == str(path.resolve())
    ]


def test_console_handler_added_once(root_logger: logging.Logger) -> None:
    setup_logging("DEBUG")
    setup_logging("DEBUG")

    named = [h for h in root_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    assert len(named) == 1
    assert root_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(root_logger: logging.Logger) -> None:
    setup_logging("chatty")

    assert root_logger.level == logging.INFO


def test_log_file_setting_attaches_file_handler(
    root_logger: logging.Logger, store: CommandStore, tmp_path: Path
) -> None:
    log_path = tmp_path / "api.log"
    settings = Settings(log_level="INFO", log_file=str(log_path))

    create_app(settings=settings, store=store)
    create_app(settings=settings, store=store)

    handlers = _file_handlers(root_logger, log_path)
    assert len(handlers) == 1

    logging.getLogger("command_api.test").info("written to file")
    handlers[0].flush()
    assert "[INFO] command_api.test: written to file" in log_path.read_text(encoding="utf-8")


def test_no_file_handler_without_log_file(
    root_logger: logging.Logger, store: CommandStore, tmp_path: Path
) -> None:
    before = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]

    create_app(settings=Settings(log_file=""), store=store)

    after = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert after == before
