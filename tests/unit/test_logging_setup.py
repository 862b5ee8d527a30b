"""Tests for zonedtime logging helpers."""

import logging
from collections.abc import Generator
from typing import Any

import pytest
from colorlog import ColoredFormatter

from zonedtime.logging_setup import init_logging

pytestmark = pytest.mark.unit


@pytest.fixture
def root_logger() -> Generator[logging.Logger, Any, None]:
    """Root logger; the level and any handler init_logging installs are undone."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, ColoredFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


def _strip_handlers(root: logging.Logger) -> None:
    # pytest attaches its capture handlers when the test body starts, so this
    # has to run inside the test rather than in a fixture.
    for handler in list(root.handlers):
        root.removeHandler(handler)


class TestInitLogging:
    def test_installs_colored_handler(self, root_logger: logging.Logger):
        _strip_handlers(root_logger)

        init_logging("warning")

        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, ColoredFormatter)
        assert root_logger.level == logging.WARNING

    def test_keeps_existing_handlers(self, root_logger: logging.Logger):
        _strip_handlers(root_logger)
        handler = logging.NullHandler()
        root_logger.addHandler(handler)

        init_logging("INFO")

        assert root_logger.handlers == [handler]
        root_logger.removeHandler(handler)

    def test_invalid_level_defaults_to_info(self, root_logger: logging.Logger):
        init_logging("verbose")
        assert root_logger.level == logging.INFO

    def test_missing_level_defaults_to_info(self, root_logger: logging.Logger):
        init_logging(None)
        assert root_logger.level == logging.INFO

    def test_debug_env_forces_debug(
        self, root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("ZONEDTIME_DEBUG", "yes")

        init_logging("ERROR")

        assert root_logger.level == logging.DEBUG
