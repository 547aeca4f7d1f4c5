"""Unit tests for logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from textual.logging import TextualHandler

from ktwins.utils.logging_config import configure_logging, resolve_level


@pytest.fixture
def restore_logger() -> Iterator[None]:
    logger = logging.getLogger("ktwins")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


class TestResolveLevel:
    """Tests for resolve_level."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            (" error ", logging.ERROR),
            ("verbose", logging.WARNING),
        ],
    )
    def test_names(self, name: str, expected: int) -> None:
        assert resolve_level(name) == expected


@pytest.mark.usefixtures("restore_logger")
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_textual_handler_only(self) -> None:
        logger = configure_logging("INFO")
        assert logger.name == "ktwins"
        assert logger.level == logging.INFO
        assert [type(handler) for handler in logger.handlers] == [TextualHandler]
        assert logger.propagate is False

    def test_file_handler_writes_records(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "ktwins.log"
        logger = configure_logging("DEBUG", str(log_file))
        logging.getLogger("ktwins.screens").debug("hello %s", "file")
        for handler in logger.handlers:
            handler.flush()
        assert "DEBUG ktwins.screens: hello file" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        configure_logging("INFO", str(tmp_path / "a.log"))
        logger = configure_logging("INFO")
        assert len(logger.handlers) == 1
