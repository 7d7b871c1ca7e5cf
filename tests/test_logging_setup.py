"""Tests for logging_setup.py."""

import logging
from pathlib import Path

import pytest
from textual.logging import TextualHandler

from taskdeck.logging_setup import LOG_FILE_NAME, _DevtoolsNoiseFilter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_installs_file_and_textual_handlers(
        self, tmp_path: Path, restore_root_logger: logging.Logger
    ) -> None:
        log_file = setup_logging(log_dir=tmp_path / "logs", level="DEBUG")

        assert log_file == tmp_path / "logs" / LOG_FILE_NAME
        kinds = {type(h) for h in restore_root_logger.handlers}
        assert kinds == {logging.FileHandler, TextualHandler}
        assert restore_root_logger.level == logging.DEBUG

    def test_file_receives_records(
        self, tmp_path: Path, restore_root_logger: logging.Logger
    ) -> None:
        log_file = setup_logging(log_dir=tmp_path)

        logging.getLogger("taskdeck.test").warning("store unreachable")
        for h in restore_root_logger.handlers:
            h.flush()

        assert "WARNING taskdeck.test: store unreachable" in log_file.read_text()

    def test_repeated_setup_does_not_duplicate(
        self, tmp_path: Path, restore_root_logger: logging.Logger
    ) -> None:
        setup_logging(log_dir=tmp_path)
        setup_logging(log_dir=tmp_path)

        assert len(restore_root_logger.handlers) == 2


class TestDevtoolsNoiseFilter:
    """Tests for the devtools console filter."""

    @pytest.mark.parametrize(
        "name, level, expected",
        [
            ("taskdeck.todo_list", logging.INFO, True),
            ("taskdeck", logging.WARNING, True),
            ("taskdeck.rest_store", logging.DEBUG, False),
            ("urllib3.connectionpool", logging.WARNING, False),
            ("urllib3.connectionpool", logging.ERROR, True),
            ("taskdeckish", logging.INFO, False),
        ],
    )
    def test_filter(self, name: str, level: int, expected: bool) -> None:
        assert _DevtoolsNoiseFilter().filter(_record(name, level)) is expected
