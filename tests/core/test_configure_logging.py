# tests/core/test_configure_logging.py
import logging

import pytest

from headless.core.utils.configure_logging import LogWithTqdm, configure_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("headless.core.browser").setLevel(logging.NOTSET)
    logging.getLogger("urllib3").setLevel(logging.NOTSET)


def test_configure_logger_installs_tqdm_handler(restore_logging):
    handler = configure_logger("warning")

    root = logging.getLogger()
    assert root.handlers == [handler]
    assert isinstance(handler, LogWithTqdm)
    assert root.level == logging.WARNING


def test_configure_logger_sets_module_levels(restore_logging):
    configure_logger(
        "INFO",
        module_specific_levels={"headless.core.browser": "DEBUG"},
        silenced_loggers={"urllib3": "ERROR"},
    )

    assert logging.getLogger("headless.core.browser").level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.ERROR


def test_tqdm_handler_writes_to_stderr(restore_logging, capsys):
    configure_logger(logging.INFO)

    logging.getLogger("headless.tests").info("navigated")

    assert "navigated" in capsys.readouterr().err
