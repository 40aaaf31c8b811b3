import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from typedargs.utils import running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_with_file(tmp_path):
    log_file = tmp_path / "typedargs.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    console_handler, file_handler = logging.getLogger().handlers
    assert isinstance(console_handler.formatter, JsonFormatter)
    assert isinstance(file_handler, logging.FileHandler)
    assert isinstance(file_handler.formatter, JsonFormatter)

    logging.getLogger("typedargs").debug("hello from the parser")
    file_handler.flush()
    content = log_file.read_text(encoding="UTF-8")
    assert '"message": "hello from the parser"' in content
    assert '"name": "typedargs"' in content


def test_setup_logging_plain_file(tmp_path):
    log_file = tmp_path / "typedargs.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    logging.getLogger("typedargs").debug("plain line")
    logging.getLogger().handlers[1].flush()
    assert "[typedargs] [DEBUG] plain line" in log_file.read_text(encoding="UTF-8")


def test_setup_logging_mode_from_environment(monkeypatch):
    monkeypatch.setenv("TYPEDARGS_LOG_MODE", "json")
    setup_logging()
    handler = logging.getLogger().handlers[0]
    assert not isinstance(handler, RichHandler)
    assert isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)
