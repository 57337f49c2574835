import logging

import pytest
from rich.logging import RichHandler

from singledash.utils import get_program_invocation, setup_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_mode_from_env(monkeypatch):
    monkeypatch.setenv("SINGLEDASH_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert type(handler) is logging.StreamHandler
    assert type(handler.formatter).__name__ == "JsonFormatter"


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "singledash.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)
    logging.getLogger("singledash").debug("hello")
    for handler in handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text()


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["my_script.py"])
    monkeypatch.setattr("shutil.which", lambda _: None)
    monkeypatch.setattr("sys.executable", "/usr/bin/python3")
    assert get_program_invocation() == "python my_script.py"


def test_get_program_invocation_installed(monkeypatch):
    monkeypatch.setattr("sys.argv", ["singledash"])
    monkeypatch.setattr("shutil.which", lambda _: "/usr/local/bin/singledash")
    assert get_program_invocation() == "singledash"
