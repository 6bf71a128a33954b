# tests/test_logger.py
from pathlib import Path
import logging
from logging import StreamHandler, FileHandler
from logging.handlers import RotatingFileHandler

import pytest

from range_pool.logger import setup_logger

pytestmark = pytest.mark.usefixtures("clean_root_handlers")


@pytest.fixture()
def clean_root_handlers():
    """Start each test with a clean root logger; restore afterwards."""
    root = logging.getLogger()
    prev = list(root.handlers)
    prev_level = root.level
    try:
        for h in list(root.handlers):
            root.removeHandler(h)
        yield
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in prev:
            root.addHandler(h)
        root.setLevel(prev_level)


def _handler_types():
    return {type(h) for h in logging.getLogger().handlers}


def test_creates_log_file_and_writes(tmp_path: Path):
    log_dir = tmp_path / "logs"

    log_path = setup_logger(log_dir, console=False, force=True)
    assert log_path.parent == log_dir
    assert log_path.name.startswith("range_pool_")
    assert log_path.suffix == ".log"
    assert log_path.exists()

    logging.getLogger("range_pool.test").info("hello world")
    text = log_path.read_text(encoding="utf-8")
    assert "Logging to:" in text
    assert "hello world" in text
    assert "range_pool.test" in text


def test_console_only_returns_none():
    assert setup_logger(force=True) is None
    types = _handler_types()
    assert StreamHandler in types
    assert FileHandler not in types
    assert RotatingFileHandler not in types


def test_force_replaces_handlers_and_rotation(tmp_path: Path):
    setup_logger(tmp_path, console=True, force=True)
    types1 = _handler_types()
    assert FileHandler in types1
    assert StreamHandler in types1

    setup_logger(tmp_path, rotate=True, console=False, force=True)
    types2 = _handler_types()
    assert RotatingFileHandler in types2
    assert StreamHandler not in types2


def test_level_and_prefix(tmp_path: Path):
    log_path = setup_logger(
        tmp_path, level=logging.DEBUG, filename_prefix="coordinator", console=False, force=True
    )
    assert log_path.name.startswith("coordinator_")
    assert logging.getLogger().level == logging.DEBUG
