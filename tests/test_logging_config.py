import logging

import pytest

from payroll_model import logging_config
from payroll_model.logging_config import ENGINE_LOGGER, reset_logging, setup_logging


@pytest.fixture
def isolated_logging():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    reset_logging()
    yield
    reset_logging()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_writes_combined_and_warning_logs(tmp_path, isolated_logging):
    setup_logging(tmp_path, debug=False)
    logging.getLogger(ENGINE_LOGGER).info("engine ready")
    logging.getLogger(ENGINE_LOGGER).warning("engine warning")

    combined = (tmp_path / "combined.log").read_text(encoding="utf-8")
    warnings_log = (tmp_path / "warnings_errors.log").read_text(encoding="utf-8")
    assert "engine ready" in combined
    assert "engine warning" in warnings_log
    assert "engine ready" not in warnings_log
    assert not (tmp_path / "debug_detail.log").exists()


def test_debug_log_only_with_debug(tmp_path, isolated_logging):
    setup_logging(tmp_path, debug=True)
    logging.getLogger(ENGINE_LOGGER).debug("recomputing stats")

    assert "recomputing stats" in (tmp_path / "debug_detail.log").read_text(encoding="utf-8")


def test_setup_is_idempotent(tmp_path, isolated_logging):
    setup_logging(tmp_path / "first")
    setup_logging(tmp_path / "second")

    assert logging_config._LOGGING_CONFIGURED
    assert not (tmp_path / "second").exists()


def test_clear_logs(tmp_path):
    stale = tmp_path / "combined.log"
    stale.write_text("old run")
    other = tmp_path / "keep.txt"
    other.write_text("not a log")
    logging_config.clear_logs(tmp_path)

    assert not stale.exists()
    assert other.exists()
