"""Tests for the root logger setup."""
import contextlib
import logging

from lesson_booking_api.app.core.logging_config import DRIVER_LOGGER, resolve_log_file, setup_logging


@contextlib.contextmanager
def bare_root_logger():
    # pytest installs its own capture handlers on the root logger.
    root = logging.getLogger()
    driver = logging.getLogger(DRIVER_LOGGER)
    saved_handlers, saved_level, saved_driver_level = root.handlers[:], root.level, driver.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
        driver.setLevel(saved_driver_level)


def test_relative_log_file_is_resolved_and_its_directory_created(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with bare_root_logger() as root:
        log_path = setup_logging("info", "logs/api.log")

        assert log_path == (tmp_path / "logs" / "api.log").resolve()
        assert len(root.handlers) == 2
        logging.getLogger("lesson_booking_api.app.services.order_service").info("Order 1 saved")
        assert "Order 1 saved" in log_path.read_text(encoding="utf-8")


def test_blank_log_file_logs_to_console_only():
    with bare_root_logger() as root:
        assert setup_logging("INFO", "   ") is None
        assert [type(handler) for handler in root.handlers] == [logging.StreamHandler]


def test_driver_logger_is_held_at_warning():
    with bare_root_logger() as root:
        setup_logging("INFO")
        assert root.level == logging.INFO
        assert logging.getLogger(DRIVER_LOGGER).level == logging.WARNING


def test_debug_level_leaves_driver_logger_alone():
    with bare_root_logger() as root:
        logging.getLogger(DRIVER_LOGGER).setLevel(logging.NOTSET)
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert logging.getLogger(DRIVER_LOGGER).level == logging.NOTSET


def test_unknown_level_falls_back_to_info():
    with bare_root_logger() as root:
        setup_logging("chatty")
        assert root.level == logging.INFO


def test_setup_runs_once(tmp_path):
    with bare_root_logger() as root:
        setup_logging("INFO")
        assert setup_logging("DEBUG", str(tmp_path / "late.log")) is None
        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert not (tmp_path / "late.log").exists()


def test_resolve_log_file():
    assert resolve_log_file(None) is None
    assert resolve_log_file("") is None
    assert resolve_log_file("/var/log/lessons.log").is_absolute()
