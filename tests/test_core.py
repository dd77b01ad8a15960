"""Tests for configuration and logging setup."""

import logging

import pytest

from employee_api.app.core.config import Settings, normalize_log_level
from employee_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("verbose", "INFO"), ("", "INFO")],
)
def test_normalize_log_level(raw, expected):
    assert normalize_log_level(raw) == expected


def test_settings_fall_back_to_info_for_unknown_level():
    assert Settings(log_level="chatty").log_level == "INFO"
    assert Settings(log_level="error").log_level == "ERROR"


@pytest.fixture
def bare_root(monkeypatch):
    """Give the root logger an empty handler list for the duration of a test."""
    root = logging.getLogger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    root_level, package_level = root.level, package_logger.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    for handler in root.handlers:
        handler.close()
    root.setLevel(root_level)
    package_logger.setLevel(package_level)


def test_setup_logging_sets_package_level(bare_root):
    logger = setup_logging("debug")

    assert logger.name == "employee_api"
    assert logger.level == logging.DEBUG
    assert len(bare_root.handlers) == 1


def test_setup_logging_writes_log_file(bare_root, tmp_path):
    logfile = tmp_path / "api.log"

    setup_logging("INFO", str(logfile))
    logging.getLogger("employee_api.app.services.employee_service").info("Created employee 1")
    for handler in bare_root.handlers:
        handler.flush()

    assert "[INFO] employee_api.app.services.employee_service: Created employee 1" in logfile.read_text(encoding="utf-8")


def test_setup_logging_keeps_existing_handlers(bare_root):
    existing = logging.NullHandler()
    bare_root.addHandler(existing)

    logger = setup_logging("nonsense")

    assert bare_root.handlers == [existing]
    assert logger.level == logging.INFO
