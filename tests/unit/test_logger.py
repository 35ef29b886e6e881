"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           tests/unit/test_logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the centralized logging system.
------------------------------------------------------------------------------
"""

import logging

from promptpay_qr.logger import (
    get_logger,
    log_payload_build,
    reset_logging,
    set_component_level,
    setup_logging,
)


def _flush():
    for handler in logging.getLogger("promptpay_qr").handlers:
        handler.flush()


def test_logger_namespace():
    """Verify that get_logger returns a child of the promptpay_qr root."""
    logger = get_logger("payload")
    assert logger.name == "promptpay_qr.payload"
    assert isinstance(logger, logging.Logger)
    # Already namespaced names are not prefixed twice
    assert get_logger("promptpay_qr.renderer").name == "promptpay_qr.renderer"


def test_logging_to_file(tmp_path):
    """Verify that logs are correctly written to a file."""
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    test_msg = "Logging to file test message"
    get_logger("test").debug(test_msg)
    _flush()

    assert log_file.exists()
    assert test_msg in log_file.read_text()


def test_setup_is_idempotent(tmp_path):
    setup_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    setup_logging(level="INFO", log_file=str(tmp_path / "b.log"))
    assert len(logging.getLogger("promptpay_qr").handlers) == 2


def test_component_level_overrides(tmp_path):
    """Verify that specific components can have different log levels."""
    log_file = tmp_path / "component.log"
    setup_logging(level="INFO", log_file=str(log_file))

    set_component_level("renderer", "DEBUG")

    get_logger("renderer").debug("RENDERER DEBUG MESSAGE")
    get_logger("config").debug("CONFIG DEBUG MESSAGE")
    _flush()

    content = log_file.read_text()
    assert "RENDERER DEBUG MESSAGE" in content
    assert "CONFIG DEBUG MESSAGE" not in content


def test_component_levels_from_setup(tmp_path):
    log_file = tmp_path / "setup.log"
    setup_logging(level="WARNING", log_file=str(log_file), component_levels={"validators": "INFO"})

    get_logger("validators").info("VALIDATOR INFO")
    _flush()
    assert "VALIDATOR INFO" in log_file.read_text()


def test_quiet_default_mode(tmp_path):
    """Verify that the system is quiet at Default level."""
    log_file = tmp_path / "quiet.log"
    setup_logging(level="WARNING", log_file=str(log_file))

    get_logger("payload").info("THIS SHOULD NOT APPEAR")
    log_payload_build("000201", [("00", "01")])
    _flush()

    content = log_file.read_text()
    assert "THIS SHOULD NOT APPEAR" not in content
    assert "PAYLOAD START" not in content


def test_payload_dump(tmp_path):
    log_file = tmp_path / "dump.log"
    setup_logging(level="WARNING", log_file=str(log_file), component_levels={"payload.raw": "DEBUG"})

    log_payload_build("0002015802TH", [("00", "01"), ("58", "TH")])
    _flush()

    content = log_file.read_text()
    assert "=== PAYLOAD START ===" in content
    assert "58 (02): TH" in content
    assert "=== PAYLOAD END ===" in content


def test_unknown_component_level_is_ignored():
    logger = get_logger("renderer")
    logger.setLevel(logging.ERROR)
    assert set_component_level("renderer", "LOUD") is False
    assert logger.level == logging.ERROR
    assert set_component_level("renderer", "info") is True
    assert logger.level == logging.INFO


def test_unknown_root_level_falls_back_to_warning():
    setup_logging(level="chatty")
    assert logging.getLogger("promptpay_qr").level == logging.WARNING


def test_reset_logging_clears_overrides(tmp_path):
    setup_logging(level="DEBUG", log_file=str(tmp_path / "r.log"), component_levels={"payload": "ERROR"})
    reset_logging()
    assert logging.getLogger("promptpay_qr").handlers == []
    assert get_logger("payload").level == logging.NOTSET
