"""
Unit tests for endpoint event logging
"""
import logging

from utils.shared_utils import log_endpoint_event


def test_success_event_logged_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="utils.shared_utils"):
        assert log_endpoint_event("/trial/status", "user-1", "success", {"status": "active"}) is None

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.getMessage() == '/trial/status | user=user-1 | success | {"status": "active"}'


def test_error_event_logged_at_warning(caplog):
    with caplog.at_level(logging.INFO, logger="utils.shared_utils"):
        log_endpoint_event("/trial/status", None, "error", {"error": "boom"})

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "user=anonymous" in record.getMessage()
