"""Tests for the structured logger factory."""

from structlog.testing import capture_logs

from mailupselling.upselling_logging.context import set_correlation_id
from mailupselling.upselling_logging.service_logging import get_logger


def test_named_logger_emits_events_with_its_name():
    with capture_logs() as logs:
        get_logger("mailupselling.example").info("example_event", action="example_event")

    assert logs == [
        {
            "event": "example_event",
            "action": "example_event",
            "logger_name": "mailupselling.example",
            "log_level": "info",
        }
    ]


def test_module_level_logger_follows_later_configuration():
    logger = get_logger(__name__)

    with capture_logs() as logs:
        logger.warning("late_event")

    assert [entry["event"] for entry in logs] == ["late_event"]


def test_unnamed_logger():
    with capture_logs() as logs:
        get_logger().error("plain_event")

    assert logs[0]["log_level"] == "error"


def test_correlation_id_roundtrip():
    from mailupselling.upselling_logging.context import get_correlation_id

    set_correlation_id("job-123")
    try:
        assert get_correlation_id() == "job-123"
    finally:
        set_correlation_id(None)
    assert get_correlation_id() is None
