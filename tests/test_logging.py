import logging

from chatlyzer.core.logging import PrivacyFilter, configure_logging


def test_privacy_filter_redacts_chat_text():
    record = logging.LogRecord("chatlyzer", logging.INFO, __file__, 1, "event", None, None)
    record.content = "secret message"
    record.platform = "whatsapp"
    assert PrivacyFilter().filter(record) is True
    assert record.content == "[REDACTED]"
    assert record.platform == "whatsapp"


def test_configure_logging_is_idempotent():
    configure_logging()
    configure_logging()
    root = logging.getLogger()
    assert sum(isinstance(f, PrivacyFilter) for f in root.filters) == 1
    for handler in root.handlers:
        assert sum(isinstance(f, PrivacyFilter) for f in handler.filters) == 1
