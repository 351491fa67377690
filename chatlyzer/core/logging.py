import logging


class PrivacyFilter(logging.Filter):
    """Drop chat text from structured logs."""

    BLOCKED_KEYS = {"text", "content", "raw_text", "raw_preview", "excerpt", "line"}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.BLOCKED_KEYS:
            if hasattr(record, key):
                setattr(record, key, "[REDACTED]")
        return True


def _ensure_privacy_filter(target: logging.Filterer) -> None:
    if not any(isinstance(existing, PrivacyFilter) for existing in target.filters):
        target.addFilter(PrivacyFilter())


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    root = logging.getLogger()
    _ensure_privacy_filter(root)
    # Records from child loggers skip the root logger's filters, so guard the handlers too.
    for handler in root.handlers:
        _ensure_privacy_filter(handler)
