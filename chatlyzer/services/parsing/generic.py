import logging
from datetime import datetime, tzinfo

from chatlyzer.services.parsing.lines import non_blank_lines, split_sender
from chatlyzer.services.parsing.types import UNKNOWN_SENDER, ParsedMessage, Platform

logger = logging.getLogger(__name__)


def parse_generic_messages(raw_text: str, tz: tzinfo) -> list[ParsedMessage]:
    """Fallback for ``Sender: text`` lines or bare text.

    The format carries no timestamps, so every message gets the conversion
    time and is flagged with ``timestampInferred``.
    """
    now = datetime.now(tz)
    metadata = {"platform": Platform.GENERIC.value, "timestampInferred": True}
    messages: list[ParsedMessage] = []

    for line in non_blank_lines(raw_text):
        split = split_sender(line)
        if split is None:
            messages.append(ParsedMessage(sender=UNKNOWN_SENDER, content=line.strip(), timestamp=now, metadata=dict(metadata)))
            continue
        sender, content = split
        if content:
            messages.append(
                ParsedMessage(sender=sender or UNKNOWN_SENDER, content=content, timestamp=now, metadata=dict(metadata))
            )

    if messages:
        logger.warning("generic_timestamps_substituted", extra={"message_count": len(messages)})
    return messages
