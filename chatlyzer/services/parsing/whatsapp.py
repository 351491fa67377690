import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from chatlyzer.services.parsing.lines import split_lines, split_sender, strip_leading_marks
from chatlyzer.services.parsing.system_messages import is_whatsapp_system_message, whatsapp_system_language
from chatlyzer.services.parsing.timestamps import parse_whatsapp_timestamp
from chatlyzer.services.parsing.types import SYSTEM_SENDER, LineKind, ParsedMessage, Platform

logger = logging.getLogger(__name__)

# [31.12.2023, 23:59:59] Sender: Message
WHATSAPP_HEADER_NEW_RE = re.compile(r"^\[(\d{1,2}\.\d{1,2}\.\d{4}), (\d{2}:\d{2}:\d{2})\] (.*)$")
# 31.12.23, 23:59 - Sender: Message
WHATSAPP_HEADER_OLD_RE = re.compile(r"^(\d{1,2}\.\d{1,2}\.\d{2,4}), (\d{2}:\d{2}) - (.*)$")


@dataclass(slots=True)
class HeaderLine:
    date_part: str
    time_part: str
    body: str
    has_seconds: bool


@dataclass(slots=True)
class Buffering:
    sender: str
    timestamp: datetime
    lines: list[str] = field(default_factory=list)


def match_header(line: str) -> HeaderLine | None:
    """Match either export revision; the bracketed one is tried first."""
    line = strip_leading_marks(line)
    match = WHATSAPP_HEADER_NEW_RE.match(line)
    if match:
        return HeaderLine(*match.groups(), has_seconds=True)
    match = WHATSAPP_HEADER_OLD_RE.match(line)
    if match:
        return HeaderLine(*match.groups(), has_seconds=False)
    return None


def classify_whatsapp_body(body: str) -> tuple[LineKind, str | None, str]:
    """Decide what the text after a header timestamp is.

    Returns ``(kind, sender, content)``; sender is None for system and dropped lines.
    """
    split = split_sender(body)
    if split is not None:
        sender, content = split
        if is_whatsapp_system_message(content):
            return LineKind.SYSTEM, None, content
        if not sender:
            return LineKind.DROP, None, content
        return LineKind.KEEP, sender, content
    if is_whatsapp_system_message(body.strip()):
        return LineKind.SYSTEM, None, body.strip()
    return LineKind.DROP, None, body


def _flush(state: Buffering | None, messages: list[ParsedMessage]) -> None:
    if state is None:
        return
    content = "\n".join(state.lines).strip()
    if not content:
        return
    messages.append(
        ParsedMessage(
            sender=state.sender,
            content=content,
            timestamp=state.timestamp,
            metadata={"platform": Platform.WHATSAPP.value},
        )
    )


def _system_message(content: str, timestamp: datetime) -> ParsedMessage:
    metadata = {"platform": Platform.WHATSAPP.value, "messageType": "system"}
    language = whatsapp_system_language(content)
    if language:
        metadata["language"] = language
    return ParsedMessage(sender=SYSTEM_SENDER, content=content, timestamp=timestamp, metadata=metadata)


def parse_whatsapp_messages(raw_text: str, tz: tzinfo) -> list[ParsedMessage]:
    messages: list[ParsedMessage] = []
    # None while idle, a Buffering record while a message is being collected.
    state: Buffering | None = None
    skipped_headers = 0

    for line_number, line in enumerate(split_lines(raw_text), start=1):
        header = match_header(line)
        if header is None:
            if state is not None:
                state.lines.append(line)
            continue

        _flush(state, messages)
        state = None

        timestamp = parse_whatsapp_timestamp(header.date_part, header.time_part, tz, header.has_seconds)
        if timestamp is None:
            skipped_headers += 1
            logger.warning("whatsapp_header_skipped", extra={"line_number": line_number})
            continue

        kind, sender, content = classify_whatsapp_body(header.body)
        if kind is LineKind.SYSTEM:
            messages.append(_system_message(content, timestamp))
        elif kind is LineKind.KEEP:
            state = Buffering(sender=sender, timestamp=timestamp, lines=[content])

    _flush(state, messages)
    logger.info(
        "whatsapp_parsed",
        extra={"message_count": len(messages), "skipped_headers": skipped_headers},
    )
    return messages
