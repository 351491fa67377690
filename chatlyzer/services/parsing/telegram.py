import re
from datetime import tzinfo

from chatlyzer.services.parsing.lines import non_blank_lines, split_sender
from chatlyzer.services.parsing.timestamps import parse_telegram_timestamp
from chatlyzer.services.parsing.types import ParsedMessage, Platform

# [31.12.2023 23:59:59] Sender: Message
TELEGRAM_LINE_RE = re.compile(r"^\[(\d{2}\.\d{2}\.\d{4})\s(\d{2}:\d{2}:\d{2})\]\s(.+)$")


def parse_telegram_messages(raw_text: str, tz: tzinfo) -> list[ParsedMessage]:
    messages: list[ParsedMessage] = []
    for line in non_blank_lines(raw_text):
        match = TELEGRAM_LINE_RE.match(line.rstrip())
        if not match:
            continue
        date_part, time_part, body = match.groups()
        timestamp = parse_telegram_timestamp(date_part, time_part, tz)
        if timestamp is None:
            continue
        split = split_sender(body)
        if split is None:
            continue
        sender, content = split
        if not sender or not content:
            continue
        messages.append(
            ParsedMessage(sender=sender, content=content, timestamp=timestamp, metadata={"platform": Platform.TELEGRAM.value})
        )
    return messages
