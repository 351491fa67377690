import json
import logging
from datetime import tzinfo

from chatlyzer.services.parsing.system_messages import INSTAGRAM_GENERIC_TYPE, is_instagram_system_message
from chatlyzer.services.parsing.timestamps import parse_epoch_ms
from chatlyzer.services.parsing.types import SYSTEM_SENDER, UNKNOWN_SENDER, LineKind, ParsedMessage, Platform

logger = logging.getLogger(__name__)


def _load_records(raw_text: str) -> list | None:
    try:
        payload = json.loads(raw_text)
    except (ValueError, RecursionError) as exc:
        logger.error("instagram_json_invalid", extra={"error": str(exc)})
        return None
    if not isinstance(payload, list):
        logger.error("instagram_json_not_array", extra={"payload_type": type(payload).__name__})
        return None
    return payload


def classify_instagram_record(content: str, record_type: str) -> LineKind:
    if not content:
        return LineKind.DROP
    if is_instagram_system_message(content, record_type):
        return LineKind.SYSTEM
    return LineKind.KEEP


def parse_instagram_messages(raw_text: str, tz: tzinfo) -> list[ParsedMessage]:
    records = _load_records(raw_text)
    if records is None:
        return []

    messages: list[ParsedMessage] = []
    for record in records:
        if not isinstance(record, dict):
            continue
        timestamp = parse_epoch_ms(record.get("timestamp_ms"), tz)
        if timestamp is None:
            continue
        sender = str(record.get("sender_name") or UNKNOWN_SENDER)
        content = str(record.get("content") or "").strip()
        record_type = str(record.get("type") or INSTAGRAM_GENERIC_TYPE)

        kind = classify_instagram_record(content, record_type)
        if kind is LineKind.SYSTEM:
            messages.append(
                ParsedMessage(
                    sender=SYSTEM_SENDER,
                    content=content,
                    timestamp=timestamp,
                    metadata={
                        "platform": Platform.INSTAGRAM.value,
                        "messageType": "system",
                        "originalSender": sender,
                        "type": record_type,
                    },
                )
            )
        elif kind is LineKind.KEEP:
            messages.append(
                ParsedMessage(
                    sender=sender,
                    content=content,
                    timestamp=timestamp,
                    metadata={"platform": Platform.INSTAGRAM.value},
                )
            )
    return messages
