import logging
from collections.abc import Callable
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chatlyzer.services.parsing.detector import detect_platform
from chatlyzer.services.parsing.discord import parse_discord_messages
from chatlyzer.services.parsing.errors import InvalidTimezoneError, UnsupportedPlatformError
from chatlyzer.services.parsing.generic import parse_generic_messages
from chatlyzer.services.parsing.instagram import parse_instagram_messages
from chatlyzer.services.parsing.telegram import parse_telegram_messages
from chatlyzer.services.parsing.titles import generate_chat_title
from chatlyzer.services.parsing.types import ConversionResult, ParsedMessage, Platform
from chatlyzer.services.parsing.whatsapp import parse_whatsapp_messages

logger = logging.getLogger(__name__)

Converter = Callable[[str, tzinfo], list[ParsedMessage]]

CONVERTERS: dict[Platform, Converter] = {
    Platform.WHATSAPP: parse_whatsapp_messages,
    Platform.INSTAGRAM: parse_instagram_messages,
    Platform.TELEGRAM: parse_telegram_messages,
    Platform.DISCORD: parse_discord_messages,
    Platform.GENERIC: parse_generic_messages,
}


def resolve_platform(platform: Platform | str) -> Platform:
    try:
        return Platform(platform.lower().strip() if isinstance(platform, str) else platform)
    except ValueError as exc:
        raise UnsupportedPlatformError(platform) from exc


def resolve_timezone(timezone_name: str) -> tzinfo:
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezoneError(timezone_name) from exc


def get_converter(platform: Platform | str) -> Converter:
    return CONVERTERS[resolve_platform(platform)]


def to_message_payloads(parsed: list[ParsedMessage]) -> list[dict]:
    return [
        {
            "sender": message.sender,
            "content": message.content,
            "timestamp": message.timestamp,
            "metadata": message.metadata or None,
        }
        for message in parsed
    ]


def convert_messages(raw_text: str, platform: Platform | str | None = None, timezone_name: str = "UTC") -> list[dict]:
    resolved = resolve_platform(platform) if platform else detect_platform(raw_text)
    parsed = get_converter(resolved)(raw_text, resolve_timezone(timezone_name))
    return to_message_payloads(parsed)


def convert_chat_export(
    raw_text: str,
    platform: Platform | str | None = None,
    timezone_name: str = "UTC",
) -> ConversionResult:
    """Convert a pasted or uploaded chat export into storage-ready messages.

    An explicit platform wins over detection. Detection and converter errors
    propagate to the caller.
    """
    resolved = resolve_platform(platform) if platform else detect_platform(raw_text)
    messages = convert_messages(raw_text, resolved, timezone_name)
    title = generate_chat_title(resolved, messages)
    logger.info(
        "chat_export_converted",
        extra={"platform": resolved.value, "message_count": len(messages), "detected": not platform},
    )
    return ConversionResult(messages=messages, title=title, platform=resolved)


__all__ = [
    "CONVERTERS",
    "ConversionResult",
    "ParsedMessage",
    "Platform",
    "convert_chat_export",
    "convert_messages",
    "detect_platform",
    "generate_chat_title",
    "get_converter",
    "to_message_payloads",
]
