import json
import re

from chatlyzer.services.parsing.errors import UnidentifiedPlatformError
from chatlyzer.services.parsing.types import Platform

WHATSAPP_OLD_SIGNATURE = re.compile(r"\d{1,2}\.\d{1,2}\.\d{2,4},\s\d{2}:\d{2}\s-\s")
WHATSAPP_NEW_SIGNATURE = re.compile(r"\[\d{1,2}\.\d{1,2}\.\d{4},\s\d{2}:\d{2}:\d{2}\]")
TELEGRAM_SIGNATURE = re.compile(r"\[\d{2}\.\d{2}\.\d{4}\s\d{2}:\d{2}:\d{2}\]")
DISCORD_SIGNATURE = re.compile(r"\[\d{2}-[A-Za-z]{3}-\d{2}\s\d{2}:\d{2}:\d{2}\]")


def looks_like_instagram(raw_text: str) -> bool:
    try:
        payload = json.loads(raw_text)
    except (ValueError, RecursionError):
        return False
    if not isinstance(payload, list) or not payload:
        return False
    first = payload[0]
    return isinstance(first, dict) and bool(first.get("sender_name"))


def detect_platform(raw_text: str) -> Platform:
    """Guess the export platform from its content.

    Order matters: WhatsApp's bracketed header is checked before Telegram's,
    which differs only by the comma after the date.
    """
    if WHATSAPP_OLD_SIGNATURE.search(raw_text) or WHATSAPP_NEW_SIGNATURE.search(raw_text):
        return Platform.WHATSAPP
    if looks_like_instagram(raw_text):
        return Platform.INSTAGRAM
    if TELEGRAM_SIGNATURE.search(raw_text):
        return Platform.TELEGRAM
    if DISCORD_SIGNATURE.search(raw_text):
        return Platform.DISCORD
    if raw_text.strip():
        return Platform.GENERIC
    raise UnidentifiedPlatformError()
