from collections.abc import Iterable, Mapping

from chatlyzer.services.parsing.types import SYSTEM_SENDER, UNKNOWN_SENDER, Platform

PLATFORM_DISPLAY_NAMES = {
    Platform.WHATSAPP: "WhatsApp",
    Platform.INSTAGRAM: "Instagram",
    Platform.TELEGRAM: "Telegram",
    Platform.DISCORD: "Discord",
    Platform.GENERIC: "Chat",
}


def list_participants(messages: Iterable[Mapping]) -> list[str]:
    """Distinct real senders in first-seen order."""
    seen: dict[str, None] = {}
    for message in messages:
        sender = message["sender"]
        if sender in (SYSTEM_SENDER, UNKNOWN_SENDER):
            continue
        seen.setdefault(sender, None)
    return list(seen)


def generate_chat_title(platform: Platform, messages: Iterable[Mapping]) -> str:
    participants = list_participants(messages)
    if not participants:
        label = UNKNOWN_SENDER
    else:
        label = " & ".join(participants[:2])
        if len(participants) > 2:
            label = f"{label} +{len(participants) - 2}"
    return f"{PLATFORM_DISPLAY_NAMES[Platform(platform)]}: {label}"
