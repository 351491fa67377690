from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Platform(str, Enum):
    WHATSAPP = "whatsapp"
    INSTAGRAM = "instagram"
    TELEGRAM = "telegram"
    DISCORD = "discord"
    GENERIC = "generic"


class LineKind(str, Enum):
    """What a converter does with one line or record."""

    KEEP = "keep"
    DROP = "drop"
    SYSTEM = "system"


SYSTEM_SENDER = "System"
UNKNOWN_SENDER = "Unknown"


@dataclass(slots=True)
class ParsedMessage:
    sender: str
    content: str
    timestamp: datetime
    metadata: dict = field(default_factory=dict)


@dataclass(slots=True)
class ConversionResult:
    messages: list[dict]
    title: str
    platform: Platform
