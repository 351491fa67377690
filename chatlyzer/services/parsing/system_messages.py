"""Platform-generated notices that are not written by a participant.

The WhatsApp table is matched as a prefix of the message body. New locales
only need a new entry here.
"""

WHATSAPP_SYSTEM_PHRASES: dict[str, tuple[str, ...]] = {
    "en": (
        "Messages and calls are end-to-end encrypted.",
        "You joined using an invite link",
        "You're now an admin",
        "You created this group",
        "You were added",
        "You added",
        "You removed",
        "You left",
        "You changed the group description",
        "You changed the group name",
        "You changed the group icon",
        "This message was deleted",
        "Missed voice call",
        "Missed video call",
    ),
    "tr": (
        "Mesajlar ve aramalar uçtan uca şifrelenmiştir.",
        "Bir davet bağlantısı kullanarak katıldınız",
        "Artık bir yöneticisiniz",
        "Bu grubu sen oluşturdun",
        "Eklendiniz",
        "Eklediniz",
        "Çıkardınız",
        "Gruptan ayrıldınız",
        "Grup açıklamasını değiştirdiniz",
        "Grup adını değiştirdiniz",
        "Grup simgesini değiştirdiniz",
        "Bu mesaj silindi",
        "Cevapsız sesli arama",
        "Cevapsız görüntülü arama",
    ),
    "de": (
        "Nachrichten und Anrufe sind Ende-zu-Ende-verschlüsselt.",
        "Du bist über einen Einladungslink beigetreten",
        "Du bist jetzt Admin",
        "Du hast diese Gruppe erstellt",
        "Du wurdest hinzugefügt",
        "Du hast hinzugefügt",
        "Du hast entfernt",
        "Du hast die Gruppe verlassen",
        "Du hast die Gruppenbeschreibung geändert",
        "Du hast den Gruppennamen geändert",
        "Du hast das Gruppenbild geändert",
        "Diese Nachricht wurde gelöscht",
        "Verpasster Sprachanruf",
        "Verpasster Videoanruf",
    ),
}

# Substrings, matched case-insensitively anywhere in the content.
INSTAGRAM_SYSTEM_KEYWORDS: tuple[str, ...] = (
    "unsent a message",
    "missed a video call",
    "missed a call",
    "created group",
    "added you to the group",
)

INSTAGRAM_GENERIC_TYPE = "Generic"

_WHATSAPP_PREFIXES = tuple(phrase for phrases in WHATSAPP_SYSTEM_PHRASES.values() for phrase in phrases)


def is_whatsapp_system_message(content: str) -> bool:
    return content.startswith(_WHATSAPP_PREFIXES)


def whatsapp_system_language(content: str) -> str | None:
    for language, phrases in WHATSAPP_SYSTEM_PHRASES.items():
        if content.startswith(phrases):
            return language
    return None


def is_instagram_system_message(content: str, record_type: str = INSTAGRAM_GENERIC_TYPE) -> bool:
    if record_type != INSTAGRAM_GENERIC_TYPE:
        return True
    lowered = content.lower()
    return any(keyword in lowered for keyword in INSTAGRAM_SYSTEM_KEYWORDS)
