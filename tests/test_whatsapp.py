from datetime import datetime, timezone

import pytest

from chatlyzer.services.parsing.system_messages import WHATSAPP_SYSTEM_PHRASES, is_whatsapp_system_message
from chatlyzer.services.parsing.types import LineKind
from chatlyzer.services.parsing.whatsapp import classify_whatsapp_body, match_header, parse_whatsapp_messages

UTC = timezone.utc


def test_old_format_keeps_order_and_count():
    text = "\n".join(
        [
            "01.02.23, 10:00 - Ana: one",
            "01.02.23, 10:01 - Ben: two",
            "01.02.23, 10:02 - Ana: three",
            "01.02.23, 10:03 - Cem: four",
        ]
    )
    messages = parse_whatsapp_messages(text, UTC)
    assert [m.content for m in messages] == ["one", "two", "three", "four"]
    assert [m.sender for m in messages] == ["Ana", "Ben", "Ana", "Cem"]
    assert all(m.metadata == {"platform": "whatsapp"} for m in messages)


def test_multiline_messages_are_folded():
    messages = parse_whatsapp_messages("31.12.23, 23:59 - Alice: Hello\nworld", UTC)
    assert len(messages) == 1
    assert messages[0].sender == "Alice"
    assert messages[0].content == "Hello\nworld"
    assert messages[0].timestamp == datetime(2023, 12, 31, 23, 59, tzinfo=UTC)


@pytest.mark.parametrize(("year", "expected"), [("49", 2049), ("50", 2050), ("51", 1951), ("99", 1999), ("00", 2000)])
def test_two_digit_years_use_pivot(year, expected):
    messages = parse_whatsapp_messages(f"01.01.{year}, 00:00 - A: hi", UTC)
    assert messages[0].timestamp.year == expected


def test_old_format_accepts_four_digit_year():
    messages = parse_whatsapp_messages("7.3.2022, 08:15 - A: hi", UTC)
    assert messages[0].timestamp == datetime(2022, 3, 7, 8, 15, tzinfo=UTC)


def test_new_format_reads_seconds():
    messages = parse_whatsapp_messages("[01.01.2024, 09:00:42] Bob: Hey", UTC)
    assert messages[0].timestamp == datetime(2024, 1, 1, 9, 0, 42, tzinfo=UTC)


def test_mixed_formats_in_one_export():
    text = "01.01.24, 09:00 - Bob: old\n[01.01.2024, 09:01:00] Alice: new"
    messages = parse_whatsapp_messages(text, UTC)
    assert [(m.sender, m.content) for m in messages] == [("Bob", "old"), ("Alice", "new")]


@pytest.mark.parametrize(
    "body",
    [
        "Messages and calls are end-to-end encrypted. No one outside of this chat can read them.",
        "Nachrichten und Anrufe sind Ende-zu-Ende-verschlüsselt. Niemand außerhalb dieses Chats kann sie lesen.",
        "Mesajlar ve aramalar uçtan uca şifrelenmiştir. Bu sohbetin dışından hiç kimse okuyamaz.",
    ],
)
def test_encryption_notice_is_a_system_message(body):
    text = f"01.01.24, 09:00 - Bob: first line\n01.01.24, 09:01 - {body}\ncontinuation"
    messages = parse_whatsapp_messages(text, UTC)
    assert [m.sender for m in messages] == ["Bob", "System"]
    assert messages[0].content == "first line"
    assert messages[1].content == body
    assert messages[1].metadata["messageType"] == "system"


def test_system_message_after_sender_colon():
    messages = parse_whatsapp_messages("[01.01.2024, 09:00:00] Bob: This message was deleted", UTC)
    assert len(messages) == 1
    assert messages[0].sender == "System"
    assert messages[0].metadata == {"platform": "whatsapp", "messageType": "system", "language": "en"}


def test_system_message_language_is_recorded():
    messages = parse_whatsapp_messages("[01.01.2024, 09:00:00] Cem: Cevapsız sesli arama", UTC)
    assert messages[0].metadata["language"] == "tr"


def test_unknown_header_without_colon_is_dropped_with_its_continuation():
    text = "01.01.24, 09:00 - Ana joined from the community\nstray line\n01.01.24, 09:01 - Ben: hi"
    messages = parse_whatsapp_messages(text, UTC)
    assert [(m.sender, m.content) for m in messages] == [("Ben", "hi")]


def test_invalid_calendar_date_skips_header():
    text = "01.01.24, 09:00 - Ana: ok\n31.02.24, 09:01 - Ben: impossible\nmore\n01.03.24, 09:02 - Cem: fine"
    messages = parse_whatsapp_messages(text, UTC)
    assert [(m.sender, m.content) for m in messages] == [("Ana", "ok"), ("Cem", "fine")]


def test_empty_content_is_not_emitted():
    messages = parse_whatsapp_messages("01.01.24, 09:00 - Ana: \n01.01.24, 09:01 - Ben: hi", UTC)
    assert [m.sender for m in messages] == ["Ben"]


def test_empty_header_body_followed_by_text_is_kept():
    messages = parse_whatsapp_messages("01.01.24, 09:00 - Ana:\nphoto caption", UTC)
    assert messages[0].content == "photo caption"


def test_text_before_first_header_is_ignored():
    messages = parse_whatsapp_messages("Chat export\n\n01.01.24, 09:00 - Ana: hi", UTC)
    assert len(messages) == 1


def test_direction_mark_before_header_is_ignored():
    messages = parse_whatsapp_messages("\u200e[01.01.2024, 09:00:00] Ana: \u200eimage omitted", UTC)
    assert messages[0].sender == "Ana"


def test_crlf_line_endings():
    messages = parse_whatsapp_messages("01.01.24, 09:00 - Ana: a\r\nb\r\n01.01.24, 09:01 - Ben: c\r\n", UTC)
    assert [m.content for m in messages] == ["a\nb", "c"]


def test_match_header_distinguishes_formats():
    assert match_header("[01.01.2024, 09:00:00] Bob: Hey").has_seconds is True
    assert match_header("01.01.24, 09:00 - Bob: Hey").has_seconds is False
    assert match_header("[01.01.2024 09:00:00] Bob: Hey") is None


def test_classify_body():
    assert classify_whatsapp_body("Bob: Hey") == (LineKind.KEEP, "Bob", "Hey")
    assert classify_whatsapp_body("You created this group") == (LineKind.SYSTEM, None, "You created this group")
    assert classify_whatsapp_body(": odd")[0] is LineKind.DROP
    assert classify_whatsapp_body("Ana changed the subject")[0] is LineKind.DROP


def test_every_language_has_the_same_number_of_phrases():
    sizes = {language: len(phrases) for language, phrases in WHATSAPP_SYSTEM_PHRASES.items()}
    assert set(sizes) == {"en", "tr", "de"}
    assert len(set(sizes.values())) == 1
    for phrases in WHATSAPP_SYSTEM_PHRASES.values():
        for phrase in phrases:
            assert is_whatsapp_system_message(f"{phrase} trailing")
