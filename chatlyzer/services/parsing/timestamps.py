import logging
from datetime import datetime, tzinfo

logger = logging.getLogger(__name__)

DISCORD_MONTHS = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}

YEAR_PIVOT = 50


def expand_two_digit_year(year: int) -> int:
    return 2000 + year if year <= YEAR_PIVOT else 1900 + year


def _build(year: int, month: int, day: int, hour: int, minute: int, second: int, tz: tzinfo) -> datetime | None:
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except ValueError:
        return None


def parse_whatsapp_timestamp(date_part: str, time_part: str, tz: tzinfo, has_seconds: bool = False) -> datetime | None:
    """Parse ``31.12.23`` / ``31.12.2023`` and ``23:59`` / ``23:59:59``."""
    try:
        day, month, year = (int(piece) for piece in date_part.split("."))
        time_pieces = [int(piece) for piece in time_part.split(":")]
    except ValueError:
        logger.warning("whatsapp_timestamp_unparseable", extra={"date_part": date_part, "time_part": time_part})
        return None
    if len(date_part.split(".")[2]) == 2:
        year = expand_two_digit_year(year)
    second = time_pieces[2] if has_seconds and len(time_pieces) > 2 else 0
    parsed = _build(year, month, day, time_pieces[0], time_pieces[1], second, tz)
    if parsed is None:
        logger.warning("whatsapp_timestamp_unparseable", extra={"date_part": date_part, "time_part": time_part})
    return parsed


def parse_telegram_timestamp(date_part: str, time_part: str, tz: tzinfo) -> datetime | None:
    try:
        return datetime.strptime(f"{date_part} {time_part}", "%d.%m.%Y %H:%M:%S").replace(tzinfo=tz)
    except ValueError:
        logger.warning("telegram_timestamp_unparseable", extra={"date_part": date_part, "time_part": time_part})
        return None


def parse_discord_timestamp(date_part: str, time_part: str, tz: tzinfo) -> datetime | None:
    """Parse ``31-Dec-23`` and ``23:59:59``; month names are case-sensitive and two-digit years are always 20xx."""
    day, month_name, year = date_part.split("-")
    month = DISCORD_MONTHS.get(month_name)
    if month is None:
        logger.warning("discord_month_unknown", extra={"date_part": date_part})
        return None
    hour, minute, second = (int(piece) for piece in time_part.split(":"))
    parsed = _build(2000 + int(year), month, int(day), hour, minute, second, tz)
    if parsed is None:
        logger.warning("discord_timestamp_unparseable", extra={"date_part": date_part, "time_part": time_part})
    return parsed


def parse_epoch_ms(value: object, tz: tzinfo) -> datetime | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0:
        return None
    try:
        return datetime.fromtimestamp(value / 1000, tz=tz)
    except (OverflowError, OSError, ValueError):
        logger.warning("epoch_timestamp_out_of_range", extra={"timestamp_ms": value})
        return None
