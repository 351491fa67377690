# Invisible marks some exporters put in front of a header line.
LEADING_MARKS = "\ufeff\u200e\u200f"


def split_lines(raw_text: str) -> list[str]:
    return raw_text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def non_blank_lines(raw_text: str) -> list[str]:
    return [line for line in split_lines(raw_text) if line.strip()]


def strip_leading_marks(line: str) -> str:
    return line.lstrip(LEADING_MARKS)


def split_sender(body: str) -> tuple[str, str] | None:
    """Split ``"Sender: text"`` on the first colon.

    Returns None when there is no colon or the colon is the first character.
    """
    colon_index = body.find(":")
    if colon_index <= 0:
        return None
    return body[:colon_index].strip(), body[colon_index + 1 :].strip()
