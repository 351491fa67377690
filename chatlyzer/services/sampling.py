import math


def filter_long_messages(messages: list[dict], max_chars: int) -> list[dict]:
    return [message for message in messages if len(message["content"]) < max_chars]


def sample_messages(messages: list[dict], limit: int) -> list[dict]:
    """Evenly thin out a conversation to at most ``limit`` messages, keeping order."""
    if limit <= 0:
        return []
    if len(messages) <= limit:
        return messages
    interval = len(messages) / limit
    return [messages[math.floor(i * interval)] for i in range(limit)]


def build_analysis_messages(messages: list[dict], max_chars: int, limit: int) -> list[dict]:
    return sample_messages(filter_long_messages(messages, max_chars), limit)
