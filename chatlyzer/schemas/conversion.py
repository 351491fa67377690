from datetime import datetime

from pydantic import BaseModel, Field

from chatlyzer.services.parsing.types import Platform


class ConversionRequest(BaseModel):
    raw_text: str
    platform: Platform | None = None
    timezone_name: str | None = None


class MessageRead(BaseModel):
    sender: str
    content: str
    timestamp: datetime
    metadata: dict | None = None


class ConversionRead(BaseModel):
    platform: Platform
    title: str
    message_count: int
    participants: list[str]
    messages: list[MessageRead]


class AnalysisPayloadRead(BaseModel):
    platform: Platform
    title: str
    participants: list[str]
    total_messages: int
    messages: list[MessageRead] = Field(default_factory=list)
