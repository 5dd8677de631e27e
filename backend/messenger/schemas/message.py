"""
Pydantic schemas for message endpoints.
"""
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, field_validator, model_serializer

from messenger.models import Message

__all__ = ["FileAttachment", "SendMessageIn", "MessageOut", "AckOut"]


class FileAttachment(BaseModel):
    """Attachment metadata supplied by the client; unknown keys are kept, null values included."""
    model_config = ConfigDict(extra="allow")

    name: str | None = None


class SendMessageIn(BaseModel):
    chatId: str | None = None
    text: str | None = None
    type: str | None = None  # Falls back to "text" when absent or null
    file: FileAttachment | None = None

    @field_validator("chatId", mode="before")
    @classmethod
    def _numeric_chat_id(cls, v):
        # Clients may send numeric chat ids; they address the same partition as their string form
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class MessageOut(BaseModel):
    id: str
    chatId: str
    text: str | None = None  # Omitted from responses when absent
    type: str
    file: dict[str, Any] | None = None  # Omitted from responses when absent; inner nulls are kept
    time: str
    sender: Literal["user", "contact"]

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler) -> dict[str, Any]:
        data = handler(self)
        for key in ("text", "file"):
            if data.get(key) is None:
                data.pop(key, None)
        return data

    @classmethod
    def from_message(cls, m: Message) -> "MessageOut":
        return cls(id=m.id, chatId=m.chat_id, text=m.text, type=m.type, file=m.file, time=m.time, sender=m.sender)


class AckOut(BaseModel):
    message: str
