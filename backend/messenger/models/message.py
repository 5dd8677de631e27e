# messenger/models/message.py
"""
Message record.
Immutable once created; may only be deleted from its chat log.
"""
import uuid
from typing import Any, Literal
from pydantic import BaseModel, Field

from messenger.core.timeutil import iso_timestamp


class Message(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    chat_id: str
    text: str | None = None
    type: str = "text"
    file: dict[str, Any] | None = None  # Attachment metadata as sent by the client
    time: str = Field(default_factory=iso_timestamp)
    sender: Literal["user", "contact"]
