"""
Pydantic schemas for contact endpoints.
"""
from pydantic import BaseModel

from messenger.models import Contact

__all__ = ["AddContactIn", "ContactOut"]


class AddContactIn(BaseModel):
    email: str | None = None  # Email of the registered user to add


class ContactOut(BaseModel):
    """
    Contact as seen by the web client.
    The id is also the chat id used by the message endpoints.
    """
    id: str
    userId: str  # Owner
    contactId: str  # Peer user id, or "oleg-system"
    name: str
    email: str
    lastMessage: str
    time: str  # ISO timestamp of the last message
    unread: int
    online: bool
    isOleg: bool

    @classmethod
    def from_contact(cls, c: Contact) -> "ContactOut":
        return cls(
            id=c.id,
            userId=c.user_id,
            contactId=c.contact_id,
            name=c.name,
            email=c.email,
            lastMessage=c.last_message,
            time=c.time,
            unread=c.unread,
            online=c.online,
            isOleg=c.is_oleg,
        )
