# messenger/models/presence.py
from pydantic import BaseModel, Field

from messenger.core.timeutil import iso_timestamp


class PresenceEntry(BaseModel):
    """A logged-in user. Entries are never removed (there is no logout)."""
    id: str  # User id
    name: str
    email: str
    last_seen: str = Field(default_factory=iso_timestamp)
