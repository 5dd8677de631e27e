# messenger/models/contact.py
"""
Contact record.

One row exists per (owner, peer) pair. Rows are one-directional: adding a
contact never creates the reciprocal row for the peer. The row id is also the
chat id that addresses the owner's message partition.
"""
import uuid
from pydantic import BaseModel, Field

from messenger.core.timeutil import iso_timestamp

# contact_id of the system contact created at registration
SYSTEM_CONTACT_ID = "oleg-system"


class Contact(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))  # Doubles as chat id
    user_id: str  # Owner
    contact_id: str  # Peer user id, or SYSTEM_CONTACT_ID
    name: str
    email: str
    last_message: str  # Preview of the newest message
    time: str = Field(default_factory=iso_timestamp)  # Time of the newest message
    unread: int = 0  # Only ever increased (no mark-read operation)
    online: bool = False  # Snapshot taken when the row was created
    is_oleg: bool = False  # True for the system contact
