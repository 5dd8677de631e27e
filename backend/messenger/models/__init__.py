# messenger/models/__init__.py
"""
In-memory domain records.

Models exported:
- User: Registered account with its password hash
- Contact: One owner's entry for a peer (doubles as the chat id)
- Message: A single entry in an owner's chat log
- PresenceEntry: Marks a user as logged in, with last-seen time
"""
from .user import User
from .contact import Contact, SYSTEM_CONTACT_ID
from .message import Message
from .presence import PresenceEntry
