"""
Services Module

In-memory stores and the background reply simulator:
- CredentialStore: user records, registration and password verification
- ContactDirectory: per-user contact lists with last-message previews
- MessageStore: per-user, per-chat ordered message logs
- PresenceTracker: users that have logged in and their last-seen time
- ReplySimulator: deferred canned replies from regular contacts
"""
from .credential_store import CredentialStore
from .contact_directory import ContactDirectory
from .message_store import MessageStore
from .presence import PresenceTracker
from .reply_simulator import ReplySimulator, CANNED_REPLIES

__all__ = [
    "CredentialStore",
    "ContactDirectory",
    "MessageStore",
    "PresenceTracker",
    "ReplySimulator",
    "CANNED_REPLIES",
]
