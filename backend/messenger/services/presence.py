"""
Presence tracking.

Entries are add-only: there is no logout or expiry, so a user stays listed as
online until the process restarts and the map grows with every distinct login.
"""
from messenger.core.timeutil import iso_timestamp
from messenger.models import PresenceEntry, User


class PresenceTracker:
    def __init__(self):
        # user id -> entry, kept in first-login order
        self._entries: dict[str, PresenceEntry] = {}

    def mark_online(self, user: User) -> PresenceEntry:
        """Insert or refresh the entry for a user with the current time as last seen."""
        entry = PresenceEntry(id=user.id, name=user.name, email=user.email, last_seen=iso_timestamp())
        self._entries[user.id] = entry
        return entry

    def is_online(self, user_id: str) -> bool:
        return user_id in self._entries

    def list_online_except(self, user_id: str) -> list[PresenceEntry]:
        return [e for e in self._entries.values() if e.id != user_id]
