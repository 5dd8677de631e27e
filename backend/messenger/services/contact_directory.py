"""
Contact directory.

Holds every Contact row in insertion order. Rows are owned by a single user;
adding a peer never creates the reverse row on the peer's side.
"""
import logging
from typing import TYPE_CHECKING

from messenger.core.errors import DuplicateContact, PeerNotFound
from messenger.core.timeutil import iso_timestamp
from messenger.models import Contact, SYSTEM_CONTACT_ID
from messenger.services.presence import PresenceTracker

if TYPE_CHECKING:
    from messenger.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

SYSTEM_CONTACT_NAME = "Oleg"
SYSTEM_CONTACT_EMAIL = "support@oleg-messenger.com"
SYSTEM_CONTACT_PREVIEW = "Thank you for choosing us! Oleg is a very secure messenger"
NEW_CONTACT_PREVIEW = "Start a conversation"


class ContactDirectory:
    def __init__(self, presence: PresenceTracker):
        self._contacts: list[Contact] = []
        self._presence = presence

    def list_for_user(self, user_id: str) -> list[Contact]:
        """Contacts owned by the user, in the order they were created."""
        return [c for c in self._contacts if c.user_id == user_id]

    def find(self, contact_id: str, owner_user_id: str) -> Contact | None:
        for c in self._contacts:
            if c.id == contact_id and c.user_id == owner_user_id:
                return c
        return None

    def add_system_contact(self, owner_user_id: str) -> Contact:
        """
        Create the system contact for a freshly registered user.
        It starts with one unread welcome message and is always shown online.
        """
        contact = Contact(
            user_id=owner_user_id,
            contact_id=SYSTEM_CONTACT_ID,
            name=SYSTEM_CONTACT_NAME,
            email=SYSTEM_CONTACT_EMAIL,
            last_message=SYSTEM_CONTACT_PREVIEW,
            unread=1,
            online=True,
            is_oleg=True,
        )
        self._contacts.append(contact)
        return contact

    def add_contact(self, owner_user_id: str, peer_email: str, users: "CredentialStore") -> Contact:
        """
        Add another registered user to the owner's contacts.

        Args:
            owner_user_id: User adding the contact
            peer_email: Exact email of the user to add
            users: Credential store used to resolve the email

        Raises:
            PeerNotFound: No user other than the owner has this email
            DuplicateContact: The owner already has a contact with this email
        """
        peer = users.find_peer(peer_email, exclude_user_id=owner_user_id)
        if peer is None:
            raise PeerNotFound()
        if any(c.user_id == owner_user_id and c.email == peer_email for c in self._contacts):
            raise DuplicateContact()

        contact = Contact(
            user_id=owner_user_id,
            contact_id=peer.id,
            name=peer.name,
            email=peer.email,
            last_message=NEW_CONTACT_PREVIEW,
            unread=0,
            online=self._presence.is_online(peer.id),  # not refreshed later
            is_oleg=False,
        )
        self._contacts.append(contact)
        logger.info("[contacts] user=%s added contact=%s peer=%s", owner_user_id, contact.id, peer.id)
        return contact

    def touch_on_message(self, contact_id: str, owner_user_id: str, preview: str, timestamp: str | None = None) -> None:
        """Update the last-message preview and time. Unknown contacts are ignored."""
        contact = self.find(contact_id, owner_user_id)
        if contact is None:
            return
        contact.last_message = preview
        contact.time = timestamp or iso_timestamp()

    def increment_unread(self, contact_id: str, owner_user_id: str) -> None:
        contact = self.find(contact_id, owner_user_id)
        if contact is None:
            return
        contact.unread += 1
