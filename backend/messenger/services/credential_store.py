"""
Credential store.

Keeps registered users in memory, hashes passwords on registration and checks
them on login. Registration also seeds the user's system chat so the system
contact never exists without its welcome message (or the other way round).
"""
import asyncio
import logging

from messenger.core.errors import DuplicateEmail, InvalidCredentials
from messenger.core.security import hash_password, verify_password
from messenger.models import Message, User
from messenger.services.contact_directory import ContactDirectory
from messenger.services.message_store import MessageStore

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Thank you for choosing us! Oleg is a very secure messenger. "
    "Your messages here are protected by modern encryption methods."
)


class CredentialStore:
    def __init__(self, contacts: ContactDirectory, messages: MessageStore):
        self._users: list[User] = []
        self._contacts = contacts
        self._messages = messages

    def find_by_email(self, email: str) -> User | None:
        # Exact match: emails are not case-normalized
        for u in self._users:
            if u.email == email:
                return u
        return None

    def find_peer(self, email: str, exclude_user_id: str) -> User | None:
        """Find a user by email, never returning the caller themselves."""
        for u in self._users:
            if u.email == email and u.id != exclude_user_id:
                return u
        return None

    async def register(self, name: str, email: str, password: str) -> User:
        """
        Create a user and seed their system chat.

        The password is hashed in a worker thread, so the request suspends here.

        Raises:
            DuplicateEmail: A user with exactly this email already exists
        """
        if self.find_by_email(email):
            raise DuplicateEmail()
        password_hash = await asyncio.to_thread(hash_password, password)
        # Another registration for the same email may have completed while hashing
        if self.find_by_email(email):
            raise DuplicateEmail()

        user = User(name=name, email=email, password_hash=password_hash)
        self._users.append(user)

        system_contact = self._contacts.add_system_contact(user.id)
        self._messages.append(
            user.id,
            system_contact.id,
            Message(chat_id=system_contact.id, text=WELCOME_MESSAGE, sender="contact", type="text"),
        )
        logger.info("[auth] registered user=%s system_chat=%s", user.id, system_contact.id)
        return user

    async def verify(self, email: str, password: str) -> User:
        """
        Return the user matching the credentials.

        Raises:
            InvalidCredentials: Unknown email or wrong password (indistinguishable)
        """
        user = self.find_by_email(email)
        if user is None:
            raise InvalidCredentials()
        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            raise InvalidCredentials()
        return user
