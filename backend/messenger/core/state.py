# messenger/core/state.py
"""
Application state container.

Each FastAPI app built by create_app() owns one AppState, so tests (or several
apps in one process) never share stores. Handlers reach it through the
get_state dependency instead of importing module-level globals.
"""
from dataclasses import dataclass

from messenger.config import Settings
from messenger.services import (
    ContactDirectory,
    CredentialStore,
    MessageStore,
    PresenceTracker,
    ReplySimulator,
)


@dataclass
class AppState:
    settings: Settings
    presence: PresenceTracker
    messages: MessageStore
    contacts: ContactDirectory
    credentials: CredentialStore
    replies: ReplySimulator

    @classmethod
    def build(cls, settings: Settings) -> "AppState":
        presence = PresenceTracker()
        messages = MessageStore()
        contacts = ContactDirectory(presence)
        credentials = CredentialStore(contacts, messages)
        replies = ReplySimulator(
            messages,
            contacts,
            delay_min_ms=settings.reply_delay_min_ms,
            delay_max_ms=settings.reply_delay_max_ms,
        )
        return cls(
            settings=settings,
            presence=presence,
            messages=messages,
            contacts=contacts,
            credentials=credentials,
            replies=replies,
        )
