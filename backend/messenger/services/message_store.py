"""
Message store.

Messages are partitioned by owner user id, then by chat id. Each side of a
conversation only ever sees its own partition: nothing is mirrored to the peer.
Partitions are never evicted.
"""
from messenger.models import Message


class MessageStore:
    def __init__(self):
        # user id -> chat id -> messages in insertion order
        self._messages: dict[str, dict[str, list[Message]]] = {}

    def list(self, user_id: str, chat_id: str) -> list[Message]:
        """
        Return the full chat log in insertion order.
        Unknown users or chats yield an empty list rather than an error.
        """
        return list(self._messages.get(user_id, {}).get(chat_id, []))

    def append(self, user_id: str, chat_id: str, message: Message) -> Message:
        """Append a message, creating the user and chat partitions on first use."""
        self._messages.setdefault(user_id, {}).setdefault(chat_id, []).append(message)
        return message

    def delete(self, user_id: str, chat_id: str, message_id: str) -> bool:
        """
        Remove the message with the given id from the chat log.

        Returns:
            True if a message was removed. Missing users, chats or messages are
            not errors; callers acknowledge the request either way.
        """
        log = self._messages.get(user_id, {}).get(chat_id)
        if not log:
            return False
        for i, m in enumerate(log):
            if m.id == message_id:
                del log[i]
                return True
        return False
