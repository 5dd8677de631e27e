"""
Reply simulator.

After a message is sent to a regular contact, a canned reply from that contact
is appended to the sender's chat once a random delay has elapsed.

Each reply runs as its own asyncio task holding the user id and chat id it was
scheduled with. Replies for the same chat can land in any order since their
delays are drawn independently. No endpoint cancels a pending reply; tasks are
only cancelled when the application shuts down.
"""
import asyncio
import functools
import logging
import random

from messenger.models import Message
from messenger.services.contact_directory import ContactDirectory
from messenger.services.message_store import MessageStore

logger = logging.getLogger(__name__)

CANNED_REPLIES = (
    "Interesting!",
    "I see",
    "Agreed",
    "Tell me more",
    "Okay, it's a deal",
)


class ReplySimulator:
    def __init__(
        self,
        messages: MessageStore,
        contacts: ContactDirectory,
        delay_min_ms: int = 1000,
        delay_max_ms: int = 3000,
        rng: random.Random | None = None,
    ):
        if delay_min_ms < 0 or delay_max_ms < delay_min_ms:
            raise ValueError("reply delay range must satisfy 0 <= min <= max")
        self._messages = messages
        self._contacts = contacts
        self._delay_min_ms = delay_min_ms
        self._delay_max_ms = delay_max_ms
        self._rng = rng or random.Random()
        # (user id, chat id) -> pending reply tasks
        self._pending: dict[tuple[str, str], set[asyncio.Task]] = {}

    def next_delay(self) -> float:
        """Delay in seconds, uniform over [min, max) milliseconds."""
        span = self._delay_max_ms - self._delay_min_ms
        return (self._delay_min_ms + self._rng.random() * span) / 1000

    def schedule(self, user_id: str, chat_id: str) -> asyncio.Task:
        """
        Schedule one reply into the user's chat. Must be called from a running event loop.
        Returns the task; the caller is not expected to await it.
        """
        delay = self.next_delay()
        key = (user_id, chat_id)
        task = asyncio.get_running_loop().create_task(self._reply_later(user_id, chat_id, delay))
        self._pending.setdefault(key, set()).add(task)
        task.add_done_callback(functools.partial(self._forget, key))
        logger.debug("[reply] scheduled user=%s chat=%s in %.3fs", user_id, chat_id, delay)
        return task

    def deliver(self, user_id: str, chat_id: str) -> Message:
        """Append a random canned reply and update the contact preview and unread count."""
        text = self._rng.choice(CANNED_REPLIES)
        reply = Message(chat_id=chat_id, text=text, sender="contact", type="text")
        self._messages.append(user_id, chat_id, reply)
        self._contacts.touch_on_message(chat_id, user_id, text, reply.time)
        self._contacts.increment_unread(chat_id, user_id)
        logger.info("[reply] delivered user=%s chat=%s message=%s", user_id, chat_id, reply.id)
        return reply

    def pending_count(self, user_id: str | None = None, chat_id: str | None = None) -> int:
        if user_id is None:
            return sum(len(tasks) for tasks in self._pending.values())
        return len(self._pending.get((user_id, chat_id), ()))

    def cancel(self, user_id: str, chat_id: str) -> int:
        """Cancel pending replies for one chat. Returns how many were cancelled."""
        tasks = list(self._pending.get((user_id, chat_id), ()))
        for t in tasks:
            t.cancel()
        return len(tasks)

    async def cancel_all(self) -> None:
        tasks = [t for tasks in self._pending.values() for t in tasks]
        for t in tasks:
            t.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def wait_idle(self) -> None:
        """Wait until every reply scheduled so far has landed."""
        while self._pending:
            tasks = [t for tasks in self._pending.values() for t in tasks]
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _reply_later(self, user_id: str, chat_id: str, delay: float) -> None:
        await asyncio.sleep(delay)
        self.deliver(user_id, chat_id)

    def _forget(self, key: tuple[str, str], task: asyncio.Task) -> None:
        tasks = self._pending.get(key)
        if tasks is not None:
            tasks.discard(task)
            if not tasks:
                del self._pending[key]
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("[reply] failed user=%s chat=%s: %s", key[0], key[1], exc, exc_info=exc)
