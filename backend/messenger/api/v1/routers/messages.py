from fastapi import APIRouter, Depends, status

from messenger.api.v1.deps import CurrentUser, get_current_user, get_state
from messenger.core.errors import ValidationError
from messenger.core.state import AppState
from messenger.models import Message
from messenger.schemas import AckOut, MessageOut, SendMessageIn

router = APIRouter(prefix="/messages", tags=["messages"])


def _preview(body: SendMessageIn) -> str:
    if body.text:
        return body.text
    if body.file and body.file.name:
        return f"File: {body.file.name}"
    return "Attachment"


@router.get("/{chat_id}", response_model=list[MessageOut])
async def list_messages(
    chat_id: str,
    user: CurrentUser = Depends(get_current_user),
    state: AppState = Depends(get_state),
):
    """Full chat log in the caller's own partition; unknown chats give []."""
    return [MessageOut.from_message(m) for m in state.messages.list(user.user_id, chat_id)]


@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
async def send_message(
    body: SendMessageIn,
    user: CurrentUser = Depends(get_current_user),
    state: AppState = Depends(get_state),
):
    """
    Append a message to one of the caller's chats.

    The message is stored in the caller's partition even if chatId matches
    none of their contacts. When it does match, the contact preview is
    updated, and for regular (non-system) contacts a canned reply is scheduled
    to land one to three seconds later.

    Errors (400):
        - chatId missing, or both text and file missing
    """
    if not body.chatId or (not body.text and not body.file):
        raise ValidationError("chatId and text/file are required")

    message = Message(
        chat_id=body.chatId,
        text=body.text,
        type=body.type or "text",
        file=body.file.model_dump(exclude_unset=True) if body.file else None,
        sender="user",
    )
    state.messages.append(user.user_id, body.chatId, message)

    contact = state.contacts.find(body.chatId, user.user_id)
    if contact is not None:
        state.contacts.touch_on_message(contact.id, user.user_id, _preview(body), message.time)
        if not contact.is_oleg:
            state.replies.schedule(user.user_id, body.chatId)

    return MessageOut.from_message(message)


@router.delete("/{chat_id}/{message_id}", response_model=AckOut)
async def delete_message(
    chat_id: str,
    message_id: str,
    user: CurrentUser = Depends(get_current_user),
    state: AppState = Depends(get_state),
):
    """Delete a message from the caller's chat. Always acknowledged, even if nothing matched."""
    state.messages.delete(user.user_id, chat_id, message_id)
    return AckOut(message="Message deleted")
