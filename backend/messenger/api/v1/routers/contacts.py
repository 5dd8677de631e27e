from fastapi import APIRouter, Depends, status

from messenger.api.v1.deps import CurrentUser, get_current_user, get_state
from messenger.core.errors import ValidationError
from messenger.core.state import AppState
from messenger.schemas import AddContactIn, ContactOut

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("", response_model=list[ContactOut])
async def list_contacts(user: CurrentUser = Depends(get_current_user), state: AppState = Depends(get_state)):
    """Contacts owned by the caller, oldest first (the system contact comes first)."""
    return [ContactOut.from_contact(c) for c in state.contacts.list_for_user(user.user_id)]


@router.post("", response_model=ContactOut, status_code=status.HTTP_201_CREATED)
async def add_contact(
    body: AddContactIn,
    user: CurrentUser = Depends(get_current_user),
    state: AppState = Depends(get_state),
):
    """
    Add a registered user to the caller's contacts by email.

    Only the caller's side is created; the peer does not get a contact back.

    Errors:
        - 400: Missing email, or the user is already a contact
        - 404: No other user has this email (adding yourself lands here too)
    """
    if not body.email:
        raise ValidationError("Email is required")
    contact = state.contacts.add_contact(user.user_id, body.email, state.credentials)
    return ContactOut.from_contact(contact)
