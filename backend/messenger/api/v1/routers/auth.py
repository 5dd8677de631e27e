import logging
from fastapi import APIRouter, Depends, status

from messenger.api.v1.deps import get_state
from messenger.core.errors import ValidationError
from messenger.core.security import create_access_token
from messenger.core.state import AppState
from messenger.schemas import AuthOut, LoginIn, RegisterIn, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn, state: AppState = Depends(get_state)):
    """
    Register a new user account.

    Creates the user, their system contact and its welcome message, then
    returns an access token so the client is signed in right away. Registration
    does not mark the user online; only login does.

    Errors (400):
        - Missing name, email or password
        - Email already registered (exact match)
    """
    if not body.name or not body.email or not body.password:
        raise ValidationError("All fields are required")
    user = await state.credentials.register(body.name, body.email, body.password)
    token = create_access_token(user.id, user.email, state.settings.jwt_secret)
    return AuthOut(message="User registered successfully", token=token, user=UserOut.from_user(user))


@router.post("/login", response_model=AuthOut)
async def login(body: LoginIn, state: AppState = Depends(get_state)):
    """
    Authenticate a user and issue an access token valid for 24 hours.

    Unknown email and wrong password produce the same 400 response.
    A successful login marks the user online.
    """
    if not body.email or not body.password:
        raise ValidationError("Email and password are required")
    user = await state.credentials.verify(body.email, body.password)
    token = create_access_token(user.id, user.email, state.settings.jwt_secret)
    state.presence.mark_online(user)
    logger.info("[auth] login user=%s", user.id)
    return AuthOut(message="Logged in successfully", token=token, user=UserOut.from_user(user))
