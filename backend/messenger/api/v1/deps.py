from fastapi import Depends, Header, Request
from pydantic import BaseModel

from messenger.core.errors import MissingToken
from messenger.core.security import decode_access_token
from messenger.core.state import AppState


class CurrentUser(BaseModel):
    """Identity carried by a verified access token."""
    user_id: str
    email: str


def get_state(request: Request) -> AppState:
    """FastAPI dependency returning the AppState of the app serving the request."""
    return request.app.state.messenger


async def get_current_user(
    authorization: str | None = Header(default=None),
    state: AppState = Depends(get_state),
) -> CurrentUser:
    """
    FastAPI dependency to get the identity of the caller.

    Extracts the bearer token from the Authorization header and verifies its
    signature and expiry. The token is the only authorization gate; no user
    lookup is performed.

    Raises:
        MissingToken (401): No token in the Authorization header
        InvalidToken (403): Token is malformed, tampered with or expired
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise MissingToken()

    payload = decode_access_token(token, state.settings.jwt_secret)
    return CurrentUser(user_id=payload["userId"], email=payload["email"])
