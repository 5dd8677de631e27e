"""
Pydantic schemas for registration and login.
Fields are optional so that a missing field is reported as a 400 by the
handler instead of a framework validation error.
"""
from pydantic import BaseModel

from messenger.models import PresenceEntry, User

__all__ = ["RegisterIn", "LoginIn", "UserOut", "AuthOut", "OnlineUserOut"]


class RegisterIn(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginIn(BaseModel):
    email: str | None = None
    password: str | None = None


class UserOut(BaseModel):
    """Public user summary (never includes the password hash)."""
    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(id=user.id, name=user.name, email=user.email)


class AuthOut(BaseModel):
    message: str  # Human readable status
    token: str  # Bearer token for subsequent requests
    user: UserOut


class OnlineUserOut(BaseModel):
    id: str
    name: str
    email: str
    lastSeen: str

    @classmethod
    def from_entry(cls, entry: PresenceEntry) -> "OnlineUserOut":
        return cls(id=entry.id, name=entry.name, email=entry.email, lastSeen=entry.last_seen)
