# messenger/models/user.py
"""
User record.
Created on registration and never mutated or deleted afterwards.
"""
import uuid
from pydantic import BaseModel, Field

from messenger.core.timeutil import iso_timestamp


class User(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))  # Opaque unique identifier
    name: str
    email: str  # Unique among users, compared exactly as stored (no case folding)
    password_hash: str  # Argon2 hash, never returned to any caller
    created_at: str = Field(default_factory=iso_timestamp)
