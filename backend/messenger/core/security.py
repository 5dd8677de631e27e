# messenger/core/security.py
"""
Security module for authentication.
Handles password hashing and signed, time-limited access tokens.

Tokens are stateless: nothing is stored server-side, so there is no revocation.
A leaked token stays valid until it expires.
"""
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext

from messenger.core.errors import InvalidToken
from messenger.core.timeutil import utc_now

# Password hashing context
# Argon2 is a modern, slow, salted password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

# Tokens always expire exactly 24 hours after issuance
ACCESS_TOKEN_EXPIRE_HOURS = 24
JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to keep in memory, never returned to clients)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: str, email: str, secret: str, now: dt.datetime | None = None) -> str:
    """
    Create a signed access token for a user.

    Args:
        user_id: User identifier
        email: User email, carried so handlers need no user lookup
        secret: Process-wide signing key
        now: Issuance time (defaults to the current UTC time)

    Token payload includes:
        - userId: User identifier
        - email: User email
        - iat: Issued at timestamp
        - exp: Expiration timestamp (iat + 24h)
    """
    now = now or utc_now()
    payload = {
        "userId": user_id,
        "email": email,
        "iat": now,
        "exp": now + dt.timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALG)


def decode_access_token(token: str, secret: str) -> dict:
    """
    Decode and validate an access token.

    Returns:
        Token payload with at least userId and email

    Raises:
        InvalidToken: If the signature does not match, the token is malformed,
            expired, or lacks the identity claims
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALG],
            options={"require": ["exp", "iat"]},
        )
    except jwt.InvalidTokenError as e:
        raise InvalidToken() from e
    if not payload.get("userId") or not payload.get("email"):
        raise InvalidToken()
    return payload
