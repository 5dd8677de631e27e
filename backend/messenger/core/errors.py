# messenger/core/errors.py
"""
Domain errors.
Every error carries the HTTP status and the client-facing message; the
application renders them all as {"error": message}.
"""
from fastapi import status


class MessengerError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(MessengerError):
    message = "Invalid request"


class DuplicateEmail(MessengerError):
    message = "A user with this email already exists"


class DuplicateContact(MessengerError):
    message = "This user is already in your contacts"


class InvalidCredentials(MessengerError):
    # Same message for unknown email and wrong password
    message = "Invalid email or password"


class MissingToken(MessengerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Access token is missing"


class InvalidToken(MessengerError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class PeerNotFound(MessengerError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No user with this email was found"


class UnmatchedRoute(MessengerError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Route not found"
