"""
Custom exceptions for the session store.
These exceptions should be caught and converted to HTTP responses in the service layer.
"""

from ..constants import MESSAGE_NOT_FOUND, QUESTION_REQUIRED, SESSION_NOT_FOUND


class SessionStoreError(Exception):
    """Base exception for all session store errors."""
    pass


class SessionNotFound(SessionStoreError):
    """Raised when a session id is not in the store."""

    def __init__(self, session_id: str | None = None):
        self.session_id = session_id
        super().__init__(SESSION_NOT_FOUND)


class MessageNotFound(SessionStoreError):
    """Raised when a session holds no message with the given id."""

    def __init__(self, message_id: str | None = None):
        self.message_id = message_id
        super().__init__(MESSAGE_NOT_FOUND)


class InvalidQuestion(SessionStoreError):
    """Raised when a question is missing, empty or whitespace-only."""

    def __init__(self):
        super().__init__(QUESTION_REQUIRED)
