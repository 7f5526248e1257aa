"""
Session Management Module

In-memory chat sessions: the store that owns them, the service layer that
maps store errors to HTTP errors, and the REST routes.
"""

from .exceptions import InvalidQuestion, MessageNotFound, SessionNotFound, SessionStoreError
from .session import AssistantMessage, Feedback, Session, SessionSummary, UserMessage
from .store import SessionStore

__all__ = [
    "SessionStore",
    "Session",
    "SessionSummary",
    "UserMessage",
    "AssistantMessage",
    "Feedback",
    "SessionStoreError",
    "SessionNotFound",
    "MessageNotFound",
    "InvalidQuestion",
]
